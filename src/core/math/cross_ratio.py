"""
Cross Ratio — Двойное отношение четырёх точек и его обращение

Двойное отношение: проективный инвариант, сохраняющийся при преобразованиях
Мёбиуса. Используется при построении триангуляций гиперболических
поверхностей, где точки заданы точно (без sqrt).

ФОРМУЛЫ:
    cross_ratio(a, b, c, d) = (d-b)(c-a) / ((d-a)(c-b))

    Обращение при фиксированных a, b, c:
    d = (cratio·a·(c-b) + b·(a-c)) / (cratio·(c-b) + (a-c))

ВЫРОЖДЕННЫЕ СЛУЧАИ:
- cross_ratio: d == a или c == b → деление на ноль поля F
- fourth_point_from_cross_ratio: cratio·(c-b) + (a-c) == 0 → деление на ноль
  поля F. Сюда попадает значение cratio, отправляющее d в бесконечность:
  точки на бесконечности в точной арифметике нет, sentinel не вводится.
"""

from src.core.math.complex_without_sqrt import ComplexValue
from src.core.math.field_contract import F


def cross_ratio(
    a: ComplexValue[F],
    b: ComplexValue[F],
    c: ComplexValue[F],
    d: ComplexValue[F],
) -> ComplexValue[F]:
    """
    Двойное отношение (d-b)(c-a) / ((d-a)(c-b)).

    Args:
        a, b, c, d: Четыре точки комплексной плоскости

    Returns:
        Значение двойного отношения

    Raises:
        Ошибку деления поля F, если d == a или c == b

    Examples:
        >>> from fractions import Fraction
        >>> pts = [ComplexValue(Fraction(k)) for k in range(4)]
        >>> cross_ratio(*pts).real
        Fraction(4, 3)
    """
    return (d - b) * (c - a) / ((d - a) * (c - b))


def fourth_point_from_cross_ratio(
    a: ComplexValue[F],
    b: ComplexValue[F],
    c: ComplexValue[F],
    cratio: ComplexValue[F],
) -> ComplexValue[F]:
    """
    Точка d такая, что cross_ratio(a, b, c, d) == cratio.

    Args:
        a, b, c: Три фиксированные точки
        cratio: Целевое значение двойного отношения

    Returns:
        Четвёртая точка d

    Raises:
        Ошибку деления поля F, если cratio·(c-b) + (a-c) == 0

    Examples:
        >>> from fractions import Fraction
        >>> a, b, c = (ComplexValue(Fraction(k)) for k in range(3))
        >>> fourth_point_from_cross_ratio(a, b, c, ComplexValue(Fraction(4, 3))).real
        Fraction(3, 1)
    """
    return (cratio * a * (c - b) + b * (a - c)) / (cratio * (c - b) + (a - c))
