"""
Field Contract — Требования к типу поля F

Комплексное число строится над произвольным полем F (Fraction, mpq,
sympy.Rational, элементы алгебраических расширений и т.п.). Модуль фиксирует
минимальный набор операций, который F обязан поддерживать:

- Конструирование нуля из целого литерала: F(0)
- Сложение, вычитание, унарный минус, умножение, деление
- Точное сравнение на равенство
- Детерминированное текстовое представление str(x) и парсер F(text),
  дающие точный round-trip

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. От F НЕ требуется sqrt, порядок (<, >) или abs
2. Деление на ноль: ошибка самого F, здесь не перехватывается
3. Парсинг текста: ошибка самого F, здесь не перехватывается
"""

from fractions import Fraction
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class FieldElement(Protocol):
    """
    Элемент поля F.

    Структурный протокол: достаточно наличия арифметических операторов.
    Операция извлечения корня намеренно отсутствует.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


F = TypeVar("F", bound=FieldElement)

# Парсер текстового представления элемента поля: F(text)
FieldParser = Callable[[str], Any]

# Поле по умолчанию для парсинга: точные рациональные числа
DEFAULT_FIELD_PARSER: FieldParser = Fraction


# =============================================================================
# HELPERS
# =============================================================================


def field_zero(value: Any) -> Any:
    """
    Аддитивная единица поля, которому принадлежит value.

    Args:
        value: Любой элемент поля F

    Returns:
        type(value)(0)

    Examples:
        >>> field_zero(Fraction(3, 4))
        Fraction(0, 1)
        >>> field_zero(7)
        0
    """
    return type(value)(0)


def is_field_element(value: Any) -> bool:
    """
    Проверка наличия операций поля у значения (без вызова операций).

    Args:
        value: Проверяемое значение

    Returns:
        True если value структурно удовлетворяет FieldElement
    """
    return isinstance(value, FieldElement)
