"""
Тесты для Cross Ratio — двойное отношение и его обращение

Проверяемые инварианты:
1. Известные значения на вещественной прямой
2. fourth_point_from_cross_ratio обращает cross_ratio
3. Инвариантность относительно преобразований Мёбиуса
4. Вырожденные конфигурации → ZeroDivisionError поля (без sentinel)
"""

from fractions import Fraction

import pytest

from src.core.math import ComplexValue, cross_ratio, fourth_point_from_cross_ratio


def cv(real, imag=0) -> ComplexValue:
    return ComplexValue(Fraction(real), Fraction(imag))


# Четвёрки попарно различных точек (a, b, c, d)
QUADRUPLES = [
    (cv(0), cv(1), cv(2), cv(3)),
    (cv(0, 0), cv(1, 0), cv(2, 1), cv(-1, Fraction(3, 2))),
    (cv(1, 1), cv(-1, 1), cv(-1, -1), cv(1, -1)),
    (cv(Fraction(1, 3), 2), cv(5, Fraction(-2, 7)), cv(0, 1), cv(-4, -4)),
    (cv(0, 1), cv(0, -1), cv(1, 0), cv(Fraction(1, 2), Fraction(1, 2))),
]


def mobius(p: ComplexValue, q: ComplexValue, r: ComplexValue, s: ComplexValue):
    """Преобразование z -> (p z + q) / (r z + s)."""

    def apply(z: ComplexValue) -> ComplexValue:
        return (p * z + q) / (r * z + s)

    return apply


# =============================================================================
# ТЕСТЫ: Конкретные значения
# =============================================================================


class TestCrossRatioValues:
    """Известные значения двойного отношения."""

    def test_real_line_scenario(self):
        """cross_ratio(0, 1, 2, 3) == 4/3."""
        result = cross_ratio(cv(0), cv(1), cv(2), cv(3))
        assert result == cv(Fraction(4, 3))

    def test_inverse_real_line_scenario(self):
        """fourth_point_from_cross_ratio(0, 1, 2, 4/3) == 3."""
        d = fourth_point_from_cross_ratio(cv(0), cv(1), cv(2), cv(Fraction(4, 3)))
        assert d == cv(3)

    def test_d_equals_b_gives_zero(self):
        """d == b → двойное отношение равно нулю."""
        assert cross_ratio(cv(0), cv(1), cv(2), cv(1)) == cv(0)

    def test_d_equals_c_gives_one(self):
        """d == c → двойное отношение равно единице."""
        assert cross_ratio(cv(0, 1), cv(3), cv(2, -5), cv(2, -5)) == cv(1)

    def test_square_vertices(self):
        """Вершины квадрата 1+i, -1+i, -1-i, 1-i."""
        a, b, c, d = QUADRUPLES[2]
        assert cross_ratio(a, b, c, d) == cv(2)

    def test_inputs_unchanged(self):
        a, b, c, d = (cv(0), cv(1), cv(2), cv(3))
        cross_ratio(a, b, c, d)
        fourth_point_from_cross_ratio(a, b, c, cv(Fraction(4, 3)))
        assert (a, b, c, d) == (cv(0), cv(1), cv(2), cv(3))


# =============================================================================
# ТЕСТЫ: Обращение и инвариантность
# =============================================================================


class TestCrossRatioProperties:
    """Свойства двойного отношения над Fraction."""

    @pytest.mark.parametrize("a,b,c,d", QUADRUPLES)
    def test_fourth_point_round_trip(self, a, b, c, d):
        """fourth_point_from_cross_ratio(a, b, c, cross_ratio(a, b, c, d)) == d."""
        cratio = cross_ratio(a, b, c, d)
        assert fourth_point_from_cross_ratio(a, b, c, cratio) == d

    @pytest.mark.parametrize("a,b,c,d", QUADRUPLES)
    def test_cross_ratio_of_fourth_point(self, a, b, c, d):
        """Обратное направление: cross_ratio(a, b, c, fourth_point(cratio)) == cratio."""
        cratio = cross_ratio(a, b, c, d)
        target = cratio * cv(2, 1)
        point = fourth_point_from_cross_ratio(a, b, c, target)
        assert cross_ratio(a, b, c, point) == target

    @pytest.mark.parametrize("a,b,c,d", QUADRUPLES)
    def test_mobius_invariance(self, a, b, c, d):
        """Двойное отношение сохраняется преобразованием Мёбиуса."""
        # p s - q r == 4, полюс в точке 1 + 3i не совпадает с точками четвёрок
        f = mobius(cv(1, 1), cv(2), cv(0, 1), cv(3, -1))
        assert cross_ratio(f(a), f(b), f(c), f(d)) == cross_ratio(a, b, c, d)

    @pytest.mark.parametrize("a,b,c,d", QUADRUPLES)
    def test_swap_pairs_invariance(self, a, b, c, d):
        """Перестановка (a b)(c d) не меняет двойное отношение."""
        assert cross_ratio(b, a, d, c) == cross_ratio(a, b, c, d)


# =============================================================================
# ТЕСТЫ: Вырожденные конфигурации
# =============================================================================


class TestDegenerateConfigurations:
    """Деление на ноль поля пробрасывается без изменений."""

    def test_cross_ratio_d_equals_a(self):
        with pytest.raises(ZeroDivisionError):
            cross_ratio(cv(1, 1), cv(2), cv(3), cv(1, 1))

    def test_cross_ratio_c_equals_b(self):
        with pytest.raises(ZeroDivisionError):
            cross_ratio(cv(0), cv(2, 2), cv(2, 2), cv(5))

    def test_fourth_point_at_infinity(self):
        """cratio == (c-a)/(c-b) отправляет d в бесконечность."""
        with pytest.raises(ZeroDivisionError):
            fourth_point_from_cross_ratio(cv(0), cv(1), cv(2), cv(2))

    def test_fourth_point_a_equals_c_zero_ratio(self):
        """a == c и cratio == 0: знаменатель равен нулю."""
        with pytest.raises(ZeroDivisionError):
            fourth_point_from_cross_ratio(cv(1, 1), cv(0), cv(1, 1), cv(0))
