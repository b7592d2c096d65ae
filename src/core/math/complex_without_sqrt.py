"""
Complex Without Sqrt — Комплексные числа над произвольным полем

Модуль реализует комплексное расширение F[i] для произвольного поля F:
- Конструирование из 0, 1 или 2 элементов поля
- Сопряжение и КВАДРАТ модуля (модуль не вычисляется)
- Сложение, вычитание, унарный минус, умножение, деление
- Точное сравнение на равенство

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не требует sqrt от F (нет abs/modulus)
2. Операции чистые: операнды не изменяются, результатом всегда является новый объект
3. Никакой нормализации пары (real, imag) кроме равенства самого F
4. Деление на ноль не перехватывается: ошибка F пробрасывается как есть

ФОРМУЛЫ:
    (r1 + i·i1) * (r2 + i·i2) = (r1·r2 - i1·i2) + i·(r1·i2 + i1·r2)
    |z|² = r² + i²
    a / b = (a.real/|b|², a.imag/|b|²) * conj(b)
"""

from typing import Callable, Generic

from src.core.math.field_contract import DEFAULT_FIELD_PARSER, F, field_zero


# =============================================================================
# COMPLEX VALUE
# =============================================================================


class ComplexValue(Generic[F]):
    """
    Комплексное число real + i·imag над полем F.

    Значение изменяется только через set_real/set_imag, которые заменяют
    компоненту целиком. Все арифметические операции возвращают новый
    экземпляр. Так как значение изменяемое, оно не хэшируется.

    Examples:
        >>> from fractions import Fraction
        >>> ComplexValue(Fraction(1), Fraction(2)) * ComplexValue(Fraction(3), Fraction(-1))
        ComplexValue(real=Fraction(5, 1), imag=Fraction(5, 1))
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, real: F = 0, imag: F | None = None):
        """
        Args:
            real: Вещественная часть (default: 0)
            imag: Мнимая часть (default: ноль поля, которому принадлежит real)
        """
        self._real = real
        self._imag = field_zero(real) if imag is None else imag

    @classmethod
    def zero(cls, field: Callable[[int], F] = DEFAULT_FIELD_PARSER) -> "ComplexValue[F]":
        """
        Нулевое значение над заданным полем.

        Args:
            field: Тип поля (default: Fraction)

        Returns:
            (field(0), field(0))
        """
        return cls(field(0), field(0))

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    @property
    def real(self) -> F:
        return self._real

    @property
    def imag(self) -> F:
        return self._imag

    def set_real(self, real: F) -> None:
        self._real = real

    def set_imag(self, imag: F) -> None:
        self._imag = imag

    def as_tuple(self) -> tuple[F, F]:
        return (self._real, self._imag)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def squared_modulus(self) -> F:
        """
        Квадрат модуля: real² + imag².

        Возвращает элемент поля F. Настоящий модуль потребовал бы sqrt,
        поэтому не предоставляется.
        """
        return self._real * self._real + self._imag * self._imag

    def conjugate(self) -> "ComplexValue[F]":
        """Сопряжённое значение (real, -imag)."""
        return ComplexValue(self._real, -self._imag)

    def __add__(self, other: object) -> "ComplexValue[F]":
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return ComplexValue(self._real + other.real, self._imag + other.imag)

    def __sub__(self, other: object) -> "ComplexValue[F]":
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return ComplexValue(self._real - other.real, self._imag - other.imag)

    def __neg__(self) -> "ComplexValue[F]":
        return ComplexValue(-self._real, -self._imag)

    def __mul__(self, other: object) -> "ComplexValue[F]":
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return ComplexValue(
            self._real * other.real - self._imag * other.imag,
            self._real * other.imag + self._imag * other.real,
        )

    def __truediv__(self, other: object) -> "ComplexValue[F]":
        """
        Деление a / b = (a.real/m2, a.imag/m2) * conj(b), где m2 = |b|².

        Сначала делятся элементы поля, затем выполняется одно комплексное
        умножение.

        Raises:
            Ошибку деления поля F (ZeroDivisionError для Fraction),
            если b равно нулю.
        """
        if not isinstance(other, ComplexValue):
            return NotImplemented
        m2 = other.squared_modulus()
        return ComplexValue(self._real / m2, self._imag / m2) * other.conjugate()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return self._real == other.real and self._imag == other.imag

    def __repr__(self) -> str:
        return f"ComplexValue(real={self._real!r}, imag={self._imag!r})"


# =============================================================================
# NAMED OPERATIONS
# =============================================================================


def conjugate(z: ComplexValue[F]) -> ComplexValue[F]:
    """Сопряжение: (real, -imag)."""
    return z.conjugate()


def squared_modulus(z: ComplexValue[F]) -> F:
    """Квадрат модуля: real² + imag² (элемент поля)."""
    return z.squared_modulus()


def add(a: ComplexValue[F], b: ComplexValue[F]) -> ComplexValue[F]:
    """Покомпонентная сумма a + b."""
    return a + b


def subtract(a: ComplexValue[F], b: ComplexValue[F]) -> ComplexValue[F]:
    """Покомпонентная разность a - b."""
    return a - b


def negate(z: ComplexValue[F]) -> ComplexValue[F]:
    """Покомпонентное отрицание -z."""
    return -z


def multiply(a: ComplexValue[F], b: ComplexValue[F]) -> ComplexValue[F]:
    """Комплексное произведение a * b."""
    return a * b


def divide(a: ComplexValue[F], b: ComplexValue[F]) -> ComplexValue[F]:
    """
    Комплексное частное a / b.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        a * conj(b) / |b|²

    Raises:
        Ошибку деления поля F, если b == 0 (ZeroDivisionError для Fraction)

    Examples:
        >>> from fractions import Fraction
        >>> divide(ComplexValue(Fraction(1)), ComplexValue(Fraction(0)))  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ZeroDivisionError: Fraction(1, 0)
    """
    return a / b


def equals(a: ComplexValue[F], b: ComplexValue[F]) -> bool:
    """Точное равенство обеих компонент."""
    return a == b


def not_equals(a: ComplexValue[F], b: ComplexValue[F]) -> bool:
    """Отрицание equals."""
    return not equals(a, b)
