"""
Rational — точная рациональная арифметика

Основа для всех остальных компонентов: показатели размерностей, коэффициенты
конверсии, показатели степени π и аддитивные сдвиги хранятся как Rational.

Rational реализован через fractions.Fraction (числитель — int, знаменатель —
положительный int, всегда в несократимом виде). Модуль добавляет поверх
Fraction явные проверки, которых нет в стандартной арифметике:

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(|numerator|, denominator) == 1, denominator > 0
2. Битовая длина numerator/denominator <= max_bits → иначе RationalOverflowError
3. Деление на ноль → DivideByZeroError (никогда не ZeroDivisionError из Fraction)
4. float не принимается как точное рациональное → InvalidDomainError
"""

import math
from fractions import Fraction
from typing import Final, Union

from dimcalc.core.config import MAX_RATIONAL_BITS
from dimcalc.core.errors import (
    DivideByZeroError,
    InvalidDomainError,
    RationalOverflowError,
)

Rational = Fraction

RationalLike = Union[int, Fraction, tuple[int, int]]

ZERO: Final[Fraction] = Fraction(0)
ONE: Final[Fraction] = Fraction(1)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def check_bounds(value: Fraction, max_bits: int = MAX_RATIONAL_BITS) -> Fraction:
    """
    Проверка, что Rational укладывается в допустимый диапазон.

    Args:
        value: Проверяемое значение
        max_bits: Максимальная битовая длина числителя и знаменателя

    Returns:
        value без изменений

    Raises:
        RationalOverflowError: Если числитель или знаменатель слишком велики
    """
    if value.numerator.bit_length() > max_bits or value.denominator.bit_length() > max_bits:
        raise RationalOverflowError(
            f"Rational {value.numerator}/{value.denominator} exceeds {max_bits}-bit range"
        )
    return value


def reduce(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение дроби к несократимому виду с положительным знаменателем.

    Examples:
        >>> reduce(6, -4)
        (-3, 2)
        >>> reduce(0, 5)
        (0, 1)
    """
    if denominator == 0:
        raise DivideByZeroError(f"Denominator must be nonzero, got {numerator}/{denominator}")

    divisor = math.gcd(numerator, denominator)
    if denominator < 0:
        divisor = -divisor
    return numerator // divisor, denominator // divisor


def make_rational(numerator: int, denominator: int = 1) -> Fraction:
    """
    Создание Rational из целых числителя и знаменателя.

    Raises:
        InvalidDomainError: Если аргументы не целые
        DivideByZeroError: Если denominator == 0
        RationalOverflowError: Если результат вне диапазона
    """
    for name, part in (("numerator", numerator), ("denominator", denominator)):
        if isinstance(part, bool) or not isinstance(part, int):
            raise InvalidDomainError(f"{name} must be an int, got {part!r}")

    n, d = reduce(numerator, denominator)
    return check_bounds(Fraction(n, d))


def as_rational(value: RationalLike) -> Fraction:
    """
    Приведение значения к Rational.

    Принимаются int, Fraction и пара (numerator, denominator).
    float и bool отвергаются: определения единиц должны быть точными.

    Raises:
        InvalidDomainError: Для неподдерживаемых типов
    """
    if isinstance(value, Fraction):
        return check_bounds(value)
    if isinstance(value, bool):
        raise InvalidDomainError(f"bool is not a rational value: {value!r}")
    if isinstance(value, int):
        return check_bounds(Fraction(value))
    if isinstance(value, tuple) and len(value) == 2:
        return make_rational(value[0], value[1])
    raise InvalidDomainError(
        f"Expected int, Fraction or (numerator, denominator), got {type(value).__name__}: {value!r}"
    )


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Fraction, b: Fraction) -> Fraction:
    return check_bounds(a + b)


def sub(a: Fraction, b: Fraction) -> Fraction:
    return check_bounds(a - b)


def mul(a: Fraction, b: Fraction) -> Fraction:
    return check_bounds(a * b)


def div(a: Fraction, b: Fraction) -> Fraction:
    """
    Деление a / b.

    Raises:
        DivideByZeroError: Если b == 0
    """
    if b.numerator == 0:
        raise DivideByZeroError(f"Division of {a} by zero rational")
    return check_bounds(a / b)


def negate(a: Fraction) -> Fraction:
    return -a


def reciprocal(a: Fraction) -> Fraction:
    """
    Обратное значение 1 / a.

    Raises:
        DivideByZeroError: Если a == 0
    """
    if a.numerator == 0:
        raise DivideByZeroError("Reciprocal of zero rational")
    return Fraction(a.denominator, a.numerator)


def compare(a: Fraction, b: Fraction) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def rational_pow(a: Fraction, exponent: int) -> Fraction:
    """
    Целая степень Rational.

    Raises:
        InvalidDomainError: Если exponent не int
        DivideByZeroError: Если a == 0 и exponent < 0
        RationalOverflowError: Если результат вне диапазона
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise InvalidDomainError(f"exponent must be an int, got {exponent!r}")
    if exponent < 0:
        return rational_pow(reciprocal(a), -exponent)

    # Оценка до возведения: не строим гигантские int ради того, чтобы их отвергнуть
    bits = max(a.numerator.bit_length(), a.denominator.bit_length())
    if bits > 1 and (bits - 1) * exponent > MAX_RATIONAL_BITS:
        raise RationalOverflowError(f"({a})**{exponent} exceeds {MAX_RATIONAL_BITS}-bit range")
    return check_bounds(a**exponent)


def gcd(a: Fraction, b: Fraction) -> Fraction:
    """
    Наибольший общий делитель двух Rational: gcd(n1, n2) / lcm(d1, d2).

    Examples:
        >>> gcd(Fraction(1, 2), Fraction(1, 3))
        Fraction(1, 6)
    """
    return Fraction(
        math.gcd(a.numerator, b.numerator),
        math.lcm(a.denominator, b.denominator),
    )


def lcm(a: Fraction, b: Fraction) -> Fraction:
    """Наименьшее общее кратное двух Rational: lcm(n1, n2) / gcd(d1, d2)."""
    return Fraction(
        math.lcm(a.numerator, b.numerator),
        math.gcd(a.denominator, b.denominator),
    )


# =============================================================================
# КОРНИ И ПРЕОБРАЗОВАНИЯ
# =============================================================================


def is_perfect_square(n: int) -> bool:
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def integer_sqrt_floor(a: Fraction) -> int:
    """
    Наибольшее целое N такое, что N <= sqrt(a).

    floor(sqrt(a)) == isqrt(floor(a)) для любого неотрицательного рационального a.

    Raises:
        InvalidDomainError: Если a < 0
    """
    if a < 0:
        raise InvalidDomainError(f"Square root of negative rational {a}")
    return math.isqrt(a.numerator // a.denominator)


def to_float(a: Fraction) -> float:
    """
    Преобразование Rational в float.

    Raises:
        RationalOverflowError: Если значение вне диапазона double
    """
    try:
        return float(a)
    except OverflowError as e:
        raise RationalOverflowError(f"Rational {a} is out of float range") from e
