"""
RatioSqrt — рациональная аппроксимация квадратного корня

Вычисляет Rational Q такое, что |sqrt(R) - Q| <= 1/Eps, без плавающей точки:
результат детерминирован и воспроизводим на любой платформе.

АЛГОРИТМ:
    Если числитель и знаменатель R — точные квадраты, возвращается точный корень.
    Иначе sqrt(R) раскладывается в цепную дробь:

        f(x) = C1 + 1/(C2 + 1/(... + 1/(Cn + x))) = (U*x + V) / (W*x + 1)
        sqrt(R) = f(Rem)

    Остаток Rem = sqrt(P) - Q хранится парой (P, Q). Обратная величина остатка:

        1 / (sqrt(P) - Q) = A + sqrt(B),  A = Q / (P - Q^2),  B = P / (P - Q^2)^2

    Ошибка оценки V ограничена сверху:

        |f(Rem) - V| = |(U - W*V) * x / (W*x + 1)| <= |U - W*V| / I'

    где I' — целая часть обратной величины следующего остатка. Итерации
    продолжаются, пока граница ошибки не станет <= 1/Eps.

ОГРАНИЧЕНИЯ:
    Чем больше Eps, тем точнее результат и тем больше промежуточные числа.
    Выход за MAX_RATIONAL_BITS → RationalOverflowError.
"""

import logging
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterator

from dimcalc.core.config import DEFAULT_SQRT_EPS
from dimcalc.core.errors import InvalidDomainError
from dimcalc.core.math.rational import (
    ONE,
    ZERO,
    as_rational,
    check_bounds,
    integer_sqrt_floor,
    is_perfect_square,
)

logger = logging.getLogger(__name__)


# =============================================================================
# СТРУКТУРЫ
# =============================================================================


@dataclass(frozen=True)
class Remainder:
    """Остаток цепной дроби: sqrt(p) - q."""

    p: Fraction
    q: Fraction


@dataclass(frozen=True)
class SqrtEstimate:
    """Очередная оценка sqrt(R) и верхняя граница её ошибки."""

    value: Fraction
    error: Fraction


def _reciprocal(rem: Remainder) -> tuple[int, Remainder]:
    """
    Разложение 1 / (sqrt(P) - Q) = I + Rem'.

    Returns:
        (I, Rem'): целая часть и новый остаток
    """
    den = rem.p - rem.q * rem.q
    a = rem.q / den
    b = rem.p / (den * den)
    # floor(A + sqrt(B)) == (A.num + floor(sqrt(B * A.den^2))) // A.den
    integer = (a.numerator + integer_sqrt_floor(b * a.denominator * a.denominator)) // a.denominator
    return integer, Remainder(b, integer - a)


# =============================================================================
# ЦЕПНАЯ ДРОБЬ
# =============================================================================


def iter_continued_fraction(r: Fraction) -> Iterator[SqrtEstimate]:
    """
    Последовательные оценки sqrt(r) разложением в цепную дробь.

    Генератор бесконечный для иррационального sqrt(r); для точных квадратов
    возвращает одну точную оценку с нулевой ошибкой.

    Args:
        r: Неотрицательный Rational

    Raises:
        InvalidDomainError: Если r < 0
    """
    r = as_rational(r)
    if r < 0:
        raise InvalidDomainError(f"Square root of negative rational {r}")

    if is_perfect_square(r.numerator) and is_perfect_square(r.denominator):
        yield SqrtEstimate(Fraction(math.isqrt(r.numerator), math.isqrt(r.denominator)), ZERO)
        return

    # Уровень 1: f(x) = V + x
    u, v, w = ONE, Fraction(integer_sqrt_floor(r)), ZERO
    rem = Remainder(r, v)
    next_integer, next_rem = _reciprocal(rem)
    yield SqrtEstimate(v, Fraction(1, next_integer))

    while True:
        integer, rem = next_integer, next_rem
        den = w + integer
        u, v, w = v / den, (u + v * integer) / den, ONE / den
        check_bounds(v)

        next_integer, next_rem = _reciprocal(rem)
        yield SqrtEstimate(v, abs((u - v * w) / next_integer))


def ratio_sqrt(r: Fraction, eps: int = DEFAULT_SQRT_EPS) -> Fraction:
    """
    Рациональная аппроксимация sqrt(r) с ошибкой не более 1/eps.

    Args:
        r: Неотрицательный Rational
        eps: Обратная величина допустимой ошибки (положительный int)

    Returns:
        Rational Q: |sqrt(r) - Q| <= 1/eps (точный корень для точных квадратов)

    Raises:
        InvalidDomainError: Если r < 0 или eps не положительный int
        RationalOverflowError: Если промежуточные значения вне диапазона

    Examples:
        >>> ratio_sqrt(Fraction(9, 4))
        Fraction(3, 2)
        >>> abs(float(ratio_sqrt(Fraction(2))) - 2 ** 0.5) < 1e-10
        True
    """
    if isinstance(eps, bool) or not isinstance(eps, int) or eps <= 0:
        raise InvalidDomainError(f"eps must be a positive int, got {eps!r}")

    tolerance = Fraction(1, eps)
    for iteration, estimate in enumerate(iter_continued_fraction(r), start=1):
        if estimate.error <= tolerance:
            logger.debug(
                "ratio_sqrt(%s) converged after %d iterations, error bound %s",
                r,
                iteration,
                estimate.error,
            )
            return estimate.value

    # Генератор бесконечен для иррациональных корней
    raise AssertionError("unreachable")
