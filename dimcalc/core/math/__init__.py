"""
Core math modules для dimcalc

Точная рациональная арифметика, рациональный квадратный корень и
float-примитивы конверсии.
"""

# Rational
from dimcalc.core.math.rational import (
    ONE,
    ZERO,
    Rational,
    RationalLike,
    add,
    as_rational,
    check_bounds,
    compare,
    div,
    gcd,
    integer_sqrt_floor,
    is_perfect_square,
    lcm,
    make_rational,
    mul,
    negate,
    rational_pow,
    reciprocal,
    reduce,
    sub,
    to_float,
)

# RatioSqrt
from dimcalc.core.math.ratio_sqrt import (
    SqrtEstimate,
    iter_continued_fraction,
    ratio_sqrt,
)

# Numerical Safeguards
from dimcalc.core.math.numerical_safeguards import (
    ensure_finite,
    is_close,
    is_valid_float,
    pi_power,
    promote_float,
)

__all__ = [
    # Rational: types & constants
    "Rational",
    "RationalLike",
    "ZERO",
    "ONE",
    # Rational: functions
    "add",
    "as_rational",
    "check_bounds",
    "compare",
    "div",
    "gcd",
    "integer_sqrt_floor",
    "is_perfect_square",
    "lcm",
    "make_rational",
    "mul",
    "negate",
    "rational_pow",
    "reciprocal",
    "reduce",
    "sub",
    "to_float",
    # RatioSqrt
    "SqrtEstimate",
    "iter_continued_fraction",
    "ratio_sqrt",
    # Numerical Safeguards
    "ensure_finite",
    "is_close",
    "is_valid_float",
    "pi_power",
    "promote_float",
]
