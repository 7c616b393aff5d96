"""
ConversionFactor — определение конкретной единицы

ConversionFactor связывает DimensionVector с тремя рациональными параметрами:

    v [unit] == v * ratio * π^pi_exponent + translation  [base unit]

где base unit — единица той же размерности с ratio=1, pi_exponent=0,
translation=0. Translation выражен в терминах base unit, а не производной.

ПРАВИЛА КОМПОЗИЦИИ:
    multiply / divide / invert  → translation отбрасывается
        (произведение величин со смещённой шкалой аддитивно не определено)
    square / cube / sqrt        → translation сохраняется
        (та же единица в степени, а не комбинация двух разных шкал)
    power(n), n ∉ {0, 1}        → повторная композиция, translation отбрасывается

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ratio != 0 → иначе InvalidDomainError
2. Экземпляры неизменяемы; новые создаются только композицией
3. Совместимость единиц ⇔ равенство DimensionVector
"""

from dataclasses import dataclass
from fractions import Fraction
from functools import reduce as fold

from dimcalc.core.config import DEFAULT_SQRT_EPS
from dimcalc.core.domain.dimension import DIMENSIONLESS, DimensionVector
from dimcalc.core.errors import InvalidDomainError
from dimcalc.core.math.rational import (
    ONE,
    ZERO,
    RationalLike,
    add,
    as_rational,
    div,
    make_rational,
    mul,
    negate,
    rational_pow,
    reciprocal,
    sub,
)
from dimcalc.core.math.ratio_sqrt import ratio_sqrt

# =============================================================================
# CONVERSION FACTOR
# =============================================================================


@dataclass(frozen=True, slots=True)
class ConversionFactor:
    """
    Неизменяемое определение единицы: размерность, ratio, π-показатель, сдвиг.

    Равенство структурное (точное сравнение Fraction).
    """

    dimension: DimensionVector
    ratio: Fraction = ONE
    pi_exponent: Fraction = ZERO
    translation: Fraction = ZERO

    def __post_init__(self) -> None:
        if not isinstance(self.dimension, DimensionVector):
            raise InvalidDomainError(
                f"dimension must be a DimensionVector, got {type(self.dimension).__name__}"
            )
        for name in ("ratio", "pi_exponent", "translation"):
            value = getattr(self, name)
            if not isinstance(value, Fraction):
                object.__setattr__(self, name, as_rational(value))
        if self.ratio.numerator == 0:
            raise InvalidDomainError("Conversion ratio must be nonzero")

    @property
    def is_dimensionless(self) -> bool:
        return self.dimension.is_dimensionless

    @property
    def is_base(self) -> bool:
        """True для единицы с ratio=1, pi_exponent=0, translation=0."""
        return self.ratio == ONE and self.pi_exponent == ZERO and self.translation == ZERO

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def multiply(self, other: "ConversionFactor") -> "ConversionFactor":
        return ConversionFactor(
            self.dimension.multiply(other.dimension),
            mul(self.ratio, other.ratio),
            add(self.pi_exponent, other.pi_exponent),
        )

    def divide(self, other: "ConversionFactor") -> "ConversionFactor":
        return ConversionFactor(
            self.dimension.divide(other.dimension),
            div(self.ratio, other.ratio),
            sub(self.pi_exponent, other.pi_exponent),
        )

    def inverse(self) -> "ConversionFactor":
        # Обратная величина описывает изменение, сдвиг к ней неприменим
        return ConversionFactor(
            self.dimension.invert(),
            reciprocal(self.ratio),
            negate(self.pi_exponent),
        )

    def squared(self) -> "ConversionFactor":
        return ConversionFactor(
            self.dimension.power(2),
            rational_pow(self.ratio, 2),
            mul(self.pi_exponent, make_rational(2)),
            self.translation,
        )

    def cubed(self) -> "ConversionFactor":
        return ConversionFactor(
            self.dimension.power(3),
            rational_pow(self.ratio, 3),
            mul(self.pi_exponent, make_rational(3)),
            self.translation,
        )

    def power(self, n: int) -> "ConversionFactor":
        """
        Целая степень единицы как повторная композиция.

        n == 0 → безразмерная базовая единица, n == 1 → self без изменений,
        иначе translation отбрасывается.

        Raises:
            InvalidDomainError: Если n не int
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidDomainError(f"Power must be an int, got {n!r}")
        if n == 0:
            return base_factor(DIMENSIONLESS)
        if n == 1:
            return self
        return ConversionFactor(
            self.dimension.power(n),
            rational_pow(self.ratio, n),
            mul(self.pi_exponent, make_rational(n)),
        )

    def sqrt(self, eps: int = DEFAULT_SQRT_EPS) -> "ConversionFactor":
        """
        Квадратный корень единицы.

        ВНИМАНИЕ: ratio вычисляется приближённо (ratio_sqrt с ошибкой <= 1/eps),
        поэтому sqrt(F).squared() не обязательно равен F точно.

        Raises:
            InvalidDomainError: Если ratio < 0
        """
        return ConversionFactor(
            self.dimension.root(2),
            ratio_sqrt(self.ratio, eps),
            div(self.pi_exponent, make_rational(2)),
            self.translation,
        )

    def is_compatible(self, other: "ConversionFactor") -> bool:
        return self.dimension == other.dimension

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __mul__(self, other: object) -> "ConversionFactor":
        if not isinstance(other, ConversionFactor):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "ConversionFactor":
        if not isinstance(other, ConversionFactor):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, n: int) -> "ConversionFactor":
        return self.power(n)


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# =============================================================================


def base_factor(dimension: DimensionVector) -> ConversionFactor:
    """Базовая единица размерности: ratio=1, pi_exponent=0, translation=0."""
    return ConversionFactor(dimension)


def compose_multiply(f1: ConversionFactor, f2: ConversionFactor) -> ConversionFactor:
    return f1.multiply(f2)


def compose_divide(f1: ConversionFactor, f2: ConversionFactor) -> ConversionFactor:
    return f1.divide(f2)


def invert(f: ConversionFactor) -> ConversionFactor:
    return f.inverse()


def square(f: ConversionFactor) -> ConversionFactor:
    return f.squared()


def cube(f: ConversionFactor) -> ConversionFactor:
    return f.cubed()


def power(f: ConversionFactor, n: int) -> ConversionFactor:
    return f.power(n)


def sqrt(f: ConversionFactor, eps: int = DEFAULT_SQRT_EPS) -> ConversionFactor:
    return f.sqrt(eps)


def compound(*factors: ConversionFactor) -> ConversionFactor:
    """
    Составная единица: произведение всех factors слева направо.

    Examples:
        compound(meters, invert(square(seconds)))  # м/с²
    """
    if not factors:
        return base_factor(DIMENSIONLESS)
    return fold(compose_multiply, factors)


def is_compatible(f1: ConversionFactor, f2: ConversionFactor) -> bool:
    return f1.is_compatible(f2)


def derive(
    base: ConversionFactor,
    ratio: RationalLike,
    pi_exponent: RationalLike = 0,
    translation: RationalLike = 0,
) -> ConversionFactor:
    """
    Новая единица относительно существующей.

    ratio накапливается мультипликативно, pi_exponent — аддитивно,
    translation — аддитивно с масштабированием на ratio базовой единицы:

        ratio       = base.ratio * ratio
        pi_exponent = base.pi_exponent + pi_exponent
        translation = base.ratio * translation + base.translation

    Examples:
        feet = derive(meters, Fraction(381, 1250))
        fahrenheit = derive(celsius, Fraction(5, 9), translation=Fraction(-160, 9))
    """
    return ConversionFactor(
        base.dimension,
        mul(base.ratio, as_rational(ratio)),
        add(base.pi_exponent, as_rational(pi_exponent)),
        add(mul(base.ratio, as_rational(translation)), base.translation),
    )


def derive_unit(
    base: ConversionFactor,
    ratio_num: int,
    ratio_den: int = 1,
    pi_num: int = 0,
    pi_den: int = 1,
    translation_num: int = 0,
    translation_den: int = 1,
) -> ConversionFactor:
    """
    Точка входа каталога единиц: derive с целочисленными числителями/знаменателями.

    Raises:
        InvalidDomainError: Если ratio_num == 0 или аргументы не int
        DivideByZeroError: Если любой знаменатель == 0
    """
    if ratio_num == 0:
        raise InvalidDomainError("Unit ratio numerator must be nonzero")
    return derive(
        base,
        make_rational(ratio_num, ratio_den),
        make_rational(pi_num, pi_den),
        make_rational(translation_num, translation_den),
    )
