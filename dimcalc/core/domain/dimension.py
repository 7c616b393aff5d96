"""
DimensionVector — сигнатура размерности единицы

Размерность представлена разреженным отображением BaseDimension → ненулевой
рациональный показатель. Записи хранятся в каноническом порядке (порядок
BaseDimension), поэтому равенство — простое структурное сравнение, а
умножение — слияние двух отсортированных списков за O(n + m).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Записи отсортированы по BaseDimension, без повторов
2. Нулевых показателей нет: при сокращении запись удаляется
3. Пустой вектор — безразмерная величина
4. Дробные показатели допустимы (например, sqrt от единицы)
"""

from dataclasses import dataclass
from enum import IntEnum
from fractions import Fraction
from typing import Iterator, Mapping

from dimcalc.core.errors import InvalidDomainError
from dimcalc.core.math.rational import RationalLike, as_rational, mul, reciprocal

# =============================================================================
# BASE DIMENSIONS
# =============================================================================


class BaseDimension(IntEnum):
    """Фиксированный набор базовых размерностей (порядок — канонический)."""

    LENGTH = 0
    MASS = 1
    TIME = 2
    ANGLE = 3
    CURRENT = 4
    TEMPERATURE = 5
    SUBSTANCE = 6
    LUMINOUS_INTENSITY = 7
    DATA = 8


Entry = tuple[BaseDimension, Fraction]


# =============================================================================
# DIMENSION VECTOR
# =============================================================================


@dataclass(frozen=True, slots=True)
class DimensionVector:
    """
    Неизменяемый вектор рациональных показателей над базовыми размерностями.

    Создавайте через from_mapping / define_base_dimension или композицией
    существующих векторов.
    """

    entries: tuple[Entry, ...] = ()

    def __post_init__(self) -> None:
        previous = None
        for base, exponent in self.entries:
            if not isinstance(base, BaseDimension):
                raise InvalidDomainError(f"Unknown base dimension: {base!r}")
            if not isinstance(exponent, Fraction) or exponent == 0:
                raise InvalidDomainError(
                    f"Exponent of {base.name} must be a nonzero Fraction, got {exponent!r}"
                )
            if previous is not None and base <= previous:
                raise InvalidDomainError(
                    f"Entries must be strictly ordered by base dimension: {self.entries!r}"
                )
            previous = base

    @classmethod
    def from_mapping(cls, exponents: Mapping[BaseDimension, RationalLike]) -> "DimensionVector":
        """
        Вектор из отображения base → exponent. Нулевые показатели отбрасываются.

        Examples:
            >>> DimensionVector.from_mapping({BaseDimension.TIME: -1, BaseDimension.LENGTH: 1})
            DimensionVector(L^1 T^-1)
        """
        entries = []
        for base, exponent in exponents.items():
            value = as_rational(exponent)
            if value != 0:
                entries.append((BaseDimension(base), value))
        return cls(tuple(sorted(entries, key=lambda entry: entry[0])))

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def is_dimensionless(self) -> bool:
        return not self.entries

    def exponent(self, base: BaseDimension) -> Fraction:
        """Показатель базовой размерности (0, если её нет в векторе)."""
        for entry_base, exponent in self.entries:
            if entry_base == base:
                return exponent
        return Fraction(0)

    def as_dict(self) -> dict[BaseDimension, Fraction]:
        return dict(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def multiply(self, other: "DimensionVector") -> "DimensionVector":
        """
        Произведение размерностей: показатели складываются.

        Слияние двух отсортированных последовательностей (merge-join):
        записи с нулевой суммой удаляются.
        """
        left, right = self.entries, other.entries
        merged: list[Entry] = []
        i = j = 0

        while i < len(left) and j < len(right):
            left_base, left_exp = left[i]
            right_base, right_exp = right[j]
            if left_base < right_base:
                merged.append(left[i])
                i += 1
            elif right_base < left_base:
                merged.append(right[j])
                j += 1
            else:
                total = left_exp + right_exp
                if total != 0:
                    merged.append((left_base, total))
                i += 1
                j += 1

        merged.extend(left[i:])
        merged.extend(right[j:])
        return DimensionVector(tuple(merged))

    def invert(self) -> "DimensionVector":
        return DimensionVector(tuple((base, -exponent) for base, exponent in self.entries))

    def divide(self, other: "DimensionVector") -> "DimensionVector":
        return self.multiply(other.invert())

    def power(self, exponent: RationalLike) -> "DimensionVector":
        """
        Все показатели умножаются на exponent.

        power(0) возвращает безразмерный вектор.
        """
        factor = as_rational(exponent)
        if factor == 0:
            return DIMENSIONLESS
        return DimensionVector(tuple((base, mul(value, factor)) for base, value in self.entries))

    def root(self, exponent: RationalLike) -> "DimensionVector":
        """
        Корень степени exponent: power(1 / exponent).

        Raises:
            DivideByZeroError: Если exponent == 0
        """
        return self.power(reciprocal(as_rational(exponent)))

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __mul__(self, other: object) -> "DimensionVector":
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "DimensionVector":
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: RationalLike) -> "DimensionVector":
        return self.power(exponent)

    def __repr__(self) -> str:
        return f"DimensionVector({self})"

    def __str__(self) -> str:
        if not self.entries:
            return "dimensionless"
        return " ".join(f"{_SYMBOLS[base]}^{exponent}" for base, exponent in self.entries)


_SYMBOLS: dict[BaseDimension, str] = {
    BaseDimension.LENGTH: "L",
    BaseDimension.MASS: "M",
    BaseDimension.TIME: "T",
    BaseDimension.ANGLE: "A",
    BaseDimension.CURRENT: "I",
    BaseDimension.TEMPERATURE: "Θ",
    BaseDimension.SUBSTANCE: "N",
    BaseDimension.LUMINOUS_INTENSITY: "J",
    BaseDimension.DATA: "D",
}


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# =============================================================================


def define_base_dimension(tag: BaseDimension) -> DimensionVector:
    """Вектор с единственной записью tag^1."""
    return DimensionVector(((BaseDimension(tag), Fraction(1)),))


def multiply(a: DimensionVector, b: DimensionVector) -> DimensionVector:
    return a.multiply(b)


def divide(a: DimensionVector, b: DimensionVector) -> DimensionVector:
    return a.divide(b)


def invert(a: DimensionVector) -> DimensionVector:
    return a.invert()


def power(a: DimensionVector, exponent: RationalLike) -> DimensionVector:
    return a.power(exponent)


def root(a: DimensionVector, exponent: RationalLike) -> DimensionVector:
    return a.root(exponent)


# =============================================================================
# BASE DIMENSION VECTORS
# =============================================================================

DIMENSIONLESS = DimensionVector()

LENGTH = define_base_dimension(BaseDimension.LENGTH)
MASS = define_base_dimension(BaseDimension.MASS)
TIME = define_base_dimension(BaseDimension.TIME)
ANGLE = define_base_dimension(BaseDimension.ANGLE)
CURRENT = define_base_dimension(BaseDimension.CURRENT)
TEMPERATURE = define_base_dimension(BaseDimension.TEMPERATURE)
SUBSTANCE = define_base_dimension(BaseDimension.SUBSTANCE)
LUMINOUS_INTENSITY = define_base_dimension(BaseDimension.LUMINOUS_INTENSITY)
DATA = define_base_dimension(BaseDimension.DATA)
