"""
Convert — численная конверсия значения между совместимыми единицами

Единственный допустимый способ перевода числа из одной единицы в другую.
ЗАПРЕЩЕНО смешивать единицы без явной конверсии через этот модуль.

ФОРМУЛЫ:
    ratio      = from.ratio / to.ratio
    pi_diff    = from.pi_exponent - to.pi_exponent
    trans_diff = (from.translation - to.translation) / to.ratio

    from == to                  → value (без изменений)
    pi_diff == 0, trans == 0    → value * ratio.numerator / ratio.denominator
    pi_diff != 0, trans == 0    → value * ratio * π^pi_diff
    pi_diff == 0, trans != 0    → value * ratio + trans_diff
    pi_diff != 0, trans != 0    → value * ratio * π^pi_diff + trans_diff

Промежуточная арифметика — float (IEEE double). π^pi_diff — единственный
трансцендентный шаг и единственный источник неустранимой ошибки округления.
"""

import logging
from numbers import Real

from dimcalc.core.domain.conversion_factor import ConversionFactor
from dimcalc.core.errors import IncompatibleDimensionError
from dimcalc.core.math.numerical_safeguards import ensure_finite, pi_power
from dimcalc.core.math.rational import div, sub, to_float

logger = logging.getLogger(__name__)


def ensure_compatible(from_factor: ConversionFactor, to_factor: ConversionFactor) -> None:
    """
    Проверка совместимости размерностей.

    Raises:
        IncompatibleDimensionError: Если размерности различаются
    """
    if not from_factor.is_compatible(to_factor):
        logger.debug("Rejected conversion %s -> %s", from_factor.dimension, to_factor.dimension)
        raise IncompatibleDimensionError(
            f"Cannot convert between incompatible dimensions "
            f"[{from_factor.dimension}] and [{to_factor.dimension}]",
            from_factor.dimension,
            to_factor.dimension,
        )


def convert(value: Real, from_factor: ConversionFactor, to_factor: ConversionFactor) -> float:
    """
    Конверсия value из единицы from_factor в единицу to_factor.

    Args:
        value: Конечное число в единицах from_factor
        from_factor: Исходная единица
        to_factor: Целевая единица (той же размерности)

    Returns:
        value в единицах to_factor

    Raises:
        IncompatibleDimensionError: Если размерности различаются
        InvalidDomainError: Если value не число или NaN/Inf

    Examples:
        >>> round(convert(1.0, meters, feet), 5)
        3.28084
        >>> convert(100.0, celsius, fahrenheit)
        212.0
    """
    ensure_compatible(from_factor, to_factor)
    x = ensure_finite(value, "value")

    if from_factor == to_factor:
        return x

    ratio = div(from_factor.ratio, to_factor.ratio)
    pi_diff = sub(from_factor.pi_exponent, to_factor.pi_exponent)
    trans_diff = div(sub(from_factor.translation, to_factor.translation), to_factor.ratio)

    if pi_diff == 0 and trans_diff == 0:
        if ratio.denominator == 1:
            return x * ratio.numerator
        return x * ratio.numerator / ratio.denominator

    scaled = x * to_float(ratio)
    if pi_diff != 0:
        scaled *= pi_power(pi_diff)
    if trans_diff != 0:
        scaled += to_float(trans_diff)
    return scaled
