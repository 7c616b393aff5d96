"""
dimcalc — размерный анализ и конверсия единиц

Точная рациональная алгебра размерностей, конверсия значений между
совместимыми единицами и арифметика величин с автоматическим выводом
единицы результата.

Examples:
    >>> from dimcalc import Quantity, convert
    >>> from dimcalc.catalog import units
    >>> round(convert(1.0, units.meters, units.feet), 5)
    3.28084
    >>> speed = Quantity(100.0, units.meters) / Quantity(9.58, units.seconds)
    >>> round(speed.convert_to(units.kilometers_per_hour).value, 2)
    37.58
"""

from dimcalc.core.domain import (
    DIMENSIONLESS,
    SCALAR,
    BaseDimension,
    ConversionFactor,
    DimensionVector,
    Quantity,
    Scale,
    base_factor,
    ceil_quantity,
    compose_divide,
    compose_multiply,
    compound,
    convert,
    convert_quantity,
    copysign_quantity,
    cube,
    define_base_dimension,
    derive,
    derive_unit,
    exp2_quantity,
    exp_quantity,
    expm1_quantity,
    fabs_quantity,
    fdim_quantity,
    floor_quantity,
    fma_quantity,
    fmax_quantity,
    fmin_quantity,
    hypot_quantity,
    invert,
    is_compatible,
    isinf_quantity,
    isnan_quantity,
    log10_quantity,
    log1p_quantity,
    log2_quantity,
    log_quantity,
    max_quantity,
    min_quantity,
    modf_quantity,
    pow_quantity,
    power,
    round_quantity,
    sqrt,
    sqrt_quantity,
    square,
    trunc_quantity,
)
from dimcalc.core.errors import (
    DimcalcError,
    DivideByZeroError,
    IncompatibleDimensionError,
    IncompatibleScaleError,
    InvalidDomainError,
    RationalOverflowError,
)
from dimcalc.core.math import ratio_sqrt

__version__ = "0.1.0"

__all__ = [
    # Dimension algebra
    "BaseDimension",
    "DimensionVector",
    "DIMENSIONLESS",
    "define_base_dimension",
    # Conversion factors
    "ConversionFactor",
    "base_factor",
    "compose_multiply",
    "compose_divide",
    "compound",
    "invert",
    "square",
    "cube",
    "power",
    "sqrt",
    "derive",
    "derive_unit",
    "is_compatible",
    "ratio_sqrt",
    # Conversion & quantities
    "convert",
    "Scale",
    "Quantity",
    "SCALAR",
    "convert_quantity",
    "pow_quantity",
    "sqrt_quantity",
    "min_quantity",
    "max_quantity",
    # Quantity math
    "ceil_quantity",
    "copysign_quantity",
    "exp2_quantity",
    "exp_quantity",
    "expm1_quantity",
    "fabs_quantity",
    "fdim_quantity",
    "floor_quantity",
    "fma_quantity",
    "fmax_quantity",
    "fmin_quantity",
    "hypot_quantity",
    "isinf_quantity",
    "isnan_quantity",
    "log10_quantity",
    "log1p_quantity",
    "log2_quantity",
    "log_quantity",
    "modf_quantity",
    "round_quantity",
    "trunc_quantity",
    # Errors
    "DimcalcError",
    "InvalidDomainError",
    "RationalOverflowError",
    "IncompatibleDimensionError",
    "IncompatibleScaleError",
    "DivideByZeroError",
]
