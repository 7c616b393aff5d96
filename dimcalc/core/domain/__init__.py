"""
Domain value objects движка единиц.

DimensionVector, ConversionFactor, Scale, Quantity и функция convert.
"""

from dimcalc.core.domain.conversion_factor import (
    ConversionFactor,
    base_factor,
    compose_divide,
    compose_multiply,
    compound,
    cube,
    derive,
    derive_unit,
    invert,
    is_compatible,
    power,
    sqrt,
    square,
)
from dimcalc.core.domain.convert import convert, ensure_compatible
from dimcalc.core.domain.dimension import (
    ANGLE,
    CURRENT,
    DATA,
    DIMENSIONLESS,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    SUBSTANCE,
    TEMPERATURE,
    TIME,
    BaseDimension,
    DimensionVector,
    define_base_dimension,
)
from dimcalc.core.domain.quantity import (
    SCALAR,
    Quantity,
    ceil_quantity,
    convert_quantity,
    copysign_quantity,
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
    round_quantity,
    sqrt_quantity,
    trunc_quantity,
)
from dimcalc.core.domain.scale import Scale

__all__ = [
    # Dimension
    "BaseDimension",
    "DimensionVector",
    "define_base_dimension",
    "DIMENSIONLESS",
    "LENGTH",
    "MASS",
    "TIME",
    "ANGLE",
    "CURRENT",
    "TEMPERATURE",
    "SUBSTANCE",
    "LUMINOUS_INTENSITY",
    "DATA",
    # ConversionFactor
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
    # Convert
    "convert",
    "ensure_compatible",
    # Scale & Quantity
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
]
