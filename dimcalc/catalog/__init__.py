"""
Unit catalog: именованные единицы, производные размерности и физические константы.

Все единицы регистрируются в REGISTRY при импорте модуля units.
"""

from dimcalc.catalog import constants, dimensions, units
from dimcalc.catalog.definitions import (
    BINARY_PREFIXES,
    METRIC_PREFIXES,
    REGISTRY,
    UnitDefinition,
    UnitRegistry,
    define_prefixed_units,
    define_unit,
    get_unit,
    register_unit,
)

__all__ = [
    # Modules
    "constants",
    "dimensions",
    "units",
    # Definitions
    "UnitDefinition",
    "UnitRegistry",
    "REGISTRY",
    "METRIC_PREFIXES",
    "BINARY_PREFIXES",
    "define_unit",
    "define_prefixed_units",
    "register_unit",
    "get_unit",
]
