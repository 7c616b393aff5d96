"""
Engine Configuration — Final-параметры движка единиц

Все параметры задаются как module-level Final константы. Переопределение
выполняется явно через keyword-аргументы функций (eps=, rel_tol=, max_bits=),
глобального изменяемого состояния нет.
"""

import sys
from typing import Final

# =============================================================================
# RATIO SQRT
# =============================================================================

# Обратная величина допустимой ошибки для ratio_sqrt: |sqrt(R) - Q| <= 1/Eps
# 10**10 соответствует ошибке порядка 1e-10
DEFAULT_SQRT_EPS: Final[int] = 10_000_000_000

# =============================================================================
# RATIONAL RANGE
# =============================================================================

# Максимальная битовая длина числителя/знаменателя Rational.
# Превышение → RationalOverflowError (некорректное определение единицы)
MAX_RATIONAL_BITS: Final[int] = 512

# =============================================================================
# DECIBEL SCALE
# =============================================================================

# display(x) = DECIBEL_FACTOR * log_{DECIBEL_BASE}(x)
DECIBEL_BASE: Final[float] = 10.0
DECIBEL_FACTOR: Final[float] = 10.0

# =============================================================================
# QUANTITY COMPARISON
# =============================================================================

# Относительная толерантность для Quantity.__eq__
EPS_QUANTITY_COMPARE_REL: Final[float] = 1e-12

# Абсолютная толерантность: наименьший нормализованный double
EPS_QUANTITY_COMPARE_ABS: Final[float] = sys.float_info.min
