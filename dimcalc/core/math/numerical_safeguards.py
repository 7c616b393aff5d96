"""
Numerical Safeguards — float-примитивы конверсии

Модуль обеспечивает численную корректность операций над значениями Quantity:
- Проверка валидности float (NaN/Inf) без санитизации: ошибки пропагируют
- Продвижение значений к самому широкому float-типу (не ниже double)
- Сравнение float с учётом машинной точности
- Степени π с точным целочисленным путём

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не подменяются fallback-значением → InvalidDomainError
2. Нечисловые значения не приводятся молча к числу → InvalidDomainError
3. π^k — единственный трансцендентный шаг конверсии
"""

import math
from numbers import Real

from dimcalc.core.config import EPS_QUANTITY_COMPARE_ABS, EPS_QUANTITY_COMPARE_REL
from dimcalc.core.errors import InvalidDomainError

# =============================================================================
# ВАЛИДНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def promote_float(value: Real) -> float:
    """
    Продвижение числового значения к float (IEEE double).

    Промежуточная арифметика конверсии выполняется в самом широком
    доступном float-типе; для Python это float.

    Args:
        value: int, float или любой numbers.Real (Fraction, Decimal-совместимые)

    Returns:
        Значение как float

    Raises:
        InvalidDomainError: Если значение не число (bool тоже отвергается)
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidDomainError(f"Expected a real number, got {type(value).__name__}: {value!r}")
    try:
        return float(value)
    except OverflowError as e:
        raise InvalidDomainError(f"Value {value!r} is out of float range") from e


def ensure_finite(value: Real, name: str = "value") -> float:
    """
    Продвижение к float с проверкой конечности.

    Raises:
        InvalidDomainError: Если значение NaN/Inf или не число
    """
    result = promote_float(value)
    if not is_valid_float(result):
        raise InvalidDomainError(f"{name} must be a finite number (not NaN/Inf), got {value}")
    return result


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_QUANTITY_COMPARE_REL,
    abs_tol: float = EPS_QUANTITY_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-15)
        True
        >>> is_close(1.0, 1.0 + 1e-9)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# СТЕПЕНИ π
# =============================================================================


def pi_power(exponent: float) -> float:
    """
    π в степени exponent.

    Для целых показателей используется целочисленное возведение
    (повторное умножение), для дробных — math.pow.

    Examples:
        >>> pi_power(0)
        1.0
        >>> round(pi_power(2), 6)
        9.869604
    """
    if float(exponent).is_integer():
        return math.pi ** int(exponent)
    return math.pow(math.pi, float(exponent))
