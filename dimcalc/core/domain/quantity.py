"""
Quantity — численное значение, привязанное к единице и шкале

Quantity хранит линеаризованное значение (magnitude), ConversionFactor и Scale.
Конструирование из числа v: magnitude = scale.linearize(v).
Отображаемое значение: value = scale.display(magnitude).

ПРАВИЛА АРИФМЕТИКИ:
    LINEAR ± LINEAR         rhs конвертируется в единицу lhs, magnitudes ± напрямую
    DECIBEL ± DECIBEL       одна размерность: + → умножение (единица square(lhs)),
                                             - → деление (безразмерный dB)
                            безразмерный dB-сдвиг: + → умножение, - → деление
    LINEAR ± DECIBEL        decibel-сторона переводится в LINEAR с тем же
                            линеаризованным значением, далее LINEAR ± LINEAR
    ×, ÷, %, pow, sqrt      только LINEAR; единица выводится композицией
                            (compose_multiply / compose_divide / power / sqrt)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Quantity неизменяема: любая операция создаёт новый экземпляр
2. Несовместимые размерности → IncompatibleDimensionError (кроме ==, который → False)
3. Несовместимые шкалы → IncompatibleScaleError
4. Деление на ноль → DivideByZeroError, никогда не NaN/Inf
"""

import math
from numbers import Real
from typing import Any, Callable, Optional, Union

from dimcalc.core.config import DEFAULT_SQRT_EPS
from dimcalc.core.domain.conversion_factor import (
    ConversionFactor,
    base_factor,
    compose_divide,
    compose_multiply,
)
from dimcalc.core.domain.convert import convert, ensure_compatible
from dimcalc.core.domain.dimension import DIMENSIONLESS, DimensionVector
from dimcalc.core.domain.scale import Scale
from dimcalc.core.errors import (
    DivideByZeroError,
    IncompatibleDimensionError,
    IncompatibleScaleError,
    InvalidDomainError,
)
from dimcalc.core.math.numerical_safeguards import ensure_finite, is_close, promote_float

# Безразмерная базовая единица: ratio=1, pi_exponent=0, translation=0
SCALAR = base_factor(DIMENSIONLESS)

Operand = Union["Quantity", Real]


# =============================================================================
# QUANTITY
# =============================================================================


class Quantity:
    """
    Неизменяемая величина: линеаризованное значение + единица + шкала.

    Examples:
        >>> distance = Quantity(100.0, meters)
        >>> duration = Quantity(9.58, seconds)
        >>> speed = distance / duration          # единица m/s выведена автоматически
        >>> Quantity(10.0, scale=Scale.DECIBEL) + Quantity(30.0, scale=Scale.DECIBEL)
        Quantity(value=40.0, dimension=dimensionless, ratio=1, scale=decibel)
    """

    __slots__ = ("_magnitude", "_unit", "_scale")

    def __init__(
        self,
        value: Union["Quantity", Real],
        unit: ConversionFactor = SCALAR,
        scale: Scale = Scale.LINEAR,
    ) -> None:
        if not isinstance(unit, ConversionFactor):
            raise InvalidDomainError(f"unit must be a ConversionFactor, got {type(unit).__name__}")
        scale = Scale(scale)

        if isinstance(value, Quantity):
            # Конструирование из совместимой величины = конверсия
            magnitude = value.convert_to(unit, scale).magnitude
        else:
            magnitude = scale.linearize(ensure_finite(value, "value"))

        object.__setattr__(self, "_magnitude", magnitude)
        object.__setattr__(self, "_unit", unit)
        object.__setattr__(self, "_scale", scale)

    @classmethod
    def from_linearized(
        cls,
        magnitude: float,
        unit: ConversionFactor = SCALAR,
        scale: Scale = Scale.LINEAR,
    ) -> "Quantity":
        """Создание из уже линеаризованного значения (без scale.linearize)."""
        quantity = cls.__new__(cls)
        object.__setattr__(quantity, "_magnitude", ensure_finite(magnitude, "magnitude"))
        object.__setattr__(quantity, "_unit", unit)
        object.__setattr__(quantity, "_scale", Scale(scale))
        return quantity

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Quantity is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Quantity is immutable, cannot delete {name!r}")

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        """Линеаризованное (хранимое) значение."""
        return self._magnitude

    @property
    def unit(self) -> ConversionFactor:
        return self._unit

    @property
    def scale(self) -> Scale:
        return self._scale

    @property
    def dimension(self) -> DimensionVector:
        return self._unit.dimension

    @property
    def is_dimensionless(self) -> bool:
        return self._unit.is_dimensionless

    @property
    def value(self) -> float:
        """Отображаемое значение в единицах self.unit."""
        return self._scale.display(self._magnitude)

    def to_linearized(self) -> float:
        return self._magnitude

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def convert_to(self, unit: ConversionFactor, scale: Optional[Scale] = None) -> "Quantity":
        """
        Конверсия в другую единицу той же размерности.

        Args:
            unit: Целевая единица
            scale: Целевая шкала (по умолчанию — текущая; должна совпадать)

        Raises:
            IncompatibleDimensionError: Если размерности различаются
            IncompatibleScaleError: Если шкалы различаются
        """
        target_scale = self._scale if scale is None else Scale(scale)
        if target_scale is not self._scale:
            raise IncompatibleScaleError(
                f"Cannot convert a {self._scale.value} quantity to {target_scale.value} scale"
            )
        return Quantity.from_linearized(
            convert(self._magnitude, self._unit, unit),
            unit,
            target_scale,
        )

    def __float__(self) -> float:
        """
        Числовое значение.

        Безразмерные величины нормализуются к базовой безразмерной единице
        (разрешаются ratio и π-показатели). Размерные возвращают value.
        """
        if self.is_dimensionless:
            return self._scale.display(convert(self._magnitude, self._unit, SCALAR))
        return self.value

    # -------------------------------------------------------------------------
    # Сложение / вычитание
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "Quantity":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add_sub(self, rhs, subtract=False)

    def __radd__(self, other: Real) -> "Quantity":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add_sub(lhs, self, subtract=False)

    def __sub__(self, other: Operand) -> "Quantity":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add_sub(self, rhs, subtract=True)

    def __rsub__(self, other: Real) -> "Quantity":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add_sub(lhs, self, subtract=True)

    # -------------------------------------------------------------------------
    # Умножение / деление / остаток
    # -------------------------------------------------------------------------

    def __mul__(self, other: Operand) -> "Quantity":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _multiply(self, rhs)

    def __rmul__(self, other: Real) -> "Quantity":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _multiply(lhs, self)

    def __truediv__(self, other: Operand) -> "Quantity":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _divide(self, rhs)

    def __rtruediv__(self, other: Real) -> "Quantity":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _divide(lhs, self)

    def __mod__(self, other: Operand) -> "Quantity":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _modulo(self, rhs)

    def __rmod__(self, other: Real) -> "Quantity":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _modulo(lhs, self)

    def __pow__(self, n: int) -> "Quantity":
        return pow_quantity(self, n)

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Quantity":
        return Quantity(-self.value, self._unit, self._scale)

    def __pos__(self) -> "Quantity":
        return self

    def __abs__(self) -> "Quantity":
        return Quantity(abs(self.value), self._unit, self._scale)

    # math.floor / math.ceil / math.trunc / round сохраняют единицу
    def __floor__(self) -> "Quantity":
        return floor_quantity(self)

    def __ceil__(self) -> "Quantity":
        return ceil_quantity(self)

    def __trunc__(self) -> "Quantity":
        return trunc_quantity(self)

    def __round__(self, ndigits: Optional[int] = None) -> "Quantity":
        if ndigits is None:
            return round_quantity(self)
        _require_linear_operand(self, "round")
        return Quantity(round(self.value, ndigits), self._unit)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Quantity):
            if not self._unit.is_compatible(other._unit):
                return False
            return is_close(self._magnitude, convert(other._magnitude, other._unit, self._unit))
        if _is_number(other):
            if not self.is_dimensionless:
                return False
            return is_close(float(self), float(other))
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Operand) -> bool:
        pair = self._ordering_pair(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: Operand) -> bool:
        pair = self._ordering_pair(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: Operand) -> bool:
        pair = self._ordering_pair(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: Operand) -> bool:
        pair = self._ordering_pair(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def _ordering_pair(self, other: object) -> Optional[tuple[float, float]]:
        """
        Пара сравнимых значений (lhs, rhs).

        Quantity: линеаризованные значения в единице self.
        Число: только для безразмерной self, сравниваются числовые значения.
        """
        if isinstance(other, Quantity):
            return self._magnitude, convert(other._magnitude, other._unit, self._unit)
        if _is_number(other):
            if not self.is_dimensionless:
                raise IncompatibleDimensionError(
                    f"Cannot compare [{self.dimension}] quantity with a plain number",
                    self.dimension,
                    DIMENSIONLESS,
                )
            return float(self), float(other)
        return None

    def __repr__(self) -> str:
        return (
            f"Quantity(value={self.value!r}, dimension={self.dimension}, "
            f"ratio={self._unit.ratio}, scale={self._scale.value})"
        )


# =============================================================================
# ВНУТРЕННИЕ ОПЕРАЦИИ
# =============================================================================


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _coerce(value: object) -> Optional[Quantity]:
    """Quantity как есть, число → безразмерная LINEAR величина, иначе None."""
    if isinstance(value, Quantity):
        return value
    if _is_number(value):
        return Quantity(value)
    return None


def _divide_values(numerator: float, denominator: float) -> float:
    if denominator == 0:
        raise DivideByZeroError(f"Division of {numerator} by zero quantity")
    return numerator / denominator


def _gain(quantity: Quantity) -> float:
    """Линеаризованное значение безразмерной величины в базовой единице."""
    return convert(quantity.magnitude, quantity.unit, SCALAR)


def _require_linear(lhs: Quantity, rhs: Quantity, operation: str) -> None:
    if lhs.scale is not Scale.LINEAR or rhs.scale is not Scale.LINEAR:
        raise IncompatibleScaleError(
            f"{operation} is only defined for linear quantities, "
            f"got {lhs.scale.value} and {rhs.scale.value}"
        )


def _apply_gain(target: Quantity, gain: Quantity, subtract: bool, gain_first: bool) -> Quantity:
    """
    Безразмерный decibel-сдвиг, применённый к decibel-величине другой размерности.

    gain_first=True означает выражение gain ± target: при вычитании
    результат gain / target с обратной единицей.
    """
    factor = _gain(gain)
    if not subtract:
        return Quantity.from_linearized(target.magnitude * factor, target.unit, Scale.DECIBEL)
    if gain_first:
        return Quantity.from_linearized(
            _divide_values(factor, target.magnitude), target.unit.inverse(), Scale.DECIBEL
        )
    return Quantity.from_linearized(
        _divide_values(target.magnitude, factor), target.unit, Scale.DECIBEL
    )


def _to_linear(quantity: Quantity) -> Quantity:
    """Та же величина в LINEAR шкале (линеаризованное значение сохраняется)."""
    if quantity.scale is Scale.LINEAR:
        return quantity
    return Quantity.from_linearized(quantity.magnitude, quantity.unit, Scale.LINEAR)


def _add_sub(lhs: Quantity, rhs: Quantity, subtract: bool) -> Quantity:
    if lhs.scale is not rhs.scale:
        # Смешанные шкалы: decibel-сторона переводится в LINEAR
        lhs, rhs = _to_linear(lhs), _to_linear(rhs)

    if lhs.scale is Scale.LINEAR:
        rhs_magnitude = convert(rhs.magnitude, rhs.unit, lhs.unit)
        if subtract:
            return Quantity.from_linearized(lhs.magnitude - rhs_magnitude, lhs.unit)
        return Quantity.from_linearized(lhs.magnitude + rhs_magnitude, lhs.unit)

    if lhs.unit.is_compatible(rhs.unit):
        rhs_magnitude = convert(rhs.magnitude, rhs.unit, lhs.unit)
        if subtract:
            return Quantity.from_linearized(
                _divide_values(lhs.magnitude, rhs_magnitude), SCALAR, Scale.DECIBEL
            )
        return Quantity.from_linearized(
            lhs.magnitude * rhs_magnitude, lhs.unit.squared(), Scale.DECIBEL
        )
    if rhs.is_dimensionless:
        return _apply_gain(lhs, rhs, subtract, gain_first=False)
    if lhs.is_dimensionless:
        return _apply_gain(rhs, lhs, subtract, gain_first=True)
    raise IncompatibleDimensionError(
        f"Cannot add [{rhs.dimension}] decibel quantity to [{lhs.dimension}]",
        lhs.dimension,
        rhs.dimension,
    )


def _multiply(lhs: Quantity, rhs: Quantity) -> Quantity:
    _require_linear(lhs, rhs, "Multiplication")
    if lhs.is_dimensionless and rhs.is_dimensionless:
        return Quantity(float(lhs) * float(rhs))
    if rhs.is_dimensionless:
        return Quantity(lhs.value * float(rhs), lhs.unit)
    if lhs.is_dimensionless:
        return Quantity(float(lhs) * rhs.value, rhs.unit)
    return Quantity(lhs.value * rhs.value, compose_multiply(lhs.unit, rhs.unit))


def _divide(lhs: Quantity, rhs: Quantity) -> Quantity:
    _require_linear(lhs, rhs, "Division")
    if lhs.is_dimensionless and rhs.is_dimensionless:
        return Quantity(_divide_values(float(lhs), float(rhs)))
    if rhs.is_dimensionless:
        return Quantity(_divide_values(lhs.value, float(rhs)), lhs.unit)
    if lhs.is_dimensionless:
        return Quantity(_divide_values(float(lhs), rhs.value), rhs.unit.inverse())
    return Quantity(_divide_values(lhs.value, rhs.value), compose_divide(lhs.unit, rhs.unit))


def _modulo(lhs: Quantity, rhs: Quantity) -> Quantity:
    _require_linear(lhs, rhs, "Modulo")
    if rhs.is_dimensionless and not lhs.is_dimensionless:
        divisor = float(rhs)
    else:
        divisor = convert(rhs.magnitude, rhs.unit, lhs.unit)
    if divisor == 0:
        raise DivideByZeroError(f"Modulo of {lhs!r} by zero")
    # C-семантика остатка: знак результата совпадает со знаком делимого
    return Quantity(math.fmod(lhs.value, divisor), lhs.unit)


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# =============================================================================


def convert_quantity(
    quantity: Quantity,
    unit: ConversionFactor,
    scale: Optional[Scale] = None,
) -> Quantity:
    """Конверсия величины в единицу unit (см. Quantity.convert_to)."""
    return quantity.convert_to(unit, scale)


def pow_quantity(quantity: Quantity, n: int) -> Quantity:
    """
    Целая степень величины: единица → ConversionFactor.power(n), value → value**n.

    Raises:
        InvalidDomainError: Если n не int
        IncompatibleScaleError: Для нелинейной шкалы
        DivideByZeroError: Нулевое значение в отрицательной степени
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidDomainError(f"Power must be an int, got {n!r}")
    if quantity.scale is not Scale.LINEAR:
        raise IncompatibleScaleError("pow is only defined for linear quantities")
    if n < 0 and quantity.value == 0:
        raise DivideByZeroError(f"Zero quantity raised to negative power {n}")
    return Quantity(quantity.value**n, quantity.unit.power(n))


def sqrt_quantity(quantity: Quantity, eps: int = DEFAULT_SQRT_EPS) -> Quantity:
    """
    Квадратный корень величины.

    ВНИМАНИЕ: ratio единицы результата — рациональная аппроксимация.

    Raises:
        InvalidDomainError: Для отрицательного значения
        IncompatibleScaleError: Для нелинейной шкалы
    """
    if quantity.scale is not Scale.LINEAR:
        raise IncompatibleScaleError("sqrt is only defined for linear quantities")
    if quantity.value < 0:
        raise InvalidDomainError(f"Square root of negative quantity {quantity.value}")
    return Quantity(math.sqrt(quantity.value), quantity.unit.sqrt(eps))


def min_quantity(lhs: Quantity, rhs: Quantity) -> Quantity:
    """Меньшая из двух совместимых величин."""
    ensure_compatible(lhs.unit, rhs.unit)
    return lhs if lhs <= rhs else rhs


def max_quantity(lhs: Quantity, rhs: Quantity) -> Quantity:
    """Большая из двух совместимых величин."""
    ensure_compatible(lhs.unit, rhs.unit)
    return lhs if lhs >= rhs else rhs


# =============================================================================
# МАТЕМАТИЧЕСКИЕ ФУНКЦИИ
# =============================================================================
#
# Трансцендентные функции определены только для безразмерных аргументов:
# аргумент нормализуется к базовой безразмерной единице (float(q)), результат
# безразмерный. Остальные функции работают с LINEAR величинами и сохраняют
# единицу: двуместные приводят второй аргумент к единице первого.


def _as_quantity(value: Operand, name: str) -> Quantity:
    quantity = _coerce(value)
    if quantity is None:
        raise InvalidDomainError(
            f"{name} must be a Quantity or a real number, got {type(value).__name__}"
        )
    return quantity


def _require_linear_operand(quantity: Quantity, operation: str) -> None:
    if quantity.scale is not Scale.LINEAR:
        raise IncompatibleScaleError(
            f"{operation} is only defined for linear quantities, got {quantity.scale.value}"
        )


def _in_unit_of(target: Quantity, other: Quantity) -> float:
    """Линеаризованное значение other в единице target."""
    return convert(other.magnitude, other.unit, target.unit)


def _transcendental(function: Callable[[float], float], x: Operand, operation: str) -> Quantity:
    quantity = _as_quantity(x, "x")
    _require_linear_operand(quantity, operation)
    if not quantity.is_dimensionless:
        raise IncompatibleDimensionError(
            f"{operation} requires a dimensionless argument, got [{quantity.dimension}]",
            quantity.dimension,
            DIMENSIONLESS,
        )
    argument = float(quantity)
    try:
        result = function(argument)
    except ValueError as e:
        raise InvalidDomainError(f"{operation} is undefined for {argument}") from e
    except OverflowError as e:
        raise InvalidDomainError(f"{operation}({argument}) is out of float range") from e
    return Quantity(result)


def _exp2(value: float) -> float:
    return 2.0**value


def exp_quantity(x: Operand) -> Quantity:
    """
    e^x для безразмерного x.

    Raises:
        IncompatibleDimensionError: Размерный аргумент
        InvalidDomainError: Результат вне диапазона float
    """
    return _transcendental(math.exp, x, "exp")


def exp2_quantity(x: Operand) -> Quantity:
    return _transcendental(_exp2, x, "exp2")


def expm1_quantity(x: Operand) -> Quantity:
    """e^x - 1, точнее exp(x) - 1 при малых x."""
    return _transcendental(math.expm1, x, "expm1")


def log_quantity(x: Operand) -> Quantity:
    """
    Натуральный логарифм безразмерного x.

    Raises:
        IncompatibleDimensionError: Размерный аргумент
        InvalidDomainError: x <= 0
    """
    return _transcendental(math.log, x, "log")


def log10_quantity(x: Operand) -> Quantity:
    return _transcendental(math.log10, x, "log10")


def log2_quantity(x: Operand) -> Quantity:
    return _transcendental(math.log2, x, "log2")


def log1p_quantity(x: Operand) -> Quantity:
    """ln(1 + x), точнее log(1 + x) при малых x. x <= -1 → InvalidDomainError."""
    return _transcendental(math.log1p, x, "log1p")


def modf_quantity(x: Operand) -> tuple[Quantity, Quantity]:
    """
    Дробная и целая части безразмерного x (порядок как у math.modf).

    Returns:
        (дробная часть, целая часть), обе со знаком x
    """
    quantity = _as_quantity(x, "x")
    fractional = _transcendental(lambda value: math.modf(value)[0], quantity, "modf")
    return fractional, Quantity(math.modf(float(quantity))[1])


def _round_half_away_from_zero(value: float) -> float:
    integral = math.trunc(value)
    if abs(value - integral) >= 0.5:
        return integral + math.copysign(1.0, value)
    return float(integral)


def _map_value(function: Callable[[float], float], x: Quantity, operation: str) -> Quantity:
    _require_linear_operand(x, operation)
    return Quantity(function(x.value), x.unit)


def ceil_quantity(x: Quantity) -> Quantity:
    return _map_value(math.ceil, x, "ceil")


def floor_quantity(x: Quantity) -> Quantity:
    return _map_value(math.floor, x, "floor")


def trunc_quantity(x: Quantity) -> Quantity:
    return _map_value(math.trunc, x, "trunc")


def round_quantity(x: Quantity) -> Quantity:
    """
    Округление до целого в единице x.

    Половины округляются от нуля (2.5 → 3, -2.5 → -3), а не к чётному,
    как встроенный round.
    """
    return _map_value(_round_half_away_from_zero, x, "round")


def fabs_quantity(x: Quantity) -> Quantity:
    return _map_value(abs, x, "fabs")


def copysign_quantity(x: Quantity, y: Operand) -> Quantity:
    """
    |x| со знаком y в единице x.

    Знак y берётся из его собственного значения без конверсии.
    """
    _require_linear_operand(x, "copysign")
    sign = y.value if isinstance(y, Quantity) else promote_float(y)
    return Quantity(math.copysign(x.value, sign), x.unit)


def hypot_quantity(x: Quantity, y: Operand) -> Quantity:
    """
    sqrt(x² + y²) в единице x.

    Raises:
        IncompatibleDimensionError: Размерности x и y различаются
    """
    rhs = _as_quantity(y, "y")
    _require_linear_operand(x, "hypot")
    _require_linear_operand(rhs, "hypot")
    return Quantity(math.hypot(x.magnitude, _in_unit_of(x, rhs)), x.unit)


def fdim_quantity(x: Quantity, y: Operand) -> Quantity:
    """Положительная разность max(x - y, 0) в единице x."""
    rhs = _as_quantity(y, "y")
    _require_linear_operand(x, "fdim")
    _require_linear_operand(rhs, "fdim")
    return Quantity(max(x.magnitude - _in_unit_of(x, rhs), 0.0), x.unit)


def fmax_quantity(x: Quantity, y: Operand) -> Quantity:
    """
    Большее из x и y, выраженное в единице x.

    В отличие от max_quantity возвращает новую величину в единице x.
    """
    rhs = _as_quantity(y, "y")
    _require_linear_operand(x, "fmax")
    _require_linear_operand(rhs, "fmax")
    return Quantity(max(x.magnitude, _in_unit_of(x, rhs)), x.unit)


def fmin_quantity(x: Quantity, y: Operand) -> Quantity:
    """Меньшее из x и y, выраженное в единице x."""
    rhs = _as_quantity(y, "y")
    _require_linear_operand(x, "fmin")
    _require_linear_operand(rhs, "fmin")
    return Quantity(min(x.magnitude, _in_unit_of(x, rhs)), x.unit)


def fma_quantity(x: Operand, y: Operand, z: Operand) -> Quantity:
    """
    x * y + z в единице произведения x * y.

    Raises:
        IncompatibleDimensionError: Размерность z не совпадает с x * y
        IncompatibleScaleError: Нелинейный операнд
    """
    product = _multiply(_as_quantity(x, "x"), _as_quantity(y, "y"))
    addend = _as_quantity(z, "z")
    _require_linear_operand(addend, "fma")
    return Quantity(product.value + _in_unit_of(product, addend), product.unit)


def isnan_quantity(x: Operand) -> bool:
    """
    Quantity не хранит NaN (значение проверяется при конструировании),
    поэтому для Quantity результат всегда False.
    """
    if isinstance(x, Quantity):
        return math.isnan(x.magnitude)
    return math.isnan(promote_float(x))


def isinf_quantity(x: Operand) -> bool:
    if isinstance(x, Quantity):
        return math.isinf(x.magnitude)
    return math.isinf(promote_float(x))
