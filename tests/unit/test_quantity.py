"""
Тесты для Scale и Quantity — величины с единицей и шкалой

Проверяемые инварианты:
1. Конверсия и конструирование из совместимой величины
2. Сложение/вычитание LINEAR и DECIBEL (включая смешанные шкалы)
3. Умножение/деление выводят единицу результата
4. Сравнения с толерантностью, несовместимые → False / ошибка
5. Деление на ноль → DivideByZeroError
6. Математические функции: exp/log только для безразмерных LINEAR, остальные сохраняют единицу
"""

import math

import pytest

from dimcalc.catalog import units
from dimcalc.catalog.constants import pi_unit
from dimcalc.core.domain.dimension import DIMENSIONLESS, LENGTH, TIME
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
from dimcalc.core.errors import (
    DivideByZeroError,
    IncompatibleDimensionError,
    IncompatibleScaleError,
    InvalidDomainError,
)

DB = Scale.DECIBEL


# =============================================================================
# ТЕСТЫ: Scale
# =============================================================================


class TestScale:
    """Линеаризация и отображение шкал."""

    def test_linear_is_identity(self) -> None:
        assert Scale.LINEAR.linearize(3.5) == 3.5
        assert Scale.LINEAR.display(-2.0) == -2.0

    def test_decibel_linearize(self) -> None:
        assert DB.linearize(0.0) == 1.0
        assert DB.linearize(20.0) == pytest.approx(100.0)
        assert DB.linearize(-10.0) == pytest.approx(0.1)

    def test_decibel_linearize_overflow(self) -> None:
        """10^(5000/10) не помещается во float"""
        with pytest.raises(InvalidDomainError, match="out of float range"):
            DB.linearize(5000.0)
        with pytest.raises(InvalidDomainError):
            Quantity(5000.0, scale=DB)

    def test_decibel_display(self) -> None:
        assert DB.display(1000.0) == pytest.approx(30.0)
        assert DB.display(1.0) == 0.0

    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_decibel_display_non_positive(self, value: float) -> None:
        with pytest.raises(InvalidDomainError, match="positive linearized value"):
            DB.display(value)

    def test_from_string(self) -> None:
        assert Scale("decibel") is DB
        assert Scale.LINEAR == "linear"


# =============================================================================
# ТЕСТЫ: Конструирование и доступ
# =============================================================================


class TestQuantityConstruction:
    """Конструирование, доступ и неизменяемость."""

    def test_defaults_to_dimensionless_linear(self) -> None:
        q = Quantity(2.5)
        assert q.value == 2.5
        assert q.unit == SCALAR
        assert q.scale is Scale.LINEAR
        assert q.dimension == DIMENSIONLESS
        assert q.is_dimensionless

    def test_decibel_stores_linearized(self) -> None:
        q = Quantity(-10.0, scale=DB)
        assert q.magnitude == pytest.approx(0.1)
        assert q.value == pytest.approx(-10.0)
        assert q.to_linearized() == q.magnitude

    def test_from_linearized(self) -> None:
        q = Quantity.from_linearized(1000.0, SCALAR, DB)
        assert q.value == pytest.approx(30.0)

    def test_construct_from_compatible_quantity(self) -> None:
        """Конструирование из величины = конверсия"""
        q = Quantity(Quantity(1.0, units.meters), units.feet)
        assert q.value == pytest.approx(3.28084, abs=5e-5)
        assert q.unit == units.feet

    def test_construct_from_incompatible_quantity(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(Quantity(1.0, units.meters), units.seconds)

    def test_invalid_unit(self) -> None:
        with pytest.raises(InvalidDomainError, match="ConversionFactor"):
            Quantity(1.0, "meters")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), True, "1"])
    def test_invalid_value(self, value: object) -> None:
        with pytest.raises(InvalidDomainError):
            Quantity(value)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        q = Quantity(1.0, units.meters)
        with pytest.raises(AttributeError, match="immutable"):
            q._magnitude = 2.0  # type: ignore[misc]
        with pytest.raises(AttributeError):
            q.value = 2.0  # type: ignore[misc]

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Quantity(1.0))

    def test_repr(self) -> None:
        assert repr(Quantity(3.0, units.meters)) == (
            "Quantity(value=3.0, dimension=L^1, ratio=1, scale=linear)"
        )


# =============================================================================
# ТЕСТЫ: Конверсия
# =============================================================================


class TestQuantityConversion:
    """convert_to / convert_quantity / float()."""

    def test_convert_to(self) -> None:
        q = Quantity(1.0, units.meters).convert_to(units.feet)
        assert q.value == pytest.approx(3.28084, abs=5e-5)
        assert q.unit == units.feet

    def test_convert_quantity(self) -> None:
        q = convert_quantity(Quantity(100.0, units.celsius), units.fahrenheit)
        assert q.value == pytest.approx(212.0)

    def test_convert_incompatible(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(1.0, units.meters).convert_to(units.kilograms)

    def test_convert_scale_mismatch(self) -> None:
        with pytest.raises(IncompatibleScaleError):
            Quantity(1.0, units.watts).convert_to(units.watts, DB)

    def test_decibel_conversion(self) -> None:
        """30 dBm == 0 dBW"""
        dbm = Quantity(30.0, units.milliwatts, DB)
        dbw = dbm.convert_to(units.watts)
        assert dbw.value == pytest.approx(0.0, abs=1e-12)
        assert dbw.scale is DB

    def test_float_dimensioned(self) -> None:
        assert float(Quantity(3.0, units.meters)) == 3.0

    def test_float_dimensionless_normalized(self) -> None:
        """Безразмерные величины нормализуются: ratio и π разрешаются"""
        assert float(Quantity(50.0, units.percent)) == pytest.approx(0.5)
        assert float(Quantity(1.0, pi_unit)) == pytest.approx(math.pi)
        ratio = Quantity(1.0, units.feet) / Quantity(1.0, units.meters)
        assert float(ratio) == pytest.approx(0.3048)

    def test_float_decibel_dimensionless(self) -> None:
        assert float(Quantity(20.0, scale=DB)) == pytest.approx(20.0)


# =============================================================================
# ТЕСТЫ: Сложение / вычитание LINEAR
# =============================================================================


class TestLinearAddition:
    """Сложение/вычитание линейных величин."""

    def test_same_unit(self) -> None:
        assert (Quantity(1.0, units.meters) + Quantity(2.0, units.meters)).value == 3.0
        assert (Quantity(1.0, units.meters) - Quantity(2.0, units.meters)).value == -1.0

    def test_result_in_lhs_unit(self) -> None:
        """rhs конвертируется в единицу lhs"""
        q = Quantity(1.0, units.meters) + Quantity(1.0, units.feet)
        assert q.unit == units.meters
        assert q.value == pytest.approx(1.3048)

        q = Quantity(1.0, units.feet) + Quantity(1.0, units.meters)
        assert q.unit == units.feet
        assert q.value == pytest.approx(1.0 + 1250 / 381)

    def test_incompatible(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(1.0, units.meters) + Quantity(1.0, units.seconds)

    def test_dimensionless_with_number(self) -> None:
        assert (Quantity(2.0) + 3).value == 5.0
        assert (3 + Quantity(2.0)).value == 5.0
        assert (10 - Quantity(4.0)).value == 6.0

    def test_scaled_dimensionless_with_number(self) -> None:
        """Число — безразмерное значение в базовых единицах"""
        q = Quantity(50.0, units.percent) + 0.5
        assert q.unit == units.percent
        assert q.value == pytest.approx(100.0)

    def test_dimensioned_with_number(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(1.0, units.meters) + 1.0

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            Quantity(1.0) + "1"  # type: ignore[operator]


# =============================================================================
# ТЕСТЫ: Сложение / вычитание DECIBEL
# =============================================================================


class TestDecibelArithmetic:
    """Децибельная арифметика."""

    def test_dimensionless_addition(self) -> None:
        """10 dB + 30 dB = 40 dB"""
        result = Quantity(10.0, scale=DB) + Quantity(30.0, scale=DB)
        assert result.value == pytest.approx(40.0)
        assert result.scale is DB
        assert result.is_dimensionless

    def test_dimensionless_subtraction(self) -> None:
        """100 dB - 80 dB = 20 dB"""
        result = Quantity(100.0, scale=DB) - Quantity(80.0, scale=DB)
        assert result.value == pytest.approx(20.0)
        assert result.is_dimensionless

    def test_same_dimension_addition_squares_unit(self) -> None:
        """dBW + dBW → единица W²"""
        result = Quantity(10.0, units.watts, DB) + Quantity(20.0, units.watts, DB)
        assert result.unit == units.watts.squared()
        assert result.value == pytest.approx(30.0)

    def test_same_dimension_subtraction_is_dimensionless(self) -> None:
        """dBW - dBW → безразмерный dB"""
        result = Quantity(20.0, units.watts, DB) - Quantity(10.0, units.milliwatts, DB)
        assert result.is_dimensionless
        assert result.scale is DB
        # 10 dBm == -20 dBW
        assert result.value == pytest.approx(40.0)

    def test_dimensioned_plus_delta(self) -> None:
        """dBW + dB: размерность сохраняется"""
        result = Quantity(10.0, units.watts, DB) + Quantity(3.0, scale=DB)
        assert result.unit == units.watts
        assert result.value == pytest.approx(13.0)

        result = Quantity(10.0, units.watts, DB) - Quantity(3.0, scale=DB)
        assert result.unit == units.watts
        assert result.value == pytest.approx(7.0)

    def test_delta_plus_dimensioned(self) -> None:
        result = Quantity(3.0, scale=DB) + Quantity(10.0, units.watts, DB)
        assert result.unit == units.watts
        assert result.value == pytest.approx(13.0)

    def test_delta_minus_dimensioned_inverts_unit(self) -> None:
        result = Quantity(3.0, scale=DB) - Quantity(10.0, units.watts, DB)
        assert result.unit == units.watts.inverse()
        assert result.value == pytest.approx(-7.0)

    def test_incompatible_dimensioned(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(10.0, units.watts, DB) + Quantity(10.0, units.meters, DB)


class TestMixedScales:
    """LINEAR ± DECIBEL: decibel-сторона переводится в LINEAR."""

    def test_linear_plus_decibel(self) -> None:
        """10 W + 10 dBW (= 10 W линейно) → 20 W"""
        result = Quantity(10.0, units.watts) + Quantity(10.0, units.watts, DB)
        assert result.scale is Scale.LINEAR
        assert result.unit == units.watts
        assert result.value == pytest.approx(20.0)

    def test_linear_minus_decibel(self) -> None:
        result = Quantity(10.0, units.watts) - Quantity(10.0, units.watts, DB)
        assert result.value == pytest.approx(0.0)

    def test_decibel_plus_linear_number(self) -> None:
        """3 dB (≈1.995 линейно) + 2 → 3.995, сложение, а не умножение"""
        result = Quantity(3.0, scale=DB) + 2
        assert result.scale is Scale.LINEAR
        assert result.value == pytest.approx(10**0.3 + 2)

        result = 2 + Quantity(3.0, scale=DB)
        assert result.value == pytest.approx(2 + 10**0.3)

    def test_adding_zero_keeps_value(self) -> None:
        quantity = Quantity(3.0, scale=DB)
        result = quantity + 0
        assert result.magnitude == pytest.approx(quantity.magnitude)
        assert (quantity - 0).magnitude == pytest.approx(quantity.magnitude)

    def test_result_in_lhs_unit(self) -> None:
        """dBm переводится в LINEAR мВт, затем в единицу lhs"""
        result = Quantity(1.0, units.watts) + Quantity(30.0, units.milliwatts, DB)
        assert result.unit == units.watts
        assert result.value == pytest.approx(2.0)

    def test_dimension_mismatch_rejected(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(10.0, units.watts, DB) + 0
        with pytest.raises(IncompatibleDimensionError):
            Quantity(10.0, units.watts) + Quantity(3.0, scale=DB)


# =============================================================================
# ТЕСТЫ: Умножение / деление / остаток
# =============================================================================


class TestMultiplicationDivision:
    """Вывод единицы результата."""

    def test_velocity_from_length_and_time(self) -> None:
        speed = Quantity(100.0, units.meters) / Quantity(9.58, units.seconds)
        assert speed.dimension == LENGTH / TIME
        assert speed.value == pytest.approx(100.0 / 9.58)
        assert speed.convert_to(units.kilometers_per_hour).value == pytest.approx(37.578, abs=1e-3)

    def test_area(self) -> None:
        area = Quantity(3.0, units.feet) * Quantity(2.0, units.feet)
        assert area.value == 6.0
        assert area.unit == units.square_feet

    def test_number_scales_value(self) -> None:
        assert (2 * Quantity(3.0, units.meters)).value == 6.0
        assert (Quantity(3.0, units.meters) * 2).unit == units.meters
        assert (Quantity(3.0, units.meters) / 2).value == 1.5

    def test_dimensionless_operand_acts_as_scalar(self) -> None:
        q = Quantity(3.0, units.meters) * Quantity(50.0, units.percent)
        assert q.unit == units.meters
        assert q.value == pytest.approx(1.5)

    def test_cancellation_yields_dimensionless(self) -> None:
        ratio = Quantity(6.0, units.meters) / Quantity(2.0, units.meters)
        assert ratio.is_dimensionless
        assert float(ratio) == 3.0

    def test_number_divided_by_quantity(self) -> None:
        frequency = 1 / Quantity(4.0, units.seconds)
        assert frequency.unit == units.seconds.inverse()
        assert frequency.convert_to(units.hertz).value == 0.25

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivideByZeroError):
            Quantity(1.0, units.meters) / Quantity(0.0, units.seconds)
        with pytest.raises(DivideByZeroError):
            Quantity(1.0, units.meters) / 0

    def test_decibel_multiplication_rejected(self) -> None:
        with pytest.raises(IncompatibleScaleError, match="linear"):
            Quantity(10.0, scale=DB) * 2

    def test_modulo_same_unit(self) -> None:
        assert (Quantity(10.0, units.meters) % Quantity(3.0, units.meters)).value == 1.0

    def test_modulo_converts_rhs(self) -> None:
        q = Quantity(1.0, units.meters) % Quantity(1.0, units.feet)
        assert q.unit == units.meters
        assert q.value == pytest.approx(1.0 - 3 * 0.3048)

    def test_modulo_number(self) -> None:
        assert (Quantity(7.0, units.meters) % 2).value == 1.0

    def test_modulo_sign_follows_dividend(self) -> None:
        assert (Quantity(-7.0, units.meters) % 2).value == -1.0

    def test_modulo_by_zero(self) -> None:
        with pytest.raises(DivideByZeroError):
            Quantity(7.0, units.meters) % Quantity(0.0, units.meters)

    def test_modulo_incompatible(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(7.0, units.meters) % Quantity(1.0, units.seconds)


# =============================================================================
# ТЕСТЫ: Сравнения
# =============================================================================


class TestComparisons:
    """== != < <= > >= с конверсией rhs."""

    def test_equal_across_units(self) -> None:
        assert Quantity(1.0, units.feet) == Quantity(0.3048, units.meters)
        assert Quantity(100.0, units.celsius) == Quantity(212.0, units.fahrenheit)

    def test_not_equal(self) -> None:
        assert Quantity(1.0, units.feet) != Quantity(1.0, units.meters)

    def test_incompatible_equality_is_false(self) -> None:
        assert not (Quantity(1.0, units.meters) == Quantity(1.0, units.seconds))
        assert Quantity(1.0, units.meters) != Quantity(1.0, units.seconds)

    def test_ordering(self) -> None:
        assert Quantity(1.0, units.meters) > Quantity(3.0, units.feet)
        assert Quantity(1.0, units.meters) >= Quantity(1.0, units.meters)
        assert Quantity(1.0, units.inches) < Quantity(1.0, units.feet)
        assert Quantity(12.0, units.inches) <= Quantity(1.0, units.feet)

    def test_incompatible_ordering_raises(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            Quantity(1.0, units.meters) < Quantity(1.0, units.seconds)

    def test_dimensionless_with_numbers(self) -> None:
        assert Quantity(0.5) == 0.5
        assert Quantity(50.0, units.percent) == 0.5
        assert Quantity(50.0, units.percent) < 1
        assert 1 > Quantity(50.0, units.percent)

    def test_dimensioned_with_numbers(self) -> None:
        assert Quantity(1.0, units.meters) != 1.0
        with pytest.raises(IncompatibleDimensionError):
            Quantity(1.0, units.meters) < 1.0

    def test_decibel_compares_linearized(self) -> None:
        assert Quantity(20.0, scale=DB) == Quantity(100.0)
        assert Quantity(10.0, scale=DB) < Quantity(20.0, scale=DB)


# =============================================================================
# ТЕСТЫ: Унарные операции, степени, min/max
# =============================================================================


class TestUnaryAndPowers:
    """abs, унарные ±, pow_quantity, sqrt_quantity, min/max."""

    def test_unary(self) -> None:
        q = Quantity(3.0, units.meters)
        assert (-q).value == -3.0
        assert (-q).unit == units.meters
        assert +q is q
        assert abs(Quantity(-3.0, units.meters)).value == 3.0

    def test_power(self) -> None:
        area = Quantity(3.0, units.meters) ** 2
        assert area.value == 9.0
        assert area.dimension == LENGTH**2

        inverse = pow_quantity(Quantity(2.0, units.meters), -1)
        assert inverse.value == 0.5
        assert inverse.dimension == LENGTH**-1

    def test_power_zero(self) -> None:
        q = Quantity(3.0, units.meters) ** 0
        assert q.value == 1.0
        assert q.unit == SCALAR

    def test_power_of_zero_negative(self) -> None:
        with pytest.raises(DivideByZeroError):
            Quantity(0.0, units.meters) ** -1

    def test_power_rejects_float_exponent(self) -> None:
        with pytest.raises(InvalidDomainError, match="Power must be an int"):
            Quantity(4.0, units.meters) ** 0.5  # type: ignore[operator]

    def test_power_decibel_rejected(self) -> None:
        with pytest.raises(IncompatibleScaleError):
            pow_quantity(Quantity(10.0, scale=DB), 2)

    def test_sqrt(self) -> None:
        side = sqrt_quantity(Quantity(9.0, units.square_meters))
        assert side.value == 3.0
        assert side.unit == units.meters

        side = sqrt_quantity(Quantity(4.0, units.square_feet))
        assert side.unit == units.feet
        assert side.value == 2.0

    def test_sqrt_negative(self) -> None:
        with pytest.raises(InvalidDomainError, match="negative"):
            sqrt_quantity(Quantity(-1.0, units.square_meters))

    def test_min_max(self) -> None:
        meter = Quantity(1.0, units.meters)
        foot = Quantity(1.0, units.feet)
        assert min_quantity(meter, foot) is foot
        assert max_quantity(meter, foot) is meter

    def test_min_incompatible(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            min_quantity(Quantity(1.0, units.meters), Quantity(1.0, units.seconds))


# =============================================================================
# ТЕСТЫ: Математические функции
# =============================================================================


class TestTranscendentalFunctions:
    """exp / log и родственные: только безразмерные аргументы."""

    def test_exp_and_log(self) -> None:
        assert exp_quantity(0).value == 1.0
        assert exp_quantity(Quantity(1.0)).value == pytest.approx(math.e)
        assert log_quantity(math.e).value == pytest.approx(1.0)
        assert log_quantity(Quantity(1.0)).is_dimensionless

    def test_other_bases(self) -> None:
        assert exp2_quantity(10).value == pytest.approx(1024.0)
        assert log10_quantity(1000).value == 3.0
        assert log2_quantity(8).value == 3.0

    def test_small_argument_variants(self) -> None:
        assert expm1_quantity(1e-10).value == pytest.approx(1e-10)
        assert log1p_quantity(1e-10).value == pytest.approx(1e-10)
        assert log1p_quantity(0).value == 0.0

    def test_argument_normalized(self) -> None:
        """50 % → 0.5, 1 [π] → π"""
        assert exp_quantity(Quantity(50.0, units.percent)).value == pytest.approx(math.exp(0.5))
        assert log_quantity(Quantity(1.0, pi_unit)).value == pytest.approx(math.log(math.pi))

    def test_dimensioned_argument_rejected(self) -> None:
        with pytest.raises(IncompatibleDimensionError, match="dimensionless"):
            exp_quantity(Quantity(1.0, units.meters))
        with pytest.raises(IncompatibleDimensionError):
            log_quantity(Quantity(1.0, units.seconds))

    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_log_domain(self, value: float) -> None:
        with pytest.raises(InvalidDomainError, match="undefined"):
            log_quantity(value)

    def test_log1p_domain(self) -> None:
        with pytest.raises(InvalidDomainError):
            log1p_quantity(-1.0)

    def test_exp_overflow(self) -> None:
        with pytest.raises(InvalidDomainError, match="out of float range"):
            exp_quantity(1000.0)

    def test_decibel_rejected(self) -> None:
        with pytest.raises(IncompatibleScaleError):
            exp_quantity(Quantity(3.0, scale=DB))

    def test_modf(self) -> None:
        fractional, integral = modf_quantity(Quantity(-2.5))
        assert fractional.value == -0.5
        assert integral.value == -2.0


class TestRoundingFunctions:
    """ceil / floor / trunc / round / fabs сохраняют единицу."""

    def test_ceil_floor_trunc(self) -> None:
        q = Quantity(-2.7, units.meters)
        assert ceil_quantity(q).value == -2.0
        assert floor_quantity(q).value == -3.0
        assert trunc_quantity(q).value == -2.0
        assert ceil_quantity(q).unit == units.meters

    def test_round_half_away_from_zero(self) -> None:
        """В отличие от встроенного round: 2.5 → 3, -2.5 → -3"""
        assert round_quantity(Quantity(2.5, units.meters)).value == 3.0
        assert round_quantity(Quantity(-2.5, units.meters)).value == -3.0
        assert round_quantity(Quantity(2.4, units.meters)).value == 2.0
        assert round_quantity(Quantity(-0.4, units.meters)).value == 0.0

    def test_builtin_hooks(self) -> None:
        q = Quantity(2.5, units.feet)
        assert math.floor(q).value == 2.0
        assert math.ceil(q).value == 3.0
        assert math.trunc(q).unit == units.feet
        assert round(q).value == 3.0
        assert round(Quantity(1.26, units.feet), 1).value == pytest.approx(1.3)

    def test_fabs(self) -> None:
        result = fabs_quantity(Quantity(-3.0, units.meters))
        assert result.value == 3.0
        assert result.unit == units.meters

    def test_copysign(self) -> None:
        assert copysign_quantity(Quantity(3.0, units.meters), -1).value == -3.0
        result = copysign_quantity(Quantity(-3.0, units.meters), Quantity(2.0, units.seconds))
        assert result.value == 3.0
        assert result.unit == units.meters

    def test_decibel_rejected(self) -> None:
        with pytest.raises(IncompatibleScaleError):
            floor_quantity(Quantity(3.5, units.watts, DB))


class TestBinaryMathFunctions:
    """hypot / fdim / fmax / fmin / fma: результат в единице первого аргумента."""

    def test_hypot(self) -> None:
        result = hypot_quantity(Quantity(3.0, units.meters), Quantity(4.0, units.meters))
        assert result.value == pytest.approx(5.0)
        assert result.unit == units.meters

    def test_hypot_converts_to_first_unit(self) -> None:
        result = hypot_quantity(Quantity(3.0, units.feet), Quantity(4 * 0.3048, units.meters))
        assert result.unit == units.feet
        assert result.value == pytest.approx(5.0)

    def test_hypot_incompatible(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            hypot_quantity(Quantity(3.0, units.meters), Quantity(4.0, units.seconds))

    def test_fdim(self) -> None:
        meters = units.meters
        assert fdim_quantity(Quantity(5.0, meters), Quantity(3.0, meters)).value == 2.0
        assert fdim_quantity(Quantity(3.0, meters), Quantity(5.0, meters)).value == 0.0

    def test_fmax_fmin(self) -> None:
        meter = Quantity(1.0, units.meters)
        foot = Quantity(1.0, units.feet)

        assert fmax_quantity(meter, foot).value == 1.0
        assert fmax_quantity(meter, foot).unit == units.meters

        result = fmax_quantity(foot, meter)
        assert result.unit == units.feet
        assert result.value == pytest.approx(1250 / 381)

        result = fmin_quantity(meter, foot)
        assert result.unit == units.meters
        assert result.value == pytest.approx(0.3048)

    def test_fma(self) -> None:
        """2 m · 3 m + 1 m² = 7 m²"""
        result = fma_quantity(
            Quantity(2.0, units.meters),
            Quantity(3.0, units.meters),
            Quantity(1.0, units.square_meters),
        )
        assert result.value == pytest.approx(7.0)
        assert result.dimension == LENGTH**2
        assert fma_quantity(2, 3, 1).value == 7.0

    def test_fma_incompatible_addend(self) -> None:
        with pytest.raises(IncompatibleDimensionError):
            fma_quantity(
                Quantity(2.0, units.meters),
                Quantity(3.0, units.seconds),
                Quantity(1.0, units.meters),
            )

    def test_non_numeric_operand(self) -> None:
        with pytest.raises(InvalidDomainError):
            hypot_quantity(Quantity(1.0, units.meters), "1.0")  # type: ignore[arg-type]


class TestClassification:
    """isnan / isinf."""

    def test_quantity_is_always_finite(self) -> None:
        assert not isnan_quantity(Quantity(1.0, units.meters))
        assert not isinf_quantity(Quantity(1e308, units.meters))

    def test_plain_numbers(self) -> None:
        assert isnan_quantity(float("nan"))
        assert isinf_quantity(float("-inf"))
        assert not isinf_quantity(1.0)
