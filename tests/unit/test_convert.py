"""
Тесты для convert — численная конверсия между единицами

Проверяемые инварианты:
1. Эталонные конверсии каталога (m→ft, °C→°F, g0, sr→deg²)
2. Тождественная конверсия и round-trip
3. Несовместимые размерности → IncompatibleDimensionError
4. NaN/Inf/нечисловые значения → InvalidDomainError
"""

import math

import pytest

from dimcalc.catalog import units
from dimcalc.core.domain.conversion_factor import base_factor, derive_unit
from dimcalc.core.domain.convert import convert, ensure_compatible
from dimcalc.core.domain.dimension import LENGTH, TIME
from dimcalc.core.errors import IncompatibleDimensionError, InvalidDomainError

# =============================================================================
# ТЕСТЫ: Эталонные конверсии
# =============================================================================


class TestSeedConversions:
    """Эталонные значения каталога."""

    def test_meters_to_feet(self) -> None:
        assert convert(1.0, units.meters, units.feet) == pytest.approx(3.28084, abs=5e-5)

    def test_feet_to_meters_exact_ratio(self) -> None:
        """Чистое отношение без π и сдвига: value * num / den"""
        assert convert(1.0, units.feet, units.meters) == 381 / 1250

    def test_miles_to_kilometers(self) -> None:
        assert convert(1.0, units.miles, units.kilometers) == pytest.approx(1.609344)

    def test_celsius_to_fahrenheit(self) -> None:
        assert convert(0.0, units.celsius, units.fahrenheit) == pytest.approx(32.0)
        assert convert(100.0, units.celsius, units.fahrenheit) == pytest.approx(212.0)
        assert convert(-40.0, units.celsius, units.fahrenheit) == pytest.approx(-40.0)

    def test_fahrenheit_to_kelvin(self) -> None:
        assert convert(32.0, units.fahrenheit, units.kelvin) == pytest.approx(273.15)

    def test_kelvin_to_celsius(self) -> None:
        assert convert(0.0, units.kelvin, units.celsius) == pytest.approx(-273.15)

    def test_standard_gravity(self) -> None:
        result = convert(1.0, units.standard_gravity, units.meters_per_second_squared)
        assert result == pytest.approx(9.80665, abs=5e-10)

    def test_steradian_to_degrees_squared(self) -> None:
        """1 sr = (180/π)² deg² — путь через π^-2"""
        result = convert(1.0, units.steradians, units.degrees_squared)
        assert result == pytest.approx(3282.8, abs=5e-2)
        assert result == pytest.approx((180 / math.pi) ** 2)

    def test_degrees_to_radians(self) -> None:
        assert convert(180.0, units.degrees, units.radians) == pytest.approx(math.pi)
        assert convert(1.0, units.turns, units.degrees) == pytest.approx(360.0)

    def test_compound_units(self) -> None:
        assert convert(1.0, units.miles_per_hour, units.meters_per_second) == pytest.approx(
            0.44704
        )
        assert convert(1.0, units.hours, units.seconds) == 3600.0


# =============================================================================
# ТЕСТЫ: Свойства
# =============================================================================


class TestConversionProperties:
    """Тождество и round-trip."""

    def test_identity(self) -> None:
        """Конверсия в ту же единицу не меняет значение"""
        assert convert(1.2345, units.feet, units.feet) == 1.2345
        assert convert(-7.0, units.celsius, units.celsius) == -7.0

    @pytest.mark.parametrize(
        "from_unit, to_unit",
        [
            (units.meters, units.feet),
            (units.celsius, units.fahrenheit),
            (units.degrees, units.radians),
            (units.steradians, units.degrees_squared),
            (units.miles_per_hour, units.knots),
        ],
    )
    def test_round_trip(self, from_unit, to_unit) -> None:
        """convert(convert(v, A, B), B, A) ≈ v"""
        value = 42.5
        there = convert(value, from_unit, to_unit)
        assert convert(there, to_unit, from_unit) == pytest.approx(value, rel=1e-12)

    def test_int_value_promoted(self) -> None:
        result = convert(3, units.yards, units.feet)
        assert result == 9.0
        assert isinstance(result, float)


# =============================================================================
# ТЕСТЫ: Ошибки
# =============================================================================


class TestConversionErrors:
    """Несовместимость и некорректные значения."""

    def test_incompatible_dimensions(self) -> None:
        with pytest.raises(IncompatibleDimensionError, match="incompatible dimensions"):
            convert(1.0, units.meters, units.seconds)

    def test_error_carries_dimensions(self) -> None:
        meters, seconds = base_factor(LENGTH), base_factor(TIME)
        with pytest.raises(IncompatibleDimensionError) as exc_info:
            ensure_compatible(meters, seconds)
        assert exc_info.value.lhs == LENGTH
        assert exc_info.value.rhs == TIME

    def test_incompatible_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            convert(1.0, units.kilograms, units.meters)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_value(self, value: float) -> None:
        with pytest.raises(InvalidDomainError):
            convert(value, units.meters, units.feet)

    def test_non_numeric_value(self) -> None:
        with pytest.raises(InvalidDomainError):
            convert("1.0", units.meters, units.feet)  # type: ignore[arg-type]

    def test_translation_only_path(self) -> None:
        """Сдвиг без масштаба"""
        shifted = derive_unit(base_factor(LENGTH), 1, translation_num=10)
        assert convert(5.0, shifted, base_factor(LENGTH)) == 15.0
        assert convert(15.0, base_factor(LENGTH), shifted) == 5.0

    def test_pi_and_translation_path(self) -> None:
        """value * ratio * π^pi_diff + trans_diff, сдвиг не умножается на π"""
        kelvin = units.kelvin
        odd = derive_unit(kelvin, 2, pi_num=1, translation_num=5)
        assert convert(1.0, odd, kelvin) == pytest.approx(2 * math.pi + 5)

        # Обратный путь: (2π + 5) / 2 / π - 5/2, round-trip не выполняется
        back = convert(2 * math.pi + 5, kelvin, odd)
        assert back == pytest.approx(5 / (2 * math.pi) - 1.5)
        assert back == pytest.approx(-0.7042252845405232)
        assert back != pytest.approx(1.0)
