"""
Tests for the HVAC load formula library.

Covers geometry and airflow, heat gains, refrigeration tons, chilled water,
pipe sizing, fan power, auxiliary psychrometric approximations, injected
constants and IEEE-754 behaviour on degenerate input.
"""

import math

import pytest
from pydantic import ValidationError

from cleanroom.config import HVACConstants
from cleanroom.engine.formulas import (
    calculate_air_density,
    calculate_area,
    calculate_chilled_water_flow,
    calculate_dew_point,
    calculate_fresh_air_cfm,
    calculate_grains,
    calculate_latent_heat_load,
    calculate_pipe_size,
    calculate_power_consumption,
    calculate_required_cfm,
    calculate_resultant_cfm,
    calculate_sensible_heat_load,
    calculate_total_heat_load,
    calculate_volume,
    celsius_to_fahrenheit,
    convert_btu_to_tr,
    fahrenheit_to_celsius,
    gpm_to_ls,
)


def approx(value: float, rel_tol: float = 1e-9, abs_tol: float = 1e-9):
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


# ---------------------------------------------------------------------------
# Geometry and airflow
# ---------------------------------------------------------------------------

class TestGeometry:
    def test_area(self):
        assert calculate_area(10.0, 5.0) == 50.0

    def test_area_zero_dimension(self):
        assert calculate_area(0.0, 5.0) == 0.0
        assert calculate_area(10.0, 0.0) == 0.0

    def test_volume_converts_height_and_cubic_units(self):
        """50 m² × (9 ft × 0.3048) × 35.3147 ≈ 4843.76 ft³."""
        assert calculate_volume(50.0, 9.0) == approx(4843.764252, rel_tol=1e-6)

    def test_volume_zero_area(self):
        assert calculate_volume(0.0, 9.0) == 0.0


class TestAirflow:
    def test_required_cfm(self):
        """484.5 ft³ at 40 ACH → 323 CFM."""
        assert calculate_required_cfm(484.5, 40) == approx(323.0, abs_tol=0.5)

    def test_required_cfm_zero_volume(self):
        assert calculate_required_cfm(0.0, 40) == 0.0

    def test_fresh_air_cfm(self):
        assert calculate_fresh_air_cfm(3000.0, 10) == approx(300.0)

    def test_resultant_cfm(self):
        assert calculate_resultant_cfm(1000.0, 100.0, 200.0) == approx(900.0)

    def test_resultant_cfm_not_clamped(self):
        """Exhaust larger than supply gives a negative resultant."""
        assert calculate_resultant_cfm(100.0, 10.0, 500.0) == approx(-390.0)


# ---------------------------------------------------------------------------
# Heat loads
# ---------------------------------------------------------------------------

class TestHeatLoads:
    def test_sensible_heat(self):
        """Lighting 298.55 + equipment 6824 + people 1000 + fresh air 84.24."""
        qs = calculate_sensible_heat_load(
            area=50.0,
            lighting_load=1.75,
            equipment_load=2.0,
            occupancy=4,
            fresh_air_cfm=100.0,
            delta_temp=46.8,
        )
        assert qs == approx(8206.79, rel_tol=1e-6)

    def test_sensible_heat_people_only(self):
        qs = calculate_sensible_heat_load(0.0, 1.75, 0.0, 2, 0.0, 46.8)
        assert qs == approx(500.0)

    def test_latent_heat(self):
        ql = calculate_latent_heat_load(4, 100.0, 450.6440553)
        assert ql == approx(800.0 + 100.0 * 0.075 * 450.6440553 * 0.68)

    def test_latent_heat_people_only(self):
        assert calculate_latent_heat_load(3, 0.0, 450.0) == approx(600.0)

    def test_total_heat(self):
        assert calculate_total_heat_load(8000.0, 4000.0) == 12000.0

    def test_btu_to_tr_exact(self):
        assert convert_btu_to_tr(120000.0) == 10.0


# ---------------------------------------------------------------------------
# Water side and fans
# ---------------------------------------------------------------------------

class TestChilledWater:
    def test_base_delta_has_no_correction(self):
        assert calculate_chilled_water_flow(10.0, 10.0) == 10.0

    def test_larger_delta_reduces_flow(self):
        assert calculate_chilled_water_flow(10.0, 20.0) == approx(5.0)

    def test_gpm_to_ls(self):
        assert gpm_to_ls(100.0) == approx(6.30902)

    def test_zero_delta_is_infinite(self):
        assert calculate_chilled_water_flow(5.0, 0.0) == math.inf

    def test_zero_delta_zero_load_is_nan(self):
        assert math.isnan(calculate_chilled_water_flow(0.0, 0.0))


class TestPipeSize:
    @pytest.mark.parametrize("gpm, expected", [
        (0.0, 0.75),
        (10.0, 0.75),
        (10.01, 1.0),
        (25.0, 1.0),
        (25.01, 1.5),
        (50.0, 1.5),
        (100.0, 2.0),
        (200.0, 2.5),
        (200.01, 3.0),
        (5000.0, 3.0),
    ])
    def test_step_boundaries(self, gpm, expected):
        assert calculate_pipe_size(gpm) == expected

    def test_infinite_flow_gets_largest_pipe(self):
        assert calculate_pipe_size(math.inf) == 3.0


class TestPowerConsumption:
    def test_fan_power(self):
        expected = (1000.0 * 2.0) / (6356 * 0.7) * 0.746
        assert calculate_power_consumption(1000.0, 2.0) == approx(expected)

    def test_no_static_pressure(self):
        assert calculate_power_consumption(5000.0, 0.0) == 0.0

    def test_negative_airflow_gives_negative_power(self):
        assert calculate_power_consumption(-390.0, 1.0) < 0


# ---------------------------------------------------------------------------
# Auxiliary formulas
# ---------------------------------------------------------------------------

class TestTemperatureConversion:
    def test_c_to_f(self):
        assert celsius_to_fahrenheit(24.0) == approx(75.2)
        assert celsius_to_fahrenheit(50.0) == approx(122.0)

    def test_f_to_c(self):
        assert fahrenheit_to_celsius(212.0) == approx(100.0)

    def test_inverse(self):
        assert fahrenheit_to_celsius(celsius_to_fahrenheit(-17.5)) == approx(-17.5)


class TestDewPoint:
    def test_typical_room(self):
        """20°C at 50% RH → ≈ 9.25°C."""
        assert calculate_dew_point(20.0, 50.0) == approx(9.25, abs_tol=0.05)

    def test_saturated_air_dew_point_equals_dry_bulb(self):
        assert calculate_dew_point(24.0, 100.0) == approx(24.0, rel_tol=1e-9)

    def test_zero_rh_is_nan(self):
        assert math.isnan(calculate_dew_point(24.0, 0.0))


class TestGrains:
    def test_dry_air_has_no_moisture(self):
        assert calculate_grains(70.0, 0.0) == 0.0

    def test_increases_with_rh(self):
        assert calculate_grains(75.0, 60.0) > calculate_grains(75.0, 40.0)

    def test_freezing_saturation(self):
        """At 32°F the exponent vanishes: Ps = 0.62198."""
        expected = 7000 * 0.62198 / (14.696 - 0.62198)
        assert calculate_grains(32.0, 100.0) == approx(expected)

    def test_large_temperature_returns_a_number(self):
        result = calculate_grains(1e6, 50.0)
        assert isinstance(result, float)


class TestAirDensity:
    def test_standard_conditions(self):
        assert calculate_air_density(70.0) == approx(0.075, rel_tol=1e-3)

    def test_scales_with_pressure(self):
        full = calculate_air_density(70.0, 14.696)
        half = calculate_air_density(70.0, 7.348)
        assert half == approx(full / 2)

    def test_warmer_air_is_lighter(self):
        assert calculate_air_density(100.0) < calculate_air_density(50.0)


# ---------------------------------------------------------------------------
# Injected constants
# ---------------------------------------------------------------------------

class TestInjectedConstants:
    def test_fan_efficiency_override(self):
        ideal = HVACConstants(fan_efficiency=1.0)
        assert calculate_power_consumption(1000.0, 2.0, ideal) == approx(
            2000.0 / 6356 * 0.746
        )

    def test_ton_definition_override(self):
        constants = HVACConstants(btu_per_tr=10000.0)
        assert convert_btu_to_tr(120000.0, constants) == 12.0

    def test_constants_are_immutable(self):
        constants = HVACConstants()
        with pytest.raises(ValidationError):
            constants.air_density = 0.08
