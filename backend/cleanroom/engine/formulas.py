"""
Cleanroom HVAC load formulas.

Pure functions of their arguments. Physical constants and conversion factors
are taken from an ``HVACConstants`` value (``DEFAULT_CONSTANTS`` unless one is
passed in).

Units follow the calculation sheet the service reproduces: room length and
width in metres, height in feet, volume in ft³, airflow in CFM, heat in
BTU/hr, cooling in TR, water flow in US gal/min.

Formulas:
  Volume:     V = A × (H × 0.3048) × 35.3147
  Airflow:    CFM = V × ACH / 60
  Sensible:   Qs = A × W/ft² × 3.412 + kW × 3412 + N × 250 + CFMfa × ρ × cp × ΔT
  Latent:     Ql = N × 200 + CFMfa × ρ × Δgr × 0.68
  Cooling:    TR = (Qs + Ql) / 12000
  Water:      GPM = TR × (10 / ΔT)
  Fan power:  kW = CFM × SP / (6356 × η) × 0.746
"""

from cleanroom.config import (
    DEFAULT_CONSTANTS,
    DEFAULT_PRESSURE_IP,
    GRAINS_PER_LB,
    LARGEST_PIPE_INCH,
    PIPE_SIZE_SCHEDULE,
    HVACConstants,
)
from cleanroom.engine.utils import ieee_divide, safe_exp, safe_log

# Magnus dew point coefficients
_MAGNUS_A = 17.27
_MAGNUS_B = 237.7  # °C

# Reference temperature of the standard air density, °R
_STANDARD_RANKINE = 530.0


# ---------------------------------------------------------------------------
# Geometry and airflow
# ---------------------------------------------------------------------------

def calculate_area(length: float, width: float) -> float:
    """Floor area in m² from length and width in metres."""
    return length * width


def calculate_volume(
    area: float, height: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    """Room volume in ft³ from floor area (m²) and ceiling height (ft)."""
    height_m = height * constants.ft_to_m
    volume_m3 = area * height_m
    return volume_m3 * constants.m3_to_ft3


def calculate_required_cfm(volume: float, air_changes_per_hour: float) -> float:
    """Room airflow in CFM needed for the given air changes per hour."""
    return (volume * air_changes_per_hour) / 60


def calculate_fresh_air_cfm(total_cfm: float, fresh_air_percentage: float) -> float:
    return (total_cfm * fresh_air_percentage) / 100


def calculate_resultant_cfm(
    room_cfm: float, fresh_air_cfm: float, exhaust_air_cfm: float
) -> float:
    """AHU supply airflow. Negative when exhaust exceeds supply; not clamped."""
    return room_cfm + fresh_air_cfm - exhaust_air_cfm


# ---------------------------------------------------------------------------
# Heat gains
# ---------------------------------------------------------------------------

def lighting_heat_gain(
    area: float, lighting_load: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    return area * lighting_load * constants.watts_to_btuh


def equipment_heat_gain(
    equipment_load_kw: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    return equipment_load_kw * constants.kw_to_btuh


def people_sensible_heat(
    occupancy: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    return occupancy * constants.people_sensible_btuh


def people_latent_heat(
    occupancy: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    return occupancy * constants.people_latent_btuh


def fresh_air_sensible_heat(
    fresh_air_cfm: float, delta_temp: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    return fresh_air_cfm * constants.air_density * constants.air_specific_heat * delta_temp


def fresh_air_latent_heat(
    fresh_air_cfm: float, delta_grains: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    return (
        fresh_air_cfm * constants.air_density * delta_grains
        * constants.latent_grains_factor
    )


def calculate_sensible_heat_load(
    area: float,
    lighting_load: float,
    equipment_load: float,
    occupancy: float,
    fresh_air_cfm: float,
    delta_temp: float,
    constants: HVACConstants = DEFAULT_CONSTANTS,
) -> float:
    """
    Room sensible heat (RSH) in BTU/hr.

    lighting_load is in W/ft² and is applied to the floor area as given;
    equipment_load is in kW.
    """
    return (
        lighting_heat_gain(area, lighting_load, constants)
        + equipment_heat_gain(equipment_load, constants)
        + people_sensible_heat(occupancy, constants)
        + fresh_air_sensible_heat(fresh_air_cfm, delta_temp, constants)
    )


def calculate_latent_heat_load(
    occupancy: float,
    fresh_air_cfm: float,
    delta_grains: float,
    constants: HVACConstants = DEFAULT_CONSTANTS,
) -> float:
    """Room latent heat (RLH) in BTU/hr."""
    return (
        people_latent_heat(occupancy, constants)
        + fresh_air_latent_heat(fresh_air_cfm, delta_grains, constants)
    )


def calculate_total_heat_load(sensible_heat: float, latent_heat: float) -> float:
    return sensible_heat + latent_heat


def convert_btu_to_tr(
    btu_per_hour: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    return ieee_divide(btu_per_hour, constants.btu_per_tr)


# ---------------------------------------------------------------------------
# Water side and fans
# ---------------------------------------------------------------------------

def calculate_chilled_water_flow(
    ac_load_tr: float, delta_temp: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    """
    Chilled water flow in GPM.

    1 GPM per TR at a 10°F water ΔT, scaled by 10/ΔT. ΔT = 0 gives inf
    (or nan for a zero load).
    """
    temp_correction = ieee_divide(constants.chilled_water_base_delta_f, delta_temp)
    return ac_load_tr * temp_correction


def gpm_to_ls(gpm: float, constants: HVACConstants = DEFAULT_CONSTANTS) -> float:
    return gpm * constants.gpm_to_ls


def calculate_pipe_size(flow_rate_gpm: float) -> float:
    """Design pipe size in inches; each step's upper bound is inclusive."""
    for upper_bound, size in PIPE_SIZE_SCHEDULE:
        if flow_rate_gpm <= upper_bound:
            return size
    return LARGEST_PIPE_INCH


def calculate_power_consumption(
    ahu_cfm: float, static_pressure: float, constants: HVACConstants = DEFAULT_CONSTANTS
) -> float:
    """Fan power in kW: brake HP = CFM × SP / (6356 × η), converted to kW."""
    power_hp = ieee_divide(
        ahu_cfm * static_pressure, constants.fan_constant * constants.fan_efficiency
    )
    return power_hp * constants.hp_to_kw


# ---------------------------------------------------------------------------
# Auxiliary conversions and psychrometric approximations
# ---------------------------------------------------------------------------

def celsius_to_fahrenheit(celsius: float) -> float:
    return (celsius * 9 / 5) + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def calculate_dew_point(temp_c: float, rh_percent: float) -> float:
    """
    Dew point in °C from dry-bulb (°C) and RH (%), Magnus approximation.

    RH = 0 gives nan rather than raising.
    """
    alpha = ieee_divide(_MAGNUS_A * temp_c, _MAGNUS_B + temp_c) + safe_log(rh_percent / 100)
    return ieee_divide(_MAGNUS_B * alpha, _MAGNUS_A - alpha)


def calculate_grains(temp_f: float, rh_percent: float) -> float:
    """
    Grains of moisture per lb of dry air at sea level.

    Uses the quick saturation approximation of the calculation sheet
    (0.62198 × exp(17.2694 (T-32) / (T-32+238.3))) rather than a full
    psychrometric solution; see ``engine.design_conditions`` for that.
    """
    saturation_vapor_pressure = 0.62198 * safe_exp(
        ieee_divide(17.2694 * (temp_f - 32), temp_f - 32 + 238.3)
    )
    actual_vapor_pressure = (rh_percent / 100) * saturation_vapor_pressure
    return GRAINS_PER_LB * ieee_divide(
        actual_vapor_pressure, DEFAULT_PRESSURE_IP - actual_vapor_pressure
    )


def calculate_air_density(
    temp_f: float,
    pressure_psi: float = DEFAULT_PRESSURE_IP,
    constants: HVACConstants = DEFAULT_CONSTANTS,
) -> float:
    """Dry air density in lb/ft³, scaled from standard air by temperature and pressure."""
    absolute_temp = temp_f + 459.67
    return (
        constants.air_density
        * ieee_divide(_STANDARD_RANKINE, absolute_temp)
        * (pressure_psi / constants.standard_pressure)
    )
