"""
Design-condition derivation for room records.

Resolves the outside (before coil) and inside (after coil) air states with
psychrolib in IP units and reports the temperature and moisture columns a
room record carries. The room defaults (50 °C / 85 % outside, 24 °C / 40 %
inside) come out as 122 °F / 75.2 °F, ΔT 46.8 °F and roughly 502 / 52 grains.
"""

import psychrolib

from cleanroom.config import GRAINS_PER_LB
from cleanroom.engine.formulas import celsius_to_fahrenheit
from cleanroom.models.design_conditions import (
    DesignConditionsInput,
    DesignConditionsOutput,
)
from cleanroom.models.room import Room


def pressure_from_altitude(altitude_ft: float) -> float:
    """Standard atmosphere pressure (psia) at an altitude in feet."""
    psychrolib.SetUnitSystem(psychrolib.IP)
    return psychrolib.GetStandardAtmPressure(altitude_ft)


def grains_from_temp_rh(temp_f: float, rh_percent: float, pressure: float) -> float:
    """Humidity ratio in grains/lb of dry air for a dry-bulb / RH pair."""
    psychrolib.SetUnitSystem(psychrolib.IP)
    W = psychrolib.GetHumRatioFromRelHum(temp_f, rh_percent / 100.0, pressure)
    return W * GRAINS_PER_LB


def _dew_point_f(temp_f: float, rh_percent: float) -> float:
    psychrolib.SetUnitSystem(psychrolib.IP)
    return psychrolib.GetTDewPointFromRelHum(temp_f, rh_percent / 100.0)


def derive_design_conditions(inp: DesignConditionsInput) -> DesignConditionsOutput:
    """
    Compute the temperature and moisture columns for a room.

    Raises:
        ValueError: if psychrolib rejects the inputs (e.g. temperature out of
            its supported range).
    """
    pressure = inp.pressure
    if inp.altitude is not None:
        pressure = pressure_from_altitude(inp.altitude)

    inside_f = celsius_to_fahrenheit(inp.inside_temp_c)
    outside_f = celsius_to_fahrenheit(inp.outside_temp_c)

    grains_before = grains_from_temp_rh(outside_f, inp.outside_rh, pressure)
    grains_after = grains_from_temp_rh(inside_f, inp.inside_rh, pressure)

    return DesignConditionsOutput(
        inside_temp_c=inp.inside_temp_c,
        outside_temp_c=inp.outside_temp_c,
        inside_temp_f=round(inside_f, 4),
        outside_temp_f=round(outside_f, 4),
        delta_temp_f=round(outside_f - inside_f, 4),
        inside_rh=inp.inside_rh,
        outside_rh=inp.outside_rh,
        grains_before_coil=round(grains_before, 4),
        grains_after_coil=round(grains_after, 4),
        delta_grains=round(grains_before - grains_after, 4),
        inside_dew_point_f=round(_dew_point_f(inside_f, inp.inside_rh), 2),
        outside_dew_point_f=round(_dew_point_f(outside_f, inp.outside_rh), 2),
        pressure=round(pressure, 4),
    )


def apply_design_conditions(room: Room, conditions: DesignConditionsOutput) -> Room:
    """Return a copy of ``room`` carrying the derived design conditions."""
    return room.model_copy(update={
        "in_temp_c": conditions.inside_temp_c,
        "out_temp_c": conditions.outside_temp_c,
        "inside_temp_f": conditions.inside_temp_f,
        "out_temp_f": conditions.outside_temp_f,
        "delta_temp_f": conditions.delta_temp_f,
        "required_rh": conditions.inside_rh,
        "outside_rh": conditions.outside_rh,
        "grains_before_coil": conditions.grains_before_coil,
        "grains_after_coil": conditions.grains_after_coil,
        "delta_grains": conditions.delta_grains,
    })
