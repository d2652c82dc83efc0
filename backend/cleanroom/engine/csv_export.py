"""
CSV export of a room schedule.

Produces the project's HVAC calculation sheet: a fixed 48-column header
followed by one row per room. Fields are joined with commas as-is, without
quoting, so text fields must not contain commas themselves.

Values are written the way the intake wizard displays them: integral
numbers without a decimal part, missing values as empty cells, and
non-finite numbers as ``Infinity`` / ``-Infinity`` / ``NaN``.
"""

import math
from collections.abc import Iterable

from cleanroom.models.room import Room

# (header, Room field) in sheet order
CSV_COLUMNS: tuple[tuple[str, str], ...] = (
    ("S. No.", "s_no"),
    ("AHU No", "ahu_no"),
    ("Room Name", "room_name"),
    ("Length in Mtrs", "length"),
    ("Width in Mtrs", "width"),
    ("Height in Ft", "height"),
    ("Area in Sq. Mtrs", "area"),
    ("Volume in Cft", "volume"),
    ("Standard & Classification", "standard"),
    ("No. of Air Ch.", "no_of_air_changes"),
    ("Room CFM", "room_cfm"),
    ("Occupancy", "occupancy"),
    ("Eqpt. Load in KW", "equipment_load_kw"),
    ("Lighting Load in W/Sft", "lighting_load_w_sqft"),
    ("Fresh Air Cfm in % of Total Air", "fresh_air_percentage"),
    ("Fresh Air Cfm Air", "fresh_air_cfm"),
    ("Exhaust Air Cfm", "exhaust_air_cfm"),
    ("Deh. CFM", "dehumidification_cfm"),
    ("Resultant CFM", "resultant_cfm"),
    ("Room AC Load in TR", "room_ac_load_tr"),
    ("CFm AC Load in TR", "cfm_ac_load_tr"),
    ("Res. AC load in TR", "res_ac_load_tr"),
    ("Ch. Water In Gal/m", "chilled_water_gal_min"),
    ("Ch. Water In L/s", "chilled_water_ls"),
    ("Act. Pipe in Inch", "actual_pipe_inch"),
    ("Des. Pipe in Inch", "design_pipe_inch"),
    ("Class in K / NC 20/5", "class_k_nc"),
    ("In Temp in C (+/-2)", "in_temp_c"),
    ("Required RH in % +/- 5", "required_rh"),
    ("Outside RH in % +/- 5", "outside_rh"),
    ("Out. Temp. in F", "out_temp_f"),
    ("Inside Temp. in F", "inside_temp_f"),
    ("Out Temp in C (+/-2)", "out_temp_c"),
    ("Delta Temp in F", "delta_temp_f"),
    ("Grains / Pound of Dry Air before Coil", "grains_before_coil"),
    ("Grains / Pound of Dry Air After Coil", "grains_after_coil"),
    ("Delta Grains / pound of Air", "delta_grains"),
    ("ERSH", "ersh"),
    ("ERLH", "erlh"),
    ("ERTH or Grand Total Heat", "erth"),
    ("AC Load", "ac_load"),
    ("Final Filtration", "final_filtration"),
    ("NC 20 / 5 Micron", "nc_20_micron"),
    ("AHU CFM", "ahu_cfm"),
    ("Static Pressure", "static_pressure"),
    ("Blower Model", "blower_model"),
    ("Motor rating in Hp", "motor_rating_hp"),
    ("Power cons. in KW/hr", "power_consumption_kw_hr"),
)

CSV_HEADERS: tuple[str, ...] = tuple(header for header, _ in CSV_COLUMNS)

DELIMITER = ","
LINE_SEPARATOR = "\n"


def format_value(value) -> str:
    """Render one cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def room_to_row(room: Room) -> str:
    return DELIMITER.join(
        format_value(getattr(room, field, None)) for _, field in CSV_COLUMNS
    )


def rooms_to_csv(rooms: Iterable[Room]) -> str:
    """Header line plus one line per room, in input order."""
    lines = [DELIMITER.join(CSV_HEADERS)]
    lines.extend(room_to_row(room) for room in rooms)
    return LINE_SEPARATOR.join(lines)
