"""
Room calculation and aggregation.

Sequence per room:
  1. Area from length × width (only if area not supplied)
  2. Volume from area and height (only if volume not supplied)
  3. Room CFM from air changes (only if room CFM not supplied)
  4. Fresh-air CFM, sensible / latent / total heat, AC load in TR
  5. Chilled water flow, design pipe size
  6. Resultant (AHU) CFM and fan power

Steps 1–3 honour caller-supplied values so a known area, volume or airflow
can override the derived one. Everything from step 4 on is always recomputed.

Each room is calculated into a new ``Room``; the input records are never
modified.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from cleanroom.config import DEFAULT_CONSTANTS, HVACConstants
from cleanroom.engine import formulas
from cleanroom.engine.csv_export import rooms_to_csv
from cleanroom.engine.normalizer import PartialRoom, normalize_rooms
from cleanroom.engine.utils import is_finite_number, is_set
from cleanroom.models.room import CalculationResults, Room

logger = logging.getLogger(__name__)

# Results that are reported as a warning when they come out non-finite
_CHECKED_FIELDS = (
    "room_ac_load_tr",
    "chilled_water_gal_min",
    "ahu_cfm",
    "power_consumption_kw_hr",
)


def calculate_room(room: Room, constants: HVACConstants = DEFAULT_CONSTANTS) -> Room:
    """Run every formula for one normalized room and return the calculated copy."""
    area = room.area
    if not is_set(area) and is_set(room.length) and is_set(room.width):
        area = formulas.calculate_area(room.length, room.width)

    volume = room.volume
    if not is_set(volume) and is_set(area) and is_set(room.height):
        volume = formulas.calculate_volume(area, room.height, constants)

    room_cfm = room.room_cfm
    if not is_set(room_cfm):
        room_cfm = formulas.calculate_required_cfm(volume, room.no_of_air_changes)

    fresh_air_cfm = formulas.calculate_fresh_air_cfm(room_cfm, room.fresh_air_percentage)

    # ── Heat load ──
    lighting = formulas.lighting_heat_gain(area, room.lighting_load_w_sqft, constants)
    equipment = formulas.equipment_heat_gain(room.equipment_load_kw, constants)
    people_rsh = formulas.people_sensible_heat(room.occupancy, constants)
    fresh_air_rsh = formulas.fresh_air_sensible_heat(
        fresh_air_cfm, room.delta_temp_f, constants
    )
    sensible_heat = formulas.calculate_sensible_heat_load(
        area,
        room.lighting_load_w_sqft,
        room.equipment_load_kw,
        room.occupancy,
        fresh_air_cfm,
        room.delta_temp_f,
        constants,
    )

    people_rlh = formulas.people_latent_heat(room.occupancy, constants)
    fresh_air_rlh = formulas.fresh_air_latent_heat(
        fresh_air_cfm, room.delta_grains, constants
    )
    latent_heat = formulas.calculate_latent_heat_load(
        room.occupancy, fresh_air_cfm, room.delta_grains, constants
    )

    total_heat = formulas.calculate_total_heat_load(sensible_heat, latent_heat)
    ac_load_tr = formulas.convert_btu_to_tr(total_heat, constants)

    # ── Water side ──
    chilled_water_gpm = formulas.calculate_chilled_water_flow(
        ac_load_tr, room.delta_temp_f, constants
    )
    chilled_water_ls = formulas.gpm_to_ls(chilled_water_gpm, constants)
    design_pipe = formulas.calculate_pipe_size(chilled_water_gpm)

    # ── Air handling unit ──
    resultant_cfm = formulas.calculate_resultant_cfm(
        room_cfm, fresh_air_cfm, room.exhaust_air_cfm
    )
    power_kw = formulas.calculate_power_consumption(
        resultant_cfm, room.static_pressure, constants
    )

    calculated = room.model_copy(update={
        "area": area,
        "volume": volume,
        "room_cfm": room_cfm,
        "fresh_air_cfm": fresh_air_cfm,
        "lighting_load": lighting,
        "equipment_load": equipment,
        "people_rsh": people_rsh,
        "fresh_air_rsh": fresh_air_rsh,
        "ersh": sensible_heat,
        "people_rlh": people_rlh,
        "fresh_air_rlh": fresh_air_rlh,
        "erlh": latent_heat,
        "erth": total_heat,
        "ac_load": ac_load_tr,
        "room_ac_load_tr": ac_load_tr,
        "chilled_water_gal_min": chilled_water_gpm,
        "chilled_water_ls": chilled_water_ls,
        "design_pipe_inch": design_pipe,
        "resultant_cfm": resultant_cfm,
        "ahu_cfm": resultant_cfm,
        "power_consumption_kw_hr": power_kw,
    })

    bad = [name for name in _CHECKED_FIELDS if not is_finite_number(getattr(calculated, name))]
    if bad:
        logger.warning(
            "Room %d (%s) produced non-finite results for %s; check delta temperature "
            "and static pressure inputs",
            calculated.s_no,
            calculated.room_name,
            ", ".join(bad),
        )

    return calculated


def aggregate(
    rooms: Iterable[Room], constants: HVACConstants = DEFAULT_CONSTANTS
) -> CalculationResults:
    """Calculate every room in order and sum the project totals."""
    breakdown: list[Room] = []
    total_area = 0.0
    total_volume = 0.0
    total_cfm = 0.0
    total_ac_load = 0.0
    total_chilled_water = 0.0
    total_power = 0.0

    for room in rooms:
        calculated = calculate_room(room, constants)
        breakdown.append(calculated)
        total_area += calculated.area
        total_volume += calculated.volume
        total_cfm += calculated.ahu_cfm
        total_ac_load += calculated.room_ac_load_tr
        total_chilled_water += calculated.chilled_water_gal_min
        total_power += calculated.power_consumption_kw_hr

    logger.debug(
        "Calculated %d room(s): %.2f TR, %.0f CFM", len(breakdown), total_ac_load, total_cfm
    )

    return CalculationResults(
        total_area=total_area,
        total_volume=total_volume,
        total_cfm=total_cfm,
        total_ac_load=total_ac_load,
        total_chilled_water=total_chilled_water,
        total_power_consumption=total_power,
        room_breakdown=breakdown,
    )


class HVACCalculator:
    """
    Holds a normalized copy of a project's rooms.

    Calculation never modifies the held rooms, so ``calculate_all`` can be
    called repeatedly and ``export_to_csv`` always reflects the rooms as
    entered (with defaults filled in).
    """

    def __init__(
        self,
        rooms_data: Iterable[PartialRoom],
        constants: HVACConstants = DEFAULT_CONSTANTS,
    ):
        self._constants = constants
        self._rooms = normalize_rooms(rooms_data)

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)

    def calculate_room(self, room: Room) -> Room:
        return calculate_room(room, self._constants)

    def calculate_all(self) -> CalculationResults:
        return aggregate(self._rooms, self._constants)

    def get_room_by_name(self, room_name: str) -> Optional[Room]:
        """First room with the given name, or None."""
        for room in self._rooms:
            if room.room_name == room_name:
                return room
        return None

    def get_rooms_by_ahu(self, ahu_no: str) -> list[Room]:
        return [room for room in self._rooms if room.ahu_no == ahu_no]

    def export_to_csv(self) -> str:
        return rooms_to_csv(self._rooms)
