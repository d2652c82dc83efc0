"""
Pydantic models for cleanroom room records and calculation results.

Field names are snake_case; the camelCase aliases are the column keys the
intake wizard posts, and are also used when responses are serialized.

A fully-populated ``Room`` carries the documented defaults for any field
that was not supplied. ``RoomInput`` is the partial form where every field
is optional and ``None`` means "not supplied".
"""

from typing import Optional

from pydantic import BaseModel, Field, create_model


class Room(BaseModel):
    """One cleanroom / conditioned space."""

    model_config = {"populate_by_name": True}

    # Identity
    s_no: int = Field(1, alias="sNo")
    ahu_no: str = Field("", alias="ahuNo")
    room_name: str = Field("", alias="roomName")

    # Geometry
    length: float = Field(0, alias="length")       # m
    width: float = Field(0, alias="width")         # m
    height: float = Field(9, alias="height")       # ft
    area: float = Field(0, alias="area")           # m²
    volume: float = Field(0, alias="volume")       # ft³

    # Classification
    standard: str = Field("ISO 8", alias="standard")
    classification: str = Field("Gene/Entry", alias="classification")

    # Air quantities
    no_of_air_changes: float = Field(40, alias="noOfAirChanges")
    room_cfm: float = Field(0, alias="roomCFM")
    occupancy: float = Field(0, alias="occupancy")
    equipment_load_kw: float = Field(0, alias="equipmentLoadKW")
    lighting_load_w_sqft: float = Field(1.75, alias="lightingLoadWSqft")
    fresh_air_percentage: float = Field(10, alias="freshAirPercentage")
    fresh_air_cfm: float = Field(0, alias="freshAirCFM")
    exhaust_air_cfm: float = Field(0, alias="exhaustAirCFM")
    dehumidification_cfm: float = Field(0, alias="dehumidificationCFM")
    resultant_cfm: float = Field(0, alias="resultantCFM")

    # Cooling load and water side
    room_ac_load_tr: float = Field(0, alias="roomACLoadTR")
    cfm_ac_load_tr: float = Field(0, alias="cfmACLoadTR")
    res_ac_load_tr: float = Field(0, alias="resACLoadTR")
    chilled_water_gal_min: float = Field(0, alias="chilledWaterGalMin")
    chilled_water_ls: float = Field(0, alias="chilledWaterLS")
    actual_pipe_inch: float = Field(0, alias="actualPipeInch")
    design_pipe_inch: float = Field(0, alias="designPipeInch")
    hot_water_gal_min: float = Field(0, alias="hotWaterGalMin")
    hot_water_ls: float = Field(0, alias="hotWaterLS")
    actual_pipe_inch_hot: float = Field(0, alias="actualPipeInchHot")
    design_pipe_inch_hot: float = Field(0, alias="designPipeInchHot")
    class_k_nc: str = Field("Gene/Entry", alias="classKNc")

    # Design conditions
    in_temp_c: float = Field(24, alias="inTempC")
    required_rh: float = Field(40, alias="requiredRH")
    outside_rh: float = Field(85, alias="outsideRH")
    out_temp_f: float = Field(122, alias="outTempF")
    inside_temp_f: float = Field(75.2, alias="insideTempF")
    out_temp_c: float = Field(50, alias="outTempC")
    delta_temp_f: float = Field(46.8, alias="deltaTempF")
    grains_before_coil: float = Field(502.5390781, alias="grainsBeforeCoil")
    grains_after_coil: float = Field(51.89502281, alias="grainsAfterCoil")
    delta_grains: float = Field(450.6440553, alias="deltaGrains")

    # Heat load breakdown (BTU/hr unless noted)
    walls: float = Field(0, alias="walls")
    partition: float = Field(0, alias="partition")
    floor: float = Field(0, alias="floor")
    roof: float = Field(0, alias="roof")
    lighting_load: float = Field(0, alias="lightingLoad")
    equipment_load: float = Field(0, alias="equipmentLoad")
    people_rsh: float = Field(0, alias="peopleRSH")
    fresh_air_rsh: float = Field(0, alias="freshAirRSH")
    ersh: float = Field(0, alias="ersh")
    people_rlh: float = Field(0, alias="peopleRLH")
    fresh_air_rlh: float = Field(0, alias="freshAirRLH")
    erlh: float = Field(0, alias="erlh")
    erth: float = Field(0, alias="erth")
    ac_load: float = Field(0, alias="acLoad")  # TR
    dehumidification_cfm_final: float = Field(0, alias="dehumidificationCFMFinal")

    # Filtration
    final_filtration: str = Field("100K", alias="finalFiltration")
    nc_20_micron: float = Field(0, alias="nc20Micron")
    plenum_hepa: str = Field("Gene/Entry", alias="plenumHEPA")
    terminal_hepa_100k: str = Field("Gene/Entry", alias="terminalHEPA100K")
    terminal_hepa_1k: str = Field("Gene/Entry", alias="terminalHEPA1K")

    # Air handling unit
    ahu_cfm: float = Field(0, alias="ahuCFM")
    static_pressure: float = Field(0, alias="staticPressure")
    blower_model: str = Field("", alias="blowerModel")
    motor_rating_hp: float = Field(0, alias="motorRatingHP")
    ahu_size: str = Field("", alias="ahuSize")
    cooling_coil_size: str = Field("", alias="coolingCoilSize")
    exhaust_ahu_cfm: float = Field(0, alias="exhaustAHUCFM")
    exhaust_static_pressure: float = Field(0, alias="exhaustStaticPressure")
    exhaust_blower_model: str = Field("", alias="exhaustBlowerModel")
    exhaust_motor_hp: float = Field(0, alias="exhaustMotorHP")
    power_consumption_kw_hr: float = Field(0, alias="powerConsumptionKWHr")


# Partial room record: same fields and aliases as Room, all optional.
RoomInput = create_model(
    "RoomInput",
    __config__={"populate_by_name": True},
    **{
        name: (Optional[field.annotation], Field(None, alias=field.alias))
        for name, field in Room.model_fields.items()
    },
)
RoomInput.__doc__ = "Partial room record as posted by the intake wizard."


class CalculationResults(BaseModel):
    """Totals over a room collection plus the calculated per-room records."""

    model_config = {"populate_by_name": True}

    total_area: float = Field(0, alias="totalArea")                  # m²
    total_volume: float = Field(0, alias="totalVolume")              # ft³
    total_cfm: float = Field(0, alias="totalCFM")                    # AHU CFM
    total_ac_load: float = Field(0, alias="totalACLoad")             # TR
    total_chilled_water: float = Field(0, alias="totalChilledWater")  # GPM
    total_power_consumption: float = Field(0, alias="totalPowerConsumption")  # kW
    room_breakdown: list[Room] = Field(default_factory=list, alias="roomBreakdown")


class RoomCollectionInput(BaseModel):
    """Request body carrying the rooms configured in the wizard."""
    rooms: list[RoomInput] = Field(default_factory=list)  # type: ignore[valid-type]
