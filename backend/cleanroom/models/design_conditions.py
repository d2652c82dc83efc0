"""
Pydantic models for deriving room design conditions.

Inside (room) and outside (ambient) dry-bulb / RH pairs resolve to the
temperature and moisture columns of a room record:
  inside °F, outside °F, ΔT, grains before coil (outside air),
  grains after coil (room air), Δgrains.
"""

from typing import Optional

from pydantic import BaseModel, Field

from cleanroom.config import DEFAULT_PRESSURE_IP


class DesignConditionsInput(BaseModel):
    """Input for design-condition derivation (temperatures in °C, RH in %)."""

    inside_temp_c: float = Field(24.0, description="Room dry-bulb temperature (°C)")
    inside_rh: float = Field(40.0, gt=0, le=100, description="Room relative humidity (%)")
    outside_temp_c: float = Field(50.0, description="Outside dry-bulb temperature (°C)")
    outside_rh: float = Field(85.0, gt=0, le=100, description="Outside relative humidity (%)")
    pressure: float = Field(
        default=DEFAULT_PRESSURE_IP,
        gt=0,
        description="Atmospheric pressure (psia)",
    )
    altitude: Optional[float] = Field(
        None, description="Site altitude (ft). Overrides pressure when given."
    )


class DesignConditionsOutput(BaseModel):
    """Derived design conditions, IP units."""

    inside_temp_c: float
    outside_temp_c: float
    inside_temp_f: float
    outside_temp_f: float
    delta_temp_f: float
    inside_rh: float
    outside_rh: float
    grains_before_coil: float   # gr/lb, outside air
    grains_after_coil: float    # gr/lb, room air
    delta_grains: float
    inside_dew_point_f: float
    outside_dew_point_f: float
    pressure: float             # psia
