"""
API routes for room design conditions.
"""

from fastapi import APIRouter, HTTPException

from cleanroom.engine.design_conditions import derive_design_conditions
from cleanroom.models.design_conditions import (
    DesignConditionsInput,
    DesignConditionsOutput,
)

router = APIRouter(prefix="/api/v1", tags=["design-conditions"])


@router.post("/design-conditions", response_model=DesignConditionsOutput)
async def design_conditions(data: DesignConditionsInput) -> DesignConditionsOutput:
    """
    Derive °F temperatures, ΔT and grains before/after the coil from inside
    and outside dry-bulb (°C) and RH (%).
    """
    try:
        return derive_design_conditions(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
