"""
API route for the classification air-change lookup.
"""

from fastapi import APIRouter

from cleanroom.engine.air_changes import get_air_changes
from cleanroom.models.air_changes import AirChangesOutput

router = APIRouter(prefix="/api/v1", tags=["air-changes"])


@router.get("/air-changes", response_model=AirChangesOutput)
async def air_changes(classification: str, standard: str = "TGA") -> AirChangesOutput:
    """Air changes per hour for a classification under a standard."""
    return get_air_changes(classification, standard)
