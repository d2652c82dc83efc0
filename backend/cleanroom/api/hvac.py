"""
API routes for cleanroom HVAC load calculation and CSV export.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from cleanroom.config import CSV_FILENAME
from cleanroom.engine.calculator import HVACCalculator, calculate_room
from cleanroom.engine.normalizer import normalize_room
from cleanroom.models.room import (
    CalculationResults,
    Room,
    RoomCollectionInput,
    RoomInput,
)

router = APIRouter(prefix="/api/v1", tags=["hvac"])


def _require_rooms(body: RoomCollectionInput, action: str) -> None:
    if not body.rooms:
        raise ValueError(f"Please add at least one room before {action}.")


@router.post("/hvac/calculate", response_model=CalculationResults)
async def calculate(body: RoomCollectionInput) -> CalculationResults:
    """
    Calculate area, airflow, cooling load, chilled water and fan power for
    every room, plus project totals.

    Missing room fields take their documented defaults.
    """
    try:
        _require_rooms(body, "calculating")
        return HVACCalculator(body.rooms).calculate_all()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/hvac/room", response_model=Room)
async def calculate_single_room(body: RoomInput) -> Room:  # type: ignore[valid-type]
    """Calculate one room as if it were the first row of a project."""
    try:
        return calculate_room(normalize_room(body, 0))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/hvac/export-csv")
async def export_csv(body: RoomCollectionInput) -> Response:
    """Export the room schedule as a downloadable CSV sheet."""
    try:
        _require_rooms(body, "exporting")
        csv_text = HVACCalculator(body.rooms).export_to_csv()
        return Response(
            content=csv_text.encode("utf-8"),
            media_type="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="{CSV_FILENAME}"',
            },
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))
