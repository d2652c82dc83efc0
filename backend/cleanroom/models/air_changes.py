"""
Pydantic models for the classification air-change lookup.
"""

from typing import Optional

from pydantic import BaseModel


class AirChangesOutput(BaseModel):
    """Air changes per hour recommended for a classification under a standard."""
    classification: str
    standard: str
    air_changes: str               # As published: "40", "20-25", "ULPA" or "N/A"
    value: Optional[float] = None  # Usable air changes per hour, if numeric
