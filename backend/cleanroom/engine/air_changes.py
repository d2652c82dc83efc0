"""
Classification air-change lookup.

Looks up the air changes per hour published for a cleanroom classification
under a regulatory standard (EUGMP, WHO, TGA). Classifications only listed
under EUGMP fall back to that entry; unknown combinations give "N/A".
"""

import re
from typing import Optional

from cleanroom.config import (
    AIR_CHANGES_FALLBACK_STANDARD,
    AIR_CHANGES_NOT_AVAILABLE,
    CLASS_AIR_CHANGES,
)
from cleanroom.models.air_changes import AirChangesOutput

_NUMBER_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)")


def lookup_air_changes(classification: str, standard: str) -> str:
    """Published air-change entry for a classification, as text."""
    entries = CLASS_AIR_CHANGES.get(classification)
    if not entries:
        return AIR_CHANGES_NOT_AVAILABLE
    if standard in entries:
        return entries[standard]
    return entries.get(AIR_CHANGES_FALLBACK_STANDARD, AIR_CHANGES_NOT_AVAILABLE)


def parse_air_changes(entry: str) -> Optional[float]:
    """
    Number of air changes per hour to use for a room.

    Ranges such as "20-25" give their lower bound. "ULPA" and "N/A" give
    None: those grades are not sized by air changes.
    """
    match = _NUMBER_RE.match(entry)
    if match is None:
        return None
    return float(match.group(1))


def get_air_changes(classification: str, standard: str) -> AirChangesOutput:
    entry = lookup_air_changes(classification, standard)
    return AirChangesOutput(
        classification=classification,
        standard=standard,
        air_changes=entry,
        value=parse_air_changes(entry),
    )
