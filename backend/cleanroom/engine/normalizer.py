"""
Room normalizer: turns partial room records into fully-populated Rooms.

Missing fields take the defaults declared on the ``Room`` model. A field is
missing when it is absent, None, zero, an empty string or NaN. Identity
fields are generated from the 1-based row position:
  sNo      = position
  ahuNo    = "ACAHU-" + position zero-padded to 3 digits
  roomName = "Room " + position
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from cleanroom.config import AHU_PREFIX
from cleanroom.engine.utils import is_set
from cleanroom.models.room import Room, RoomInput

logger = logging.getLogger(__name__)

PartialRoom = Union[RoomInput, Room, Mapping[str, Any]]


def default_ahu_no(index: int) -> str:
    """AHU identifier for the room at 0-based ``index``."""
    return f"{AHU_PREFIX}-{index + 1:03d}"


def default_room_name(index: int) -> str:
    return f"Room {index + 1}"


def _supplied_fields(partial: PartialRoom) -> dict[str, Any]:
    """Field values (by Python field name) the caller actually supplied."""
    if isinstance(partial, (Room, RoomInput)):
        data = partial.model_dump()
    else:
        data = RoomInput.model_validate(dict(partial)).model_dump()
    return {name: value for name, value in data.items() if is_set(value)}


def normalize_room(partial: PartialRoom, index: int) -> Room:
    """Fill every missing field of the room at 0-based ``index``."""
    fields = _supplied_fields(partial)
    fields["s_no"] = index + 1
    fields.setdefault("ahu_no", default_ahu_no(index))
    fields.setdefault("room_name", default_room_name(index))
    return Room(**fields)


def normalize_rooms(partials: Iterable[PartialRoom]) -> list[Room]:
    """Normalize a room collection, preserving input order."""
    rooms = [normalize_room(partial, index) for index, partial in enumerate(partials)]
    logger.debug("Normalized %d room(s)", len(rooms))
    return rooms
