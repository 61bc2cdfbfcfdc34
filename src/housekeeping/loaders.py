"""Data loading: JSON room entries to RoomRecords."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from housekeeping.reservations import ReservationSynthesizer
from housekeeping.schema import validate_room_entries
from housekeeping.types import InvalidRoomRecordError, RoomRecord

logger = logging.getLogger(__name__)


def read_json(path: str | Path):
    """Parse a UTF-8 JSON file. OSError, UnicodeDecodeError and
    json.JSONDecodeError propagate.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def room_from_entry(entry: dict, synthesizer: ReservationSynthesizer) -> RoomRecord:
    """Materialise one validated entry.

    Reserved entries always consume one offset draw, even when the room
    turns out to be occupied indefinitely and so never gets a reservation.
    """
    is_occupied = entry["isOccupied"]
    occupied_until = entry["occupiedUntil"]
    needs_cleaning = entry["hasToBeCleaned"]
    cleaning_duration = entry["cleaningDuration"]

    reserved_from = None
    if entry["isReserved"]:
        start = synthesizer.reservation_start(
            is_occupied, occupied_until, needs_cleaning, cleaning_duration
        )
        if not is_occupied or occupied_until >= 0:
            reserved_from = start

    return RoomRecord(
        room_number=entry["roomNumber"],
        occupied_until=occupied_until if is_occupied else None,
        reserved_from=reserved_from,
        cleaning_duration=cleaning_duration if needs_cleaning else None,
    )


def rooms_from_entries(
    entries: object,
    seed: str | None = None,
    source: str | None = None,
) -> list[RoomRecord]:
    """Validate and materialise a list of JSON room entries in input order.

    Raises InvalidRoomRecordError listing every problem found.
    """
    errors = validate_room_entries(entries)
    if errors:
        raise InvalidRoomRecordError(errors, source=source)

    synthesizer = ReservationSynthesizer(seed)
    rooms = [room_from_entry(entry, synthesizer) for entry in entries]
    logger.debug(
        "Loaded %d room(s)%s, %s reservations",
        len(rooms),
        f" from {source}" if source else "",
        "seeded" if synthesizer.is_deterministic else "unseeded",
    )
    return rooms


def load_rooms_json(path: str | Path, seed: str | None = None) -> list[RoomRecord]:
    """Load RoomRecords from a JSON file.

    The file must hold an array of objects with the keys
    roomNumber, isOccupied, occupiedUntil, isReserved, hasToBeCleaned
    and cleaningDuration.

    Raises InvalidRoomRecordError if validation fails.
    """
    path = Path(path)
    return rooms_from_entries(read_json(path), seed=seed, source=path.name)
