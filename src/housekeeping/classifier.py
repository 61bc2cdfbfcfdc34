"""Room triage: filter out rooms with nothing to do, then split the rest."""

from __future__ import annotations

from dataclasses import dataclass, field

from housekeeping.types import RoomRecord


@dataclass
class RoomTriage:
    """Result of classify_rooms. Lists keep input order."""

    reserved: list[RoomRecord] = field(default_factory=list)
    unreserved: list[RoomRecord] = field(default_factory=list)
    indefinitely_occupied: int = 0

    @property
    def schedulable_count(self) -> int:
        return len(self.reserved) + len(self.unreserved)


def filter_rooms_to_clean(rooms: list[RoomRecord]) -> list[RoomRecord]:
    """Drop rooms with no cleaning duration or a zero duration."""
    return [room for room in rooms if room.needs_cleaning]


def classify_rooms(rooms: list[RoomRecord]) -> RoomTriage:
    """Partition filtered rooms into reserved, unreserved and a counter.

    A room occupied indefinitely is only counted, even if it is reserved.
    """
    triage = RoomTriage()
    for room in rooms:
        if room.is_indefinitely_occupied:
            triage.indefinitely_occupied += 1
        elif room.is_reserved:
            triage.reserved.append(room)
        else:
            triage.unreserved.append(room)
    return triage
