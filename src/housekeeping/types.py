"""Shared types: RoomRecord, ScheduleEvent, ScheduleReport and errors."""

from __future__ import annotations

import math
from dataclasses import dataclass

INDEFINITELY = -1


@dataclass
class RoomRecord:
    """A room awaiting cleaning. The arena entry every queue points into.

    Invariants:
        - occupied_until is None (unoccupied), INDEFINITELY, or a timestamp
        - cleaning_completed flips from False to True at most once
    """

    room_number: int
    occupied_until: int | None = None
    reserved_from: int | None = None
    cleaning_duration: int | None = None
    cleaning_completed: bool = False

    @property
    def available_from(self) -> int:
        """Time the room is physically free. Unoccupied rooms are free at 0."""
        return self.occupied_until or 0

    @property
    def cleaning_end(self) -> int:
        """Earliest finish if cleaning starts the moment the room is vacated."""
        return self.available_from + (self.cleaning_duration or 0)

    @property
    def latest_cleaning_start(self) -> float:
        """Latest start that still beats the next guest. +inf if unbounded."""
        if self.reserved_from is None or self.cleaning_duration is None:
            return math.inf
        return self.reserved_from - self.cleaning_duration

    @property
    def is_indefinitely_occupied(self) -> bool:
        return self.occupied_until == INDEFINITELY

    @property
    def is_reserved(self) -> bool:
        return self.reserved_from is not None

    @property
    def needs_cleaning(self) -> bool:
        return bool(self.cleaning_duration)

    def is_free_at(self, t: int) -> bool:
        return self.available_from <= t

    def clean(self, earliest_start: int) -> int:
        """Mark the room cleaned and return the completion time.

        Cleaning starts at the later of earliest_start and the moment the
        room is vacated. Rooms without a duration complete at earliest_start.
        """
        self.cleaning_completed = True
        if not self.cleaning_duration:
            return earliest_start
        return max(self.available_from, earliest_start) + self.cleaning_duration

    def is_late(self, completion_time: int) -> bool:
        """Whether the next guest arrives before completion_time."""
        if self.reserved_from is None:
            return False
        return completion_time > self.reserved_from


@dataclass(frozen=True)
class ScheduleEvent:
    """Immutable record of one cleaning performed by one crew."""

    crew_id: int
    completion_time: int
    room_number: int
    late: bool
    hired: bool = False
    occupied_until: int | None = None
    reserved_from: int | None = None
    cleaning_duration: int | None = None


@dataclass(frozen=True)
class ScheduleReport:
    """Aggregate counters for a finished run."""

    late_room_count: int = 0
    crews_hired: int = 0
    indefinitely_occupied_count: int = 0


@dataclass(frozen=True)
class Schedule:
    """Events in emission order plus the final report."""

    events: tuple[ScheduleEvent, ...]
    report: ScheduleReport

    @property
    def is_empty(self) -> bool:
        return not self.events


class HousekeepingError(Exception):
    """Base class for errors raised by this package."""


class NoCrewsAvailableError(HousekeepingError):
    """Raised when rooms need cleaning but no crew exists and hiring is off."""

    def __init__(self, room_count: int) -> None:
        self.room_count = room_count
        super().__init__(
            f"No crews available: {room_count} room(s) need cleaning, "
            f"no cleaning crews are employed and hiring is disabled"
        )


class InvalidRoomRecordError(HousekeepingError):
    """Raised by the loader when input records fail validation."""

    def __init__(self, errors: list[str], source: str | None = None) -> None:
        self.errors = list(errors)
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(
            f"Invalid room records{where}:\n"
            + "\n".join(f"  - {e}" for e in self.errors)
        )
