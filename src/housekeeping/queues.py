"""Queue building: two sorted index deques over reserved rooms, one cursor.

Reserved rooms live once in an arena (``RoomQueues.reserved``). Both
orderings hold indices into it, so a room cleaned through one ordering shows
up as completed when the other ordering reaches it.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from housekeeping.classifier import RoomTriage
from housekeeping.types import RoomRecord


class QueueSource(Enum):
    """Which queue the next room comes from."""

    BY_ARRIVAL = "by_arrival"
    BY_CLEANING_END = "by_cleaning_end"
    UNRESERVED = "unreserved"
    NONE = "none"


def sorted_indices(
    rooms: list[RoomRecord],
    key: Callable[[RoomRecord], float],
) -> deque[int]:
    """Indices of rooms ordered by key. Stable: ties keep input order."""
    return deque(sorted(range(len(rooms)), key=lambda i: key(rooms[i])))


@dataclass
class RoomQueues:
    """The three room queues consulted by the selector."""

    reserved: list[RoomRecord]
    unreserved: list[RoomRecord]
    by_arrival: deque[int]
    by_cleaning_end: deque[int]
    unreserved_cursor: int = 0

    def head(self, source: QueueSource) -> RoomRecord | None:
        """Room at the front of a queue, or None if it is exhausted."""
        if source is QueueSource.BY_ARRIVAL:
            return self.reserved[self.by_arrival[0]] if self.by_arrival else None
        if source is QueueSource.BY_CLEANING_END:
            if not self.by_cleaning_end:
                return None
            return self.reserved[self.by_cleaning_end[0]]
        if source is QueueSource.UNRESERVED:
            if self.unreserved_cursor >= len(self.unreserved):
                return None
            return self.unreserved[self.unreserved_cursor]
        return None

    def pop(self, source: QueueSource) -> RoomRecord:
        """Dequeue the head of a queue.

        Raises IndexError if the queue is exhausted or source is NONE.
        """
        if source is QueueSource.BY_ARRIVAL:
            return self.reserved[self.by_arrival.popleft()]
        if source is QueueSource.BY_CLEANING_END:
            return self.reserved[self.by_cleaning_end.popleft()]
        if source is QueueSource.UNRESERVED:
            if self.unreserved_cursor >= len(self.unreserved):
                raise IndexError("unreserved queue is exhausted")
            room = self.unreserved[self.unreserved_cursor]
            self.unreserved_cursor += 1
            return room
        raise IndexError(f"cannot pop from {source}")

    @property
    def is_exhausted(self) -> bool:
        return (
            not self.by_arrival
            and not self.by_cleaning_end
            and self.unreserved_cursor >= len(self.unreserved)
        )


def build_queues(triage: RoomTriage) -> RoomQueues:
    """Order reserved rooms by urgency and by cleaning end; cursor at 0."""
    reserved = triage.reserved
    return RoomQueues(
        reserved=reserved,
        unreserved=triage.unreserved,
        by_arrival=sorted_indices(reserved, lambda r: r.latest_cleaning_start),
        by_cleaning_end=sorted_indices(reserved, lambda r: r.cleaning_end),
    )
