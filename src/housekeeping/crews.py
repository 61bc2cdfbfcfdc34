"""CrewState and CrewPool: min-heap of crews keyed by (available_at, id)."""

from __future__ import annotations

import heapq
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CrewState:
    """A cleaning crew and the time it next becomes free.

    Field order defines the heap ordering: earliest available first,
    lower id first on ties.
    """

    available_at: int
    id: int

    @classmethod
    def new(cls, crew_id: int, available_at: int = 0) -> CrewState:
        return cls(available_at=available_at, id=crew_id)

    def clean_until(self, completion_time: int) -> CrewState:
        """Same crew, busy until completion_time."""
        return CrewState(available_at=completion_time, id=self.id)


class CrewPool:
    """Owns every CrewState. peek/pop_min/push are O(log n) or better.

    Peeking or popping an empty pool raises IndexError.
    """

    def __init__(self, crews: list[CrewState] | None = None) -> None:
        self._heap: list[CrewState] = list(crews or [])
        heapq.heapify(self._heap)

    @classmethod
    def with_crews(cls, count: int) -> CrewPool:
        """Crews 0..count-1, all available at time 0."""
        return cls([CrewState.new(crew_id) for crew_id in range(count)])

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def peek(self) -> CrewState:
        if not self._heap:
            raise IndexError("peek from an empty crew pool")
        return self._heap[0]

    def pop_min(self) -> CrewState:
        if not self._heap:
            raise IndexError("pop from an empty crew pool")
        return heapq.heappop(self._heap)

    def push(self, crew: CrewState) -> None:
        heapq.heappush(self._heap, crew)
