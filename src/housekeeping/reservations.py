"""Reservation synthesis: when does the next guest of a reserved room arrive.

The input only says whether a room is reserved. The arrival time is made up
as the earliest moment the room could be ready plus a random offset. With a
seed the offsets repeat from run to run.
"""

from __future__ import annotations

import random

from housekeeping.config import RESERVATION_OFFSET_MAX, RESERVATION_OFFSET_MIN


class ReservationSynthesizer:
    """Draws reservation offsets from [RESERVATION_OFFSET_MIN, _MAX).

    A seed of None or "" means unseeded.
    """

    def __init__(self, seed: str | None = None) -> None:
        self.seed = seed or None
        if self.seed is None:
            self._rng = random.Random()
        else:
            self._rng = random.Random(self.seed)

    @property
    def is_deterministic(self) -> bool:
        return self.seed is not None

    def offset(self) -> int:
        return self._rng.randrange(RESERVATION_OFFSET_MIN, RESERVATION_OFFSET_MAX)

    def reservation_start(
        self,
        is_occupied: bool,
        occupied_until: int,
        needs_cleaning: bool,
        cleaning_duration: int,
    ) -> int:
        """Earliest possible start plus one fresh offset draw."""
        earliest = (occupied_until if is_occupied else 0) + (
            cleaning_duration if needs_cleaning else 0
        )
        return earliest + self.offset()
