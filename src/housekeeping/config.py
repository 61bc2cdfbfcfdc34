"""Scheduler configuration and its validation rules."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CLEANING_CREWS = 1

# Reservation offsets are drawn from [MIN, MAX)
RESERVATION_OFFSET_MIN = 500
RESERVATION_OFFSET_MAX = 20000


@dataclass(frozen=True)
class SchedulerConfig:
    initial_crew_count: int = DEFAULT_CLEANING_CREWS
    hiring_enabled: bool = False

    @property
    def can_staff(self) -> bool:
        """Whether any crew can ever be put to work."""
        return self.initial_crew_count > 0 or self.hiring_enabled


def validate_scheduler_config(config: SchedulerConfig) -> None:
    if isinstance(config.initial_crew_count, bool) or not isinstance(
        config.initial_crew_count, int
    ):
        raise ValueError("initial_crew_count must be an integer")
    if config.initial_crew_count < 0:
        raise ValueError("initial_crew_count must be >= 0")
    if not isinstance(config.hiring_enabled, bool):
        raise ValueError("hiring_enabled must be a boolean")
