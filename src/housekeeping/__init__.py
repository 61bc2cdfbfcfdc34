"""housekeeping: Greedy scheduling of cleaning crews to hotel rooms."""

from housekeeping.classifier import RoomTriage, classify_rooms, filter_rooms_to_clean
from housekeeping.config import SchedulerConfig, validate_scheduler_config
from housekeeping.crews import CrewPool, CrewState
from housekeeping.greedy import greedy_schedule, iter_schedule
from housekeeping.loaders import load_rooms_json, rooms_from_entries
from housekeeping.queues import QueueSource, RoomQueues, build_queues
from housekeeping.reservations import ReservationSynthesizer
from housekeeping.selector import select_source
from housekeeping.types import (
    HousekeepingError,
    InvalidRoomRecordError,
    NoCrewsAvailableError,
    RoomRecord,
    Schedule,
    ScheduleEvent,
    ScheduleReport,
)

__all__ = [
    "CrewPool",
    "CrewState",
    "HousekeepingError",
    "InvalidRoomRecordError",
    "NoCrewsAvailableError",
    "QueueSource",
    "ReservationSynthesizer",
    "RoomQueues",
    "RoomRecord",
    "RoomTriage",
    "Schedule",
    "ScheduleEvent",
    "ScheduleReport",
    "SchedulerConfig",
    "build_queues",
    "classify_rooms",
    "filter_rooms_to_clean",
    "greedy_schedule",
    "iter_schedule",
    "load_rooms_json",
    "rooms_from_entries",
    "select_source",
    "validate_scheduler_config",
]
