"""Greedy online scheduler: assign rooms to crews one decision at a time.

Each iteration takes the crew that becomes free first, asks the selector
which queue to serve, and cleans that queue's head room. When hiring is
enabled and the crew would start too late to beat the next guest, a fresh
crew is hired for the room instead and starts the moment the room is free.
"""

from __future__ import annotations

import logging
from typing import Generator

from housekeeping.classifier import classify_rooms, filter_rooms_to_clean
from housekeeping.config import SchedulerConfig, validate_scheduler_config
from housekeeping.crews import CrewPool, CrewState
from housekeeping.queues import QueueSource, build_queues
from housekeeping.selector import select_source
from housekeeping.types import (
    NoCrewsAvailableError,
    RoomRecord,
    Schedule,
    ScheduleEvent,
    ScheduleReport,
)

logger = logging.getLogger(__name__)


def iter_schedule(
    rooms: list[RoomRecord],
    config: SchedulerConfig | None = None,
) -> Generator[ScheduleEvent, None, ScheduleReport]:
    """Yield scheduling events in order. The generator returns the report.

    Rooms are mutated: every scheduled room ends with cleaning_completed set.

    Raises:
        NoCrewsAvailableError: rooms need cleaning, there are no crews and
            hiring is disabled. Raised before the first event.
        ValueError: the configuration is invalid.
    """
    if config is None:
        config = SchedulerConfig()
    validate_scheduler_config(config)

    to_clean = filter_rooms_to_clean(rooms)
    if not to_clean:
        logger.info("No rooms need cleaning")
        return ScheduleReport()
    if not config.can_staff:
        raise NoCrewsAvailableError(len(to_clean))

    triage = classify_rooms(to_clean)
    queues = build_queues(triage)
    pool = CrewPool.with_crews(config.initial_crew_count)
    logger.debug(
        "Scheduling %d room(s), %d reserved, with %d crew(s), hiring %s",
        triage.schedulable_count,
        len(triage.reserved),
        config.initial_crew_count,
        "enabled" if config.hiring_enabled else "disabled",
    )

    crews_hired = 0
    late_rooms = 0
    while True:
        # An empty pool only happens when starting from zero crews with hiring
        crew = pool.peek() if pool else None
        current_time = crew.available_at if crew is not None else 0

        source = select_source(queues, current_time)
        if source is QueueSource.NONE:
            break

        room = queues.pop(source)
        if room.cleaning_completed:
            logger.debug(
                "Discarding room %d from %s: already cleaned",
                room.room_number,
                source.value,
            )
            continue

        hire = config.hiring_enabled and (
            crew is None or current_time > room.latest_cleaning_start
        )
        if hire:
            crews_hired += 1
            worker = CrewState.new(config.initial_crew_count + crews_hired)
            current_time = room.available_from
            logger.info(
                "Hired crew %d for room %d (latest start %s)",
                worker.id,
                room.room_number,
                room.latest_cleaning_start,
            )
        else:
            worker = crew

        completion = room.clean(current_time)
        late = room.is_late(completion)
        if late:
            late_rooms += 1

        if not hire:
            pool.pop_min()
        pool.push(worker.clean_until(completion))

        logger.debug(
            "Crew %d cleaned room %d from %s, done at %d%s",
            worker.id,
            room.room_number,
            source.value,
            completion,
            " (late)" if late else "",
        )
        yield ScheduleEvent(
            crew_id=worker.id,
            completion_time=completion,
            room_number=room.room_number,
            late=late,
            hired=hire,
            occupied_until=room.occupied_until,
            reserved_from=room.reserved_from,
            cleaning_duration=room.cleaning_duration,
        )

    report = ScheduleReport(
        late_room_count=late_rooms,
        crews_hired=crews_hired,
        indefinitely_occupied_count=triage.indefinitely_occupied,
    )
    logger.info(
        "Schedule finished: %d late room(s), %d crew(s) hired, "
        "%d room(s) occupied indefinitely",
        report.late_room_count,
        report.crews_hired,
        report.indefinitely_occupied_count,
    )
    return report


def greedy_schedule(
    rooms: list[RoomRecord],
    config: SchedulerConfig | None = None,
) -> Schedule:
    """Run the scheduler to completion.

    Args:
        rooms: Materialised room records, in input order. Rooms that need no
            cleaning are ignored.
        config: Crew count and hiring switch. Defaults to one crew, no hiring.

    Returns:
        Schedule with events in emission order and the final report.

    Raises:
        NoCrewsAvailableError: If no crew can ever be put to work.
    """
    events: list[ScheduleEvent] = []
    run = iter_schedule(rooms, config)
    while True:
        try:
            events.append(next(run))
        except StopIteration as stop:
            report = stop.value
            break
    return Schedule(events=tuple(events), report=report)
