"""Plain-text rendering of schedules for terminals.

Nothing in the scheduler imports this module. Colour is ANSI escape codes.
"""

from __future__ import annotations

from housekeeping.types import INDEFINITELY, Schedule, ScheduleEvent, ScheduleReport

RED = "\x1b[31m"
CLEAR = "\x1b[0m"


def _red(text: str, color: bool) -> str:
    return f"{RED}{text}{CLEAR}" if color else text


def describe_room(room: ScheduleEvent) -> str:
    """'#12 occupied until 300 reserved from 900 requires cleaning for 40 ticks'.

    Accepts anything with room_number, occupied_until, reserved_from and
    cleaning_duration, so a RoomRecord works too. A reservation at exactly
    0 prints as plain 'reserved'.
    """
    if room.occupied_until is None:
        occupancy = "unoccupied"
    elif room.occupied_until == INDEFINITELY:
        occupancy = "occupied indefinitely"
    else:
        occupancy = f"occupied until {room.occupied_until}"

    if room.reserved_from is None:
        reservation = "unreserved"
    elif room.reserved_from == 0:
        reservation = "reserved"
    else:
        reservation = f"reserved from {room.reserved_from}"

    if room.cleaning_duration is None:
        cleaning = "clean"
    else:
        cleaning = f"requires cleaning for {room.cleaning_duration} ticks"

    return f"#{room.room_number} {occupancy} {reservation} {cleaning}"


def format_event(event: ScheduleEvent, color: bool = True) -> str:
    line = f"{event.crew_id} @ {event.completion_time}: Cleaned {describe_room(event)}"
    if event.hired:
        line = "hiring! " + line
    if event.late:
        line += " " + _red("LATE!!", color)
    return line


def format_report(report: ScheduleReport, color: bool = True) -> list[str]:
    """Summary lines. Counters that are zero produce no line."""
    lines: list[str] = []
    if report.late_room_count > 0:
        lines.append(f"{_red(str(report.late_room_count), color)} rooms were late!")
    if report.crews_hired > 0:
        lines.append(f"Had to hire {_red(str(report.crews_hired), color)} new crews.")
    if report.indefinitely_occupied_count > 0:
        lines.append(
            f"{report.indefinitely_occupied_count} rooms need cleaning "
            f"but are occupied indefinitely."
        )
    return lines


def render_schedule(schedule: Schedule, color: bool = True) -> str:
    """Full text view: one line per event, then the report."""
    if schedule.is_empty and schedule.report == ScheduleReport():
        return "All rooms are clean."

    lines = [format_event(event, color) for event in schedule.events]
    lines.extend(format_report(schedule.report, color))
    return "\n".join(lines)
