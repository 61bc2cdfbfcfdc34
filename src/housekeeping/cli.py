"""Command line: load rooms from JSON, schedule them, print the result."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError

from housekeeping.config import DEFAULT_CLEANING_CREWS, SchedulerConfig
from housekeeping.greedy import greedy_schedule
from housekeeping.loaders import read_json, rooms_from_entries
from housekeeping.render import render_schedule
from housekeeping.types import InvalidRoomRecordError, NoCrewsAvailableError

logger = logging.getLogger(__name__)

EXIT_UNREADABLE = 1
EXIT_BAD_JSON = 2
EXIT_NOT_ARRAY = 3
EXIT_INVALID_RECORD = 4
EXIT_NO_CREWS = 5

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_LOGGING_CONFIGURED = False


def configure_logging(level: str = "WARNING") -> None:
    """Install the stderr handler once; every call sets the root level."""
    global _LOGGING_CONFIGURED
    if not _LOGGING_CONFIGURED:
        logging.basicConfig(
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            stream=sys.stderr,
        )
        _LOGGING_CONFIGURED = True
    logging.getLogger().setLevel(level)


def crew_count(value: str) -> int:
    """argparse type: a non-negative integer."""
    try:
        count = int(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid crew count: {value!r}") from None
    if count < 0:
        raise ArgumentTypeError(f"crew count must be >= 0, got {count}")
    return count


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="housekeeping",
        description="Sorts rooms based on cleaning time to minimize waiting "
        "time for guests.",
    )
    parser.add_argument(
        "-c", "--cleaning-crews",
        type=crew_count,
        default=DEFAULT_CLEANING_CREWS,
        help="The number of cleaning crews employed by the hotel.",
    )
    parser.add_argument(
        "-C", "--hire-crews",
        action="store_true",
        help="Automatically hire more cleaning crews to meet demand.",
    )
    parser.add_argument(
        "-s", "--seed",
        default=None,
        help="Makes guest arrivals predictable by seeding the random source. "
        "An empty string behaves as if no seed was given.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for diagnostics on stderr.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not colour late rooms.",
    )
    parser.add_argument("json_path", help="The input JSON file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        document = read_json(args.json_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Unable to read file {args.json_path}: {e}", file=sys.stderr)
        return EXIT_UNREADABLE
    except json.JSONDecodeError as e:
        print(f"Unable to parse json: {e}", file=sys.stderr)
        return EXIT_BAD_JSON

    if not isinstance(document, list):
        print(f"Expected array, got {json.dumps(document)}!", file=sys.stderr)
        return EXIT_NOT_ARRAY

    try:
        rooms = rooms_from_entries(document, seed=args.seed, source=args.json_path)
    except InvalidRoomRecordError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID_RECORD

    config = SchedulerConfig(
        initial_crew_count=args.cleaning_crews,
        hiring_enabled=args.hire_crews,
    )
    try:
        schedule = greedy_schedule(rooms, config)
    except NoCrewsAvailableError as e:
        logger.debug("Aborting: %s", e)
        print("Nobody to clean our rooms :(", file=sys.stderr)
        return EXIT_NO_CREWS

    print(render_schedule(schedule, color=not args.no_color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
