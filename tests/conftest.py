"""Shared test fixtures and data loading for housekeeping.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Scenario rooms use RoomRecord field names (snake_case); sample input files
under data/fixtures/rooms/ use the camelCase JSON input format.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
ROOMS_DIR = FIXTURES_DIR / "rooms"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def rooms_path(name: str) -> Path:
    """Path of an input file in data/fixtures/rooms/."""
    return ROOMS_DIR / f"{name}.json"


def load_room_entries(name: str) -> list[dict]:
    """Raw camelCase entries from data/fixtures/rooms/{name}.json."""
    return _load_json(rooms_path(name))


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
def make_room(room_number: int = 1, **fields):
    """Build a RoomRecord. Unspecified optional fields are None."""
    from housekeeping.types import RoomRecord

    return RoomRecord(room_number=room_number, **fields)


def make_rooms(specs: list[dict]):
    """Build RoomRecords from scenario dicts."""
    return [make_room(**spec) for spec in specs]


def make_config(spec: dict):
    from housekeeping.config import SchedulerConfig

    return SchedulerConfig(**spec)


def make_entry(**overrides) -> dict:
    """A valid camelCase input entry for an unoccupied, unreserved room."""
    entry = {
        "roomNumber": 1,
        "isOccupied": False,
        "occupiedUntil": 0,
        "isReserved": False,
        "hasToBeCleaned": True,
        "cleaningDuration": 10,
    }
    entry.update(overrides)
    return entry


def event_dict(event) -> dict:
    """The fields of a ScheduleEvent that scenario files pin down."""
    return {
        "crew_id": event.crew_id,
        "completion_time": event.completion_time,
        "room_number": event.room_number,
        "late": event.late,
        "hired": event.hired,
    }


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_entries() -> list[dict]:
    return load_room_entries("sample")


@pytest.fixture
def sample_path() -> Path:
    return rooms_path("sample")


@pytest.fixture
def invalid_path() -> Path:
    return rooms_path("invalid")
