"""Input validation for room entries as they appear in JSON input."""

from __future__ import annotations

# JSON key -> required Python type
ROOM_FIELDS: dict[str, type] = {
    "roomNumber": int,
    "isOccupied": bool,
    "occupiedUntil": int,
    "isReserved": bool,
    "hasToBeCleaned": bool,
    "cleaningDuration": int,
}


def _type_name(value: object) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def _matches(value: object, expected: type) -> bool:
    # bool is a subclass of int, but true/false is not a room number
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def validate_room_entry(entry: object) -> list[str]:
    """Validate one room entry. Returns list of error messages (empty = valid).

    Checks:
    - The entry is an object
    - Every field in ROOM_FIELDS is present with the expected type
    """
    if not isinstance(entry, dict):
        return [f"expected object, got {_type_name(entry)}"]

    errors: list[str] = []
    for key, expected in ROOM_FIELDS.items():
        if key not in entry:
            errors.append(f"missing '{key}'")
            continue
        if not _matches(entry[key], expected):
            errors.append(
                f"'{key}' must be {expected.__name__}, "
                f"got {entry[key]!r} ({_type_name(entry[key])})"
            )
    return errors


def validate_room_entries(entries: object) -> list[str]:
    """Validate a whole input document. Returns list of error messages."""
    if not isinstance(entries, list):
        return [f"expected array, got {_type_name(entries)}"]

    errors: list[str] = []
    for i, entry in enumerate(entries):
        for message in validate_room_entry(entry):
            errors.append(f"Entry {i}: {message}")
    return errors
