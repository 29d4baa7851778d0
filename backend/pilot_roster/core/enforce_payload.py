"""Payload Enforcement: shape rules for creation and edit requests.

Invariants:
    - PURE: returns a normalized field dict or raises, never touches the store
    - First violation wins, checked in form order: callsign, name, surname, old_flights
    - Blank discord handles normalize to None (the handle is optional)
    - Edit payloads only validate the keys that are present; an explicit null
      old_flights is rejected rather than reset to the creation default
"""

from pilot_roster.core.enforce_callsign import validate_callsign
from pilot_roster.core.errors import InvalidValueError, RequiredFieldError


def _require_text(payload: dict, field: str) -> str:
    value = (payload.get(field) or "").strip()
    if not value:
        raise RequiredFieldError(field)
    return value


def _optional_text(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


def check_old_flights(value: int | None) -> int:
    """Legacy flight count: defaults to 0, never negative."""
    if value is None:
        return 0
    if value < 0:
        raise InvalidValueError(
            "old_flights", "old_flights cannot be negative",
        )
    return value


def check_flight_hours(value: float | None) -> float | None:
    """Flight-hours snapshot: optional, never negative."""
    if value is not None and value < 0:
        raise InvalidValueError(
            "flight_hours", "flight_hours cannot be negative",
        )
    return value


def validate_new_pilot(payload: dict) -> dict:
    """Validate a creation payload. Returns normalized fields."""
    return {
        "callsign": validate_callsign(payload.get("callsign")),
        "name": _require_text(payload, "name"),
        "surname": _require_text(payload, "surname"),
        "discord": _optional_text(payload.get("discord")),
        "old_flights": check_old_flights(payload.get("old_flights")),
    }


def validate_pilot_edit(partial: dict) -> dict:
    """Validate an edit payload. Unknown keys are dropped."""
    fields: dict = {}
    if "callsign" in partial:
        fields["callsign"] = validate_callsign(partial["callsign"])
    for key in ("name", "surname"):
        if key in partial:
            fields[key] = _require_text(partial, key)
    if "discord" in partial:
        fields["discord"] = _optional_text(partial["discord"])
    if "old_flights" in partial:
        if partial["old_flights"] is None:
            raise RequiredFieldError("old_flights")
        fields["old_flights"] = check_old_flights(partial["old_flights"])
    return fields
