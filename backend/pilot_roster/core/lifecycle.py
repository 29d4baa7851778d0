"""Lifecycle State Machine: legal Active/Suspended transitions and their field changes.

Invariants:
    - PURE: every plan_* function returns the field dict to persist, never mutates
    - suspend: ACTIVE only, non-blank reason, optional non-negative flight_hours;
      sets suspension_reason, suspension_date and flight_hours together
    - reactivate: SUSPENDED only; clears the whole suspension snapshot to None
    - edit: never changes `suspended`; callsign editable for ACTIVE pilots only
    - Every plan stamps updated_at with the supplied `now`

Transitions:
    ACTIVE    --suspend-->     SUSPENDED
    SUSPENDED --reactivate-->  ACTIVE
    ANY       --delete-->      (record removed, no further transitions)
"""

from datetime import datetime

from pilot_roster.core.enforce_payload import check_flight_hours
from pilot_roster.core.errors import InvalidStateError, MissingReasonError
from pilot_roster.core.pilot_record import PilotRecord


def cleared_suspension_fields(now: datetime) -> dict:
    """Fields that put a record in the ACTIVE state."""
    return {
        "suspended": False,
        "suspension_reason": None,
        "suspension_date": None,
        "flight_hours": None,
        "updated_at": now,
    }


def check_suspension_reason(reason: str | None) -> str:
    """Reason must contain something other than whitespace."""
    reason = (reason or "").strip()
    if not reason:
        raise MissingReasonError()
    return reason


def plan_suspension(
    pilot: PilotRecord,
    reason: str | None,
    now: datetime,
    flight_hours: float | None = None,
) -> dict:
    """ACTIVE -> SUSPENDED."""
    reason = check_suspension_reason(reason)
    flight_hours = check_flight_hours(flight_hours)
    if pilot.suspended:
        raise InvalidStateError(f"Pilot {pilot.callsign} is already suspended")
    return {
        "suspended": True,
        "suspension_reason": reason,
        "suspension_date": now,
        "flight_hours": flight_hours,
        "updated_at": now,
    }


def plan_reactivation(pilot: PilotRecord, now: datetime) -> dict:
    """SUSPENDED -> ACTIVE."""
    if not pilot.suspended:
        raise InvalidStateError(f"Pilot {pilot.callsign} is not suspended")
    return cleared_suspension_fields(now)


def plan_edit(pilot: PilotRecord, fields: dict, now: datetime) -> dict:
    """In-place edit of validated fields. Empty dict means nothing to persist."""
    changes = {
        key: value for key, value in fields.items()
        if getattr(pilot, key) != value
    }
    if "callsign" in changes and pilot.suspended:
        raise InvalidStateError(
            "Callsign of a suspended pilot cannot be changed", field="callsign",
        )
    if not changes:
        return {}
    changes["updated_at"] = now
    return changes
