"""Callsign Resolution: decides insert vs. reclaim for a creation request.

Invariants:
    - PURE: receives the current holders of the callsign, returns a Resolution
    - An active holder always wins: DuplicateActiveCallsignError, nothing planned
    - A suspended holder is reclaimed in place: same id, payload fields overwrite,
      suspension metadata cleared
    - Otherwise a brand-new active record is planned
    - Resolution.fields is exactly what the shell hands to the store

Design Decisions:
    - Holders are looked up by the shell (find_by_callsign) and passed in; the
      decision itself stays free of IO and is testable without a database
"""

from dataclasses import dataclass
from datetime import datetime

from pilot_roster.core.domain_types import (
    LifecycleEventKind, PilotId, ResolutionOutcome,
)
from pilot_roster.core.errors import DuplicateActiveCallsignError
from pilot_roster.core.lifecycle import cleared_suspension_fields
from pilot_roster.core.pilot_record import PilotRecord


RECLAIMED_FIELDS = ("name", "surname", "discord", "old_flights")


@dataclass(frozen=True)
class Resolution:
    """Planned mutation for a creation request."""

    outcome: ResolutionOutcome
    fields: dict
    event_kind: LifecycleEventKind
    target_id: PilotId | None = None


def resolve_creation(
    payload: dict,
    active_holder: PilotRecord | None,
    suspended_holder: PilotRecord | None,
    now: datetime,
) -> Resolution:
    """Resolve a validated creation payload against the callsign's current holders."""
    if active_holder is not None:
        raise DuplicateActiveCallsignError(payload["callsign"])

    if suspended_holder is not None:
        fields = {key: payload[key] for key in RECLAIMED_FIELDS}
        fields.update(cleared_suspension_fields(now))
        return Resolution(
            outcome=ResolutionOutcome.RECLAIMED,
            fields=fields,
            event_kind=LifecycleEventKind.REACTIVATION,
            target_id=suspended_holder.id,
        )

    fields = {
        "callsign": payload["callsign"],
        **{key: payload[key] for key in RECLAIMED_FIELDS},
        **cleared_suspension_fields(now),
        "created_at": now,
    }
    return Resolution(
        outcome=ResolutionOutcome.CREATED,
        fields=fields,
        event_kind=LifecycleEventKind.CREATION,
    )
