"""Lifecycle Events: notification payloads emitted after a successful state change.

Invariants:
    - Events are built from the record AFTER the mutation committed
    - Only suspension events carry a reason
    - Deletion never produces an event
"""

from dataclasses import dataclass, asdict

from pilot_roster.core.domain_types import LifecycleEventKind
from pilot_roster.core.pilot_record import PilotRecord


@dataclass(frozen=True)
class LifecycleEvent:
    kind: LifecycleEventKind
    callsign: str
    name: str
    surname: str
    reason: str | None = None

    def to_payload(self) -> dict:
        payload = asdict(self)
        payload["kind"] = self.kind.value
        return payload


def build_event(kind: LifecycleEventKind, pilot: PilotRecord) -> LifecycleEvent:
    reason = (
        pilot.suspension_reason if kind == LifecycleEventKind.SUSPENSION else None
    )
    return LifecycleEvent(
        kind=kind,
        callsign=pilot.callsign,
        name=pilot.name,
        surname=pilot.surname,
        reason=reason,
    )
