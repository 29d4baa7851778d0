"""Pilot Record: immutable snapshot of one roster entry as seen by the core.

Invariants:
    - suspended is True iff suspension_reason and suspension_date are both set
    - id is assigned by the store and never changes
    - Records are frozen; transitions produce field dicts, the store produces new records

Design Decisions:
    - Decoupled from the ORM model: core logic never touches SQLAlchemy objects
"""

from dataclasses import dataclass
from datetime import datetime

from pilot_roster.core.domain_types import Callsign, PilotId, PilotStatus


@dataclass(frozen=True)
class PilotRecord:
    """Pure snapshot of a pilot, no IO."""

    id: PilotId
    callsign: Callsign
    name: str
    surname: str
    discord: str | None = None
    old_flights: int = 0
    flight_hours: float | None = None
    suspended: bool = False
    suspension_reason: str | None = None
    suspension_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def status(self) -> PilotStatus:
        return PilotStatus.SUSPENDED if self.suspended else PilotStatus.ACTIVE

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    @property
    def suspension_metadata_consistent(self) -> bool:
        has_metadata = (
            self.suspension_reason is not None
            and self.suspension_date is not None
        )
        if self.suspended:
            return has_metadata
        return self.suspension_reason is None and self.suspension_date is None
