"""Boundary Protocols: contracts between the roster core and its collaborators.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - All IO goes through these Protocol types
    - Store methods return PilotRecord snapshots, never ORM objects
    - update/delete raise NotFoundError for unknown ids
    - A uniqueness violation on an active callsign surfaces as DuplicateActiveCallsignError
    - Notifier.notify raises TransportError on failure

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure core never awaits
"""

from datetime import datetime
from typing import Protocol

from pilot_roster.core.domain_types import PilotId
from pilot_roster.core.lifecycle_events import LifecycleEvent
from pilot_roster.core.pilot_record import PilotRecord


class RosterStore(Protocol):
    """Contract for pilot persistence, implemented by infrastructure."""
    async def get(self, pilot_id: PilotId) -> PilotRecord | None: ...
    async def find_by_callsign(
        self, callsign: str, suspended: bool | None = None,
    ) -> PilotRecord | None: ...
    async def insert(self, fields: dict) -> PilotRecord: ...
    async def update(self, pilot_id: PilotId, fields: dict) -> PilotRecord: ...
    async def delete(self, pilot_id: PilotId) -> None: ...
    async def list_roster(
        self, suspended: bool | None = None,
    ) -> list[PilotRecord]: ...
    async def count_roster(self, suspended: bool | None = None) -> int: ...


class Notifier(Protocol):
    """Contract for outbound lifecycle notifications."""
    async def notify(self, event: LifecycleEvent) -> None: ...


class Clock(Protocol):
    def __call__(self) -> datetime: ...
