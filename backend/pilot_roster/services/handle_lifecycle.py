"""Lifecycle Handlers: create/reclaim, suspend, reactivate, edit, delete, and roster reads.

Invariants:
    - Validation (RequiredFieldError, FormatError, InvalidValueError, MissingReasonError)
      runs before any store call
    - Each mutation is a single store call; the pure core decides the fields
    - Lifecycle events emitted only after the store call succeeded, never awaited
    - delete_forever emits nothing
    - An edited callsign may not land on another live record (active or suspended)

Design Decisions:
    - Store and dispatcher injected per request: the handlers hold no state
    - clock injectable so tests can observe updated_at advancing
"""

import logging
from datetime import datetime, timezone

from pilot_roster.core.domain_types import (
    LifecycleEventKind, PilotId, ResolutionOutcome, SearchDimension, StatusFilter,
)
from pilot_roster.core.enforce_payload import (
    check_flight_hours, validate_new_pilot, validate_pilot_edit,
)
from pilot_roster.core.errors import (
    DuplicateActiveCallsignError, InvalidStateError, NotFoundError,
)
from pilot_roster.core.lifecycle import (
    check_suspension_reason, plan_edit, plan_reactivation, plan_suspension,
)
from pilot_roster.core.lifecycle_events import build_event
from pilot_roster.core.pilot_record import PilotRecord
from pilot_roster.core.repository_protocols import Clock, RosterStore
from pilot_roster.core.resolve_callsign import resolve_creation
from pilot_roster.core.roster_view import filter_roster, summarize_roster
from pilot_roster.services.notification_dispatch import NotificationDispatcher

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LifecycleHandlers:
    """Caller-facing roster operations."""

    def __init__(
        self,
        store: RosterStore,
        dispatcher: NotificationDispatcher,
        clock: Clock = _utcnow,
    ):
        self.store = store
        self.dispatcher = dispatcher
        self.clock = clock

    async def get(self, pilot_id: PilotId) -> PilotRecord:
        pilot = await self.store.get(pilot_id)
        if pilot is None:
            raise NotFoundError(str(pilot_id))
        return pilot

    async def create_or_reclaim(
        self, payload: dict,
    ) -> tuple[ResolutionOutcome, PilotRecord]:
        """Insert a new pilot, or reclaim the suspended holder of the callsign."""
        fields = validate_new_pilot(payload)
        callsign = fields["callsign"]

        active = await self.store.find_by_callsign(callsign, suspended=False)
        suspended = None
        if active is None:
            suspended = await self.store.find_by_callsign(callsign, suspended=True)

        resolution = resolve_creation(fields, active, suspended, self.clock())
        if resolution.outcome == ResolutionOutcome.RECLAIMED:
            pilot = await self.store.update(resolution.target_id, resolution.fields)
        else:
            pilot = await self.store.insert(resolution.fields)

        logger.info(
            f"Pilot {resolution.outcome.value}",
            extra={"pilot_id": pilot.id, "callsign": pilot.callsign},
        )
        self.dispatcher.emit(build_event(resolution.event_kind, pilot))
        return resolution.outcome, pilot

    async def suspend(
        self,
        pilot_id: PilotId,
        reason: str | None,
        flight_hours: float | None = None,
    ) -> PilotRecord:
        reason = check_suspension_reason(reason)
        check_flight_hours(flight_hours)
        pilot = await self.get(pilot_id)

        fields = plan_suspension(pilot, reason, self.clock(), flight_hours)
        pilot = await self.store.update(pilot.id, fields)

        logger.info(
            "Pilot suspended",
            extra={"pilot_id": pilot.id, "callsign": pilot.callsign},
        )
        self.dispatcher.emit(build_event(LifecycleEventKind.SUSPENSION, pilot))
        return pilot

    async def reactivate(self, pilot_id: PilotId) -> PilotRecord:
        pilot = await self.get(pilot_id)
        fields = plan_reactivation(pilot, self.clock())

        holder = await self.store.find_by_callsign(pilot.callsign, suspended=False)
        if holder is not None and holder.id != pilot.id:
            raise DuplicateActiveCallsignError(pilot.callsign)
        pilot = await self.store.update(pilot.id, fields)

        logger.info(
            "Pilot reactivated",
            extra={"pilot_id": pilot.id, "callsign": pilot.callsign},
        )
        self.dispatcher.emit(build_event(LifecycleEventKind.REACTIVATION, pilot))
        return pilot

    async def delete_forever(self, pilot_id: PilotId) -> None:
        await self.store.delete(pilot_id)
        logger.info("Pilot permanently deleted", extra={"pilot_id": pilot_id})

    async def edit(self, pilot_id: PilotId, partial: dict) -> PilotRecord:
        """Edit in place. Never runs the reclaim path."""
        fields = validate_pilot_edit(partial)
        pilot = await self.get(pilot_id)
        changes = plan_edit(pilot, fields, self.clock())
        if not changes:
            return pilot

        if "callsign" in changes:
            await self._check_callsign_free(changes["callsign"], pilot.id)

        pilot = await self.store.update(pilot.id, changes)
        logger.info(
            f"Pilot edited: {', '.join(sorted(k for k in changes if k != 'updated_at'))}",
            extra={"pilot_id": pilot.id, "callsign": pilot.callsign},
        )
        return pilot

    async def _check_callsign_free(self, callsign: str, pilot_id: PilotId) -> None:
        active = await self.store.find_by_callsign(callsign, suspended=False)
        if active is not None and active.id != pilot_id:
            raise DuplicateActiveCallsignError(callsign)
        suspended = await self.store.find_by_callsign(callsign, suspended=True)
        if suspended is not None and suspended.id != pilot_id:
            raise InvalidStateError(
                f"Callsign {callsign} is held by a suspended pilot; "
                "reactivate or delete that record first",
                field="callsign",
            )

    async def list_roster(
        self,
        status: StatusFilter = StatusFilter.ACTIVE,
        query: str | None = None,
        search_by: SearchDimension = SearchDimension.FULLNAME,
    ) -> tuple[list[PilotRecord], dict]:
        """Filtered roster plus the summary of the whole, unfiltered roster."""
        roster = await self.store.list_roster()
        scoped = [
            p for p in roster
            if status.suspended is None or p.suspended == status.suspended
        ]
        return filter_roster(scoped, query, search_by), summarize_roster(roster)

    async def summary(self) -> dict:
        """Counts straight from the store, no roster transfer."""
        active = await self.store.count_roster(suspended=False)
        suspended = await self.store.count_roster(suspended=True)
        return {
            "active_count": active,
            "suspended_count": suspended,
            "total": active + suspended,
        }
