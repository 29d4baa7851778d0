"""Pilot Routes: HTTP surface over the lifecycle handlers.

Invariants:
    - Routes only translate HTTP <-> handler calls; every rule lives in core/services
    - RosterError propagates to the global handler (field-tagged JSON envelope)
    - Static paths (/summary) registered before /{pilot_id}
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from pilot_roster.core.domain_types import PilotId, SearchDimension, StatusFilter
from pilot_roster.infrastructure.database import get_db
from pilot_roster.infrastructure.roster_store import SqlRosterStore
from pilot_roster.schemas.pilot import (
    CreationResponse, PilotCreate, PilotResponse, PilotUpdate,
    RosterResponse, RosterSummary, SuspendRequest,
)
from pilot_roster.services.handle_lifecycle import LifecycleHandlers
from pilot_roster.services.notification_dispatch import (
    NotificationDispatcher, get_dispatcher,
)

router = APIRouter(prefix="/api/v1/pilots", tags=["pilots"])


def get_handlers(
    db: AsyncSession = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> LifecycleHandlers:
    return LifecycleHandlers(SqlRosterStore(db), dispatcher)


@router.post(
    "", response_model=CreationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pilot(
    body: PilotCreate, handlers: LifecycleHandlers = Depends(get_handlers),
):
    """Create a pilot, or reclaim a suspended pilot holding the same callsign."""
    outcome, pilot = await handlers.create_or_reclaim(body.model_dump())
    return CreationResponse(
        outcome=outcome, pilot=PilotResponse.model_validate(pilot),
    )


@router.get("", response_model=RosterResponse)
async def list_pilots(
    status_filter: StatusFilter = Query(StatusFilter.ACTIVE, alias="status"),
    q: str = Query("", max_length=100),
    search_by: SearchDimension = Query(SearchDimension.FULLNAME),
    handlers: LifecycleHandlers = Depends(get_handlers),
):
    """Roster ordered by callsign, filtered by status and an optional query."""
    pilots, summary = await handlers.list_roster(status_filter, q, search_by)
    return RosterResponse(
        pilots=[PilotResponse.model_validate(p) for p in pilots],
        count=len(pilots),
        summary=RosterSummary(**summary),
    )


@router.get("/summary", response_model=RosterSummary)
async def roster_summary(handlers: LifecycleHandlers = Depends(get_handlers)):
    return RosterSummary(**await handlers.summary())


@router.get("/{pilot_id}", response_model=PilotResponse)
async def get_pilot(
    pilot_id: UUID, handlers: LifecycleHandlers = Depends(get_handlers),
):
    return PilotResponse.model_validate(await handlers.get(PilotId(pilot_id)))


@router.patch("/{pilot_id}", response_model=PilotResponse)
async def edit_pilot(
    pilot_id: UUID,
    body: PilotUpdate,
    handlers: LifecycleHandlers = Depends(get_handlers),
):
    """Edit fields in place. Does not change suspension state."""
    pilot = await handlers.edit(
        PilotId(pilot_id), body.model_dump(exclude_unset=True),
    )
    return PilotResponse.model_validate(pilot)


@router.post("/{pilot_id}/suspend", response_model=PilotResponse)
async def suspend_pilot(
    pilot_id: UUID,
    body: SuspendRequest,
    handlers: LifecycleHandlers = Depends(get_handlers),
):
    pilot = await handlers.suspend(
        PilotId(pilot_id), body.reason, body.flight_hours,
    )
    return PilotResponse.model_validate(pilot)


@router.post("/{pilot_id}/reactivate", response_model=PilotResponse)
async def reactivate_pilot(
    pilot_id: UUID, handlers: LifecycleHandlers = Depends(get_handlers),
):
    pilot = await handlers.reactivate(PilotId(pilot_id))
    return PilotResponse.model_validate(pilot)


@router.delete("/{pilot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pilot(
    pilot_id: UUID, handlers: LifecycleHandlers = Depends(get_handlers),
):
    """Permanently remove a pilot, active or suspended. Irreversible."""
    await handlers.delete_forever(PilotId(pilot_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
