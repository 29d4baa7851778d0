"""Pilot Schemas: Pydantic models for the roster API boundary.

Invariants:
    - Request models check types and numeric bounds only; blank/format rules live in
      the core so they surface as field-tagged RosterErrors
    - PilotUpdate is partial: only fields explicitly sent are applied
    - PilotResponse mirrors PilotRecord one-to-one
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from pilot_roster.core.domain_types import ResolutionOutcome


class PilotCreate(BaseModel):
    """Creation request. Resolves to insert or reclaim."""
    callsign: str = Field(max_length=16)
    name: str = Field(max_length=100)
    surname: str = Field(max_length=100)
    discord: str | None = Field(None, max_length=100)
    old_flights: int = 0


class PilotUpdate(BaseModel):
    """Partial edit. Omitted fields are left untouched."""
    callsign: str | None = Field(None, max_length=16)
    name: str | None = Field(None, max_length=100)
    surname: str | None = Field(None, max_length=100)
    discord: str | None = Field(None, max_length=100)
    old_flights: int | None = None


class SuspendRequest(BaseModel):
    """Suspension request. Reason is checked by the core (MissingReasonError)."""
    reason: str | None = Field(None, max_length=2000)
    flight_hours: float | None = None


class PilotResponse(BaseModel):
    """Public-facing pilot data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    callsign: str
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


class CreationResponse(BaseModel):
    outcome: ResolutionOutcome
    pilot: PilotResponse


class RosterSummary(BaseModel):
    active_count: int
    suspended_count: int
    total: int


class RosterResponse(BaseModel):
    pilots: list[PilotResponse]
    count: int
    summary: RosterSummary
