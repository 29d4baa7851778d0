"""SQL Roster Store: SQLAlchemy implementation of the RosterStore protocol.

Invariants:
    - One AsyncSession per store instance; every mutation commits once
    - Returns PilotRecord snapshots, never ORM rows
    - IntegrityError on commit (active-callsign unique index) -> DuplicateActiveCallsignError
    - Any other SQLAlchemyError -> TransportError("store"); the session is rolled back
    - Timestamps read back without tzinfo (SQLite) are treated as UTC
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pilot_roster.core.domain_types import Callsign, PilotId
from pilot_roster.core.errors import (
    DuplicateActiveCallsignError, NotFoundError, TransportError,
)
from pilot_roster.core.pilot_record import PilotRecord
from pilot_roster.models.pilot import Pilot

logger = logging.getLogger(__name__)


def _aware(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_record(row: Pilot) -> PilotRecord:
    """ORM row -> immutable core snapshot."""
    return PilotRecord(
        id=PilotId(row.id),
        callsign=Callsign(row.callsign),
        name=row.name,
        surname=row.surname,
        discord=row.discord,
        old_flights=row.old_flights,
        flight_hours=row.flight_hours,
        suspended=row.suspended,
        suspension_reason=row.suspension_reason,
        suspension_date=_aware(row.suspension_date),
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


class SqlRosterStore:
    """Pilot persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _translate_errors(
        self, operation: str, callsign: str | None = None,
    ) -> AsyncGenerator[None, None]:
        try:
            yield
        except IntegrityError as e:
            await self.db.rollback()
            if callsign is None:
                logger.error(f"Unexpected integrity error on {operation}: {e}")
                raise TransportError("Integrity constraint violated", "store", operation) from e
            logger.warning(
                f"Active callsign collision on {operation}",
                extra={"callsign": callsign, "error_code": "DUPLICATE_ACTIVE_CALLSIGN"},
            )
            raise DuplicateActiveCallsignError(callsign) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Store {operation} failed: {e}")
            raise TransportError(type(e).__name__, "store", operation) from e

    async def _load(self, pilot_id: PilotId) -> Pilot | None:
        async with self._translate_errors("get"):
            return await self.db.get(Pilot, pilot_id)

    async def get(self, pilot_id: PilotId) -> PilotRecord | None:
        row = await self._load(pilot_id)
        return to_record(row) if row else None

    async def find_by_callsign(
        self, callsign: str, suspended: bool | None = None,
    ) -> PilotRecord | None:
        query = select(Pilot).where(Pilot.callsign == callsign)
        if suspended is not None:
            query = query.where(Pilot.suspended == suspended)
        query = query.order_by(Pilot.updated_at.desc()).limit(1)
        async with self._translate_errors("find_by_callsign"):
            result = await self.db.execute(query)
            row = result.scalar_one_or_none()
        return to_record(row) if row else None

    async def insert(self, fields: dict) -> PilotRecord:
        row = Pilot(**fields)
        async with self._translate_errors("insert", fields.get("callsign")):
            self.db.add(row)
            await self.db.commit()
        return to_record(row)

    async def update(self, pilot_id: PilotId, fields: dict) -> PilotRecord:
        row = await self._load(pilot_id)
        if row is None:
            raise NotFoundError(str(pilot_id))
        callsign = fields.get("callsign", row.callsign)
        async with self._translate_errors("update", callsign):
            for key, value in fields.items():
                setattr(row, key, value)
            await self.db.commit()
        return to_record(row)

    async def delete(self, pilot_id: PilotId) -> None:
        row = await self._load(pilot_id)
        if row is None:
            raise NotFoundError(str(pilot_id))
        async with self._translate_errors("delete"):
            await self.db.delete(row)
            await self.db.commit()

    async def list_roster(
        self, suspended: bool | None = None,
    ) -> list[PilotRecord]:
        query = select(Pilot).order_by(Pilot.callsign.asc(), Pilot.created_at.asc())
        if suspended is not None:
            query = query.where(Pilot.suspended == suspended)
        async with self._translate_errors("list"):
            result = await self.db.execute(query)
            rows = result.scalars().all()
        return [to_record(r) for r in rows]

    async def count_roster(self, suspended: bool | None = None) -> int:
        query = select(func.count()).select_from(Pilot)
        if suspended is not None:
            query = query.where(Pilot.suspended == suspended)
        async with self._translate_errors("count"):
            result = await self.db.execute(query)
            return result.scalar_one()
