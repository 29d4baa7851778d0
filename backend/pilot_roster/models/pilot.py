"""Pilot ORM: persists roster entries in the `pilots` table.

Invariants:
    - id is UUID primary key (client-side default)
    - callsign is unique among rows with suspended = false (partial unique index)
    - suspension_reason / suspension_date nullable; set only while suspended
    - updated_at stamped by the core on every mutation

Design Decisions:
    - Partial index instead of a plain unique constraint: suspended rows may keep
      their callsign until they are reclaimed or deleted
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, CheckConstraint, DateTime, Float, Index, Integer, String, Text,
    Uuid, text,
)
from sqlalchemy.orm import Mapped, mapped_column

from pilot_roster.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Pilot(Base):
    """Roster entry: one pilot, active or suspended."""
    __tablename__ = "pilots"
    __table_args__ = (
        Index(
            "uq_pilots_active_callsign", "callsign",
            unique=True,
            postgresql_where=text("suspended = false"),
            sqlite_where=text("suspended = 0"),
        ),
        Index("ix_pilots_callsign_suspended", "callsign", "suspended"),
        CheckConstraint("old_flights >= 0", name="ck_pilots_old_flights_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    callsign: Mapped[str] = mapped_column(String(6), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    surname: Mapped[str] = mapped_column(String(100), nullable=False)
    discord: Mapped[str | None] = mapped_column(String(100), nullable=True)
    old_flights: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    flight_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    suspended: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    suspension_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    suspension_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
