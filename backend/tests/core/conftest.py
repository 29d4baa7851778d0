"""Core test fixtures: PilotRecord factory, no IO."""

import uuid
from datetime import datetime, timezone

import pytest

from pilot_roster.core.domain_types import Callsign, PilotId
from pilot_roster.core.pilot_record import PilotRecord

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_pilot():
    """Build a PilotRecord; suspended pilots get consistent suspension metadata."""
    def _make(callsign="ASX001", name="Marco", surname="Rossi", suspended=False, **kw):
        if suspended:
            kw.setdefault("suspension_reason", "inactivity")
            kw.setdefault("suspension_date", T0)
        return PilotRecord(
            id=kw.pop("id", PilotId(uuid.uuid4())),
            callsign=Callsign(callsign),
            name=name,
            surname=surname,
            suspended=suspended,
            created_at=kw.pop("created_at", T0),
            updated_at=kw.pop("updated_at", T0),
            **kw,
        )
    return _make
