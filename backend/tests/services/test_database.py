"""Database Session Manager: rollback-and-reraise, readiness check.

Tests cover:
    - Exceptions leave a session unchanged in type after rollback
    - Uncommitted work is rolled back
    - health_check reports connectivity
"""

import pytest
from sqlalchemy import func, select

from pilot_roster.core.errors import NotFoundError
from pilot_roster.infrastructure.database import DatabaseSessionManager
from pilot_roster.models.pilot import Pilot


@pytest.fixture
def manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.mark.parametrize("error", [NotFoundError("abc"), RuntimeError("boom")])
async def test_session_reraises_unchanged(manager, error):
    with pytest.raises(type(error)) as exc:
        async with manager.session():
            raise error
    assert exc.value is error


async def test_session_rolls_back_pending_work(manager):
    with pytest.raises(RuntimeError):
        async with manager.session() as db:
            db.add(Pilot(callsign="ASX001", name="Marco", surname="Rossi"))
            await db.flush()
            raise RuntimeError("abort")

    async with manager.session() as db:
        count = (await db.execute(select(func.count()).select_from(Pilot))).scalar_one()
    assert count == 0


async def test_health_check(manager):
    assert await manager.health_check() is True
