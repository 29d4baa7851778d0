"""Service test fixtures: async DB, roster store, handlers, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database (schema from the ORM)
    - get_db and get_dispatcher dependencies overridden for route tests
    - db_manager patched so the readiness probe hits the test engine
    - Notifications go to an in-memory RecordingNotifier, never to Discord

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the partial unique index
      on active callsigns is declared for SQLite too, so races are exercised
    - Ticking clock: every handler call sees a strictly later `now`
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import pilot_roster.infrastructure.database as db_module
import pilot_roster.models  # noqa: F401  (registers tables on Base.metadata)
from pilot_roster.db.base import Base
from pilot_roster.infrastructure.database import DatabaseSessionManager, get_db
from pilot_roster.infrastructure.roster_store import SqlRosterStore
from pilot_roster.main import app
from pilot_roster.services.handle_lifecycle import LifecycleHandlers
from pilot_roster.services.notification_dispatch import (
    NotificationDispatcher, get_dispatcher,
)

from tests.services.fakes import RecordingNotifier, TickingClock


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store(test_db):
    return SqlRosterStore(test_db)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def dispatcher(notifier):
    return NotificationDispatcher(notifier)


@pytest.fixture
def handlers(store, dispatcher):
    return LifecycleHandlers(store, dispatcher, clock=TickingClock())


@pytest.fixture
def new_pilot():
    """Valid creation payload factory."""
    def _payload(callsign="ASX001", name="Marco", surname="Rossi", **kw):
        return {"callsign": callsign, "name": name, "surname": surname, **kw}
    return _payload


@pytest.fixture
async def client(test_engine, test_session_factory, dispatcher):
    """FastAPI test client with DB and dispatcher dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher

    # Readiness probe reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
