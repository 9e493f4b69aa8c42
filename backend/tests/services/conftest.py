"""Service and route fixtures — async DB, FastAPI test client, seeded guardianships.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so readiness probes see the test engine

Seed layout:
    users:   alice, bob, carol, dave (dave has no plants and guards nothing)
    plants:  fern (alice), cactus (bob)
    guardianships:
        fern_by_bob     fern   guarded by bob    2026-07-01..2026-07-15
        cactus_by_carol cactus guarded by carol  2026-08-01..2026-08-10
        fern_by_carol   fern   guarded by carol  2026-09-01..2026-09-05
"""

from datetime import date
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import arosaje.infrastructure.database as db_module
from arosaje.db.base import Base
from arosaje.infrastructure.database import get_db, DatabaseSessionManager
from arosaje.main import app
from arosaje.models import Guardianship, Plant, User


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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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


@pytest.fixture
async def seed(test_db):
    """Insert users, plants and guardianships; return their ids."""
    alice = User(email="alice@example.com", username="alice")
    bob = User(email="bob@example.com", username="bob")
    carol = User(email="carol@example.com", username="carol")
    dave = User(email="dave@example.com", username="dave")
    test_db.add_all([alice, bob, carol, dave])
    await test_db.flush()

    fern = Plant(name="Fern", owner_user_id=alice.id)
    cactus = Plant(name="Cactus", owner_user_id=bob.id)
    test_db.add_all([fern, cactus])
    await test_db.flush()

    fern_by_bob = Guardianship(
        plant=fern, guardian_user_id=bob.id,
        start_date=date(2026, 7, 1), end_date=date(2026, 7, 15),
    )
    cactus_by_carol = Guardianship(
        plant=cactus, guardian_user_id=carol.id,
        start_date=date(2026, 8, 1), end_date=date(2026, 8, 10),
    )
    fern_by_carol = Guardianship(
        plant=fern, guardian_user_id=carol.id,
        start_date=date(2026, 9, 1), end_date=date(2026, 9, 5),
    )
    test_db.add_all([fern_by_bob, cactus_by_carol, fern_by_carol])
    await test_db.commit()

    return SimpleNamespace(
        alice=alice.id, bob=bob.id, carol=carol.id, dave=dave.id,
        fern=fern.id, cactus=cactus.id,
        fern_by_bob=fern_by_bob.id,
        cactus_by_carol=cactus_by_carol.id,
        fern_by_carol=fern_by_carol.id,
    )
