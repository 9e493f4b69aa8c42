"""Database Session Manager — error mapping, rollback and health checks against SQLite.

Invariants:
    - SQLAlchemy exceptions leave the session as DatabaseError (503)
    - Failed sessions roll back; nothing partial is committed
    - health_check() reports connectivity without raising
"""

from datetime import date

import pytest
from sqlalchemy import select, text

from arosaje.core.errors import DatabaseError
from arosaje.db.base import Base
from arosaje.infrastructure.database import DatabaseSessionManager
from arosaje.models import Guardianship, Plant, User


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with mgr.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield mgr
    await mgr.dispose()


async def test_health_check_reports_reachable_database(manager):
    assert await manager.health_check() is True


async def test_operational_error_maps_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 503
    assert exc_info.value.operation == "execute"


async def test_integrity_error_rolls_back(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add_all([
                User(email="same@example.com", username="first"),
                User(email="same@example.com", username="second"),
            ])
            await db.commit()
    assert exc_info.value.operation == "commit"

    async with manager.session() as db:
        users = (await db.execute(select(User))).scalars().all()
    assert users == []


async def test_care_period_constraint_enforced_by_database(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            owner = User(email="owner@example.com", username="owner")
            guardian = User(email="guardian@example.com", username="guardian")
            plant = Plant(name="Monstera", owner=owner)
            db.add_all([owner, guardian, plant])
            await db.flush()
            db.add(Guardianship(
                plant=plant, guardian_user_id=guardian.id,
                start_date=date(2026, 5, 8), end_date=date(2026, 5, 1),
            ))
            await db.commit()


async def test_domain_errors_pass_through_unchanged(manager):
    with pytest.raises(LookupError):
        async with manager.session():
            raise LookupError("not a database failure")
