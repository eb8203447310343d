from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from datetime import datetime, timezone
from pathlib import Path
from typing import cast

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.breeding_event import BreedingEventType, RawEvent
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm.cattle import CattleORM
from src.infrastructure.db.orm.event import EventORM
from src.interfaces.http.main import create_app

OWNER_ID = 7
OTHER_OWNER_ID = 8


def utc(year: int, month: int, day: int, hour: int = 0) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


def insemination(cattle_id: int, moment: datetime) -> RawEvent:
    return RawEvent.create(cattle_id, BreedingEventType.INSEMINATION, moment)


def calving(cattle_id: int, moment: datetime) -> RawEvent:
    return RawEvent.create(cattle_id, BreedingEventType.CALVING, moment)


def _reference_events() -> list[RawEvent]:
    """Two animals; over 2024 they give the hand-checked numbers used in tests.

    Animal 1 calves 2024-03-01, is inseminated 2024-03-10 and 2024-11-15 and
    calves again 2024-12-01. Animal 2 calves 2024-06-01 and 2024-12-10.
    """
    return [
        calving(1, utc(2024, 3, 1)),
        insemination(1, utc(2024, 3, 10)),
        insemination(1, utc(2024, 11, 15)),
        calving(1, utc(2024, 12, 1)),
        calving(2, utc(2024, 6, 1)),
        calving(2, utc(2024, 12, 10)),
    ]


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "owner_header": "X-Owner-ID",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client


@pytest.fixture()
async def seeded_events(app, client) -> list[RawEvent]:
    """Store the reference herd for OWNER_ID plus one foreign calving."""
    events = _reference_events()
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add_all(
            [
                CattleORM(cattle_id=1, owner_user_id=OWNER_ID, ear_tag="EC-001"),
                CattleORM(cattle_id=2, owner_user_id=OWNER_ID, ear_tag="EC-002"),
                CattleORM(cattle_id=3, owner_user_id=OTHER_OWNER_ID, ear_tag="EC-900"),
            ]
        )
        await async_session.flush()
        async_session.add_all(
            [
                EventORM(
                    cattle_id=e.cattle_id,
                    event_type=e.event_type.value,
                    event_datetime=e.event_datetime,
                )
                for e in events
            ]
        )
        async_session.add_all(
            [
                EventORM(cattle_id=3, event_type="CALVING", event_datetime=utc(2024, 6, 1)),
                EventORM(cattle_id=1, event_type="VACCINATION", event_datetime=utc(2024, 5, 5)),
            ]
        )
        await async_session.commit()
    return events


@pytest.fixture()
def reference_events() -> list[RawEvent]:
    return _reference_events()
