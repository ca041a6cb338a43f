"""Test fixtures for the field schedule service."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator
from datetime import time

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from field_service.core.config import get_settings
from field_service.db.base import Base
from field_service.db.session import dispose_engine, get_sessionmaker
from field_service.main import app
from field_service.models import Field, TimeSlot


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def catalog(reset_database: None, db_url: str) -> dict[str, object]:
    """Seed one field and three hourly time slots."""
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        field = Field(code="FLD-01", name="Lapangan Futsal A", price_per_hour=150000)
        session.add(field)
        slots = [
            TimeSlot(start_time=time(hour, 0), end_time=time(hour + 1, 0))
            for hour in (8, 9, 10)
        ]
        session.add_all(slots)
        await session.commit()

        return {
            "field_uuid": field.uuid,
            "field_id": field.id,
            "time_uuids": [slot.uuid for slot in slots],
            "time_ids": [slot.id for slot in slots],
        }


@pytest_asyncio.fixture()
async def client(reset_database: None) -> AsyncIterator[AsyncClient]:
    """Yield an async client bound to the application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
