"""Shared fixtures: an in-memory SQLite database per test."""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SYMMETRIC_PORT_LINKS"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from netequip.main import app
from netequip.models import Base
from netequip.models.base import get_db
from netequip.schemas import EquipmentCreate, EquipmentTypeCreate
from netequip.services import EquipmentService, EquipmentTypeService

# FIXTURES #########################################################################


@pytest.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def switch_type(db):
    return await EquipmentTypeService(db).create(
        EquipmentTypeCreate(name="Switch24", manufacturer="Acme", model="S-24", default_port_count=24)
    )


@pytest.fixture
async def sw1(db, switch_type):
    return await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-1"))


@pytest.fixture
async def sw2(db, switch_type):
    return await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-2"))
