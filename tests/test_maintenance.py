"""Maintenance history and scheduling."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from netequip.core.errors import EquipmentNotFound, MaintenanceHistoryNotFound, NotFoundError
from netequip.models.maintenance import MaintenanceType
from netequip.schemas import MaintenanceCreate
from netequip.services import MaintenanceService


@pytest.fixture
def maintenance(db):
    return MaintenanceService(db)


async def record(service, equipment_id, kind=MaintenanceType.ROUTINE, **fields):
    return await service.create(MaintenanceCreate(equipment_id=equipment_id, type=kind, **fields))


async def test_date_defaults_to_now(maintenance, sw1):
    before = datetime.now()
    created = await record(maintenance, sw1.id, cost=Decimal("120.50"))

    assert created.date >= before
    assert created.cost == Decimal("120.50")
    assert created.equipment_name == "SW-1"


def test_next_date_must_be_in_future():
    with pytest.raises(ValidationError):
        MaintenanceCreate(equipment_id=1, type=MaintenanceType.ROUTINE, next_maintenance_date=date.today())


def test_cost_precision():
    with pytest.raises(ValidationError):
        MaintenanceCreate(equipment_id=1, type=MaintenanceType.REPAIR, cost=Decimal("1.234"))


async def test_unknown_equipment(maintenance):
    with pytest.raises(EquipmentNotFound):
        await record(maintenance, 77)


async def test_history_is_newest_first(maintenance, sw1):
    now = datetime.now()
    await record(maintenance, sw1.id, date=now - timedelta(days=10))
    newest = await record(maintenance, sw1.id, MaintenanceType.UPGRADE, date=now - timedelta(days=1))
    await record(maintenance, sw1.id, date=now - timedelta(days=60))

    history = await maintenance.by_equipment(sw1.id)

    assert history[0].id == newest.id
    assert (await maintenance.latest_by_equipment(sw1.id)).id == newest.id
    assert len(await maintenance.recent(sw1.id, 30)) == 2
    assert await maintenance.count_by_type(MaintenanceType.ROUTINE) == 2


async def test_latest_without_records(maintenance, sw1):
    with pytest.raises(NotFoundError):
        await maintenance.latest_by_equipment(sw1.id)
    with pytest.raises(NotFoundError):
        await maintenance.schedule_next(sw1.id, date.today() + timedelta(days=90))


async def test_schedule_next_and_overdue(maintenance, sw1, sw2):
    await record(maintenance, sw1.id)
    await record(maintenance, sw2.id)

    due = date.today() + timedelta(days=90)
    scheduled = await maintenance.schedule_next(sw1.id, due)
    await maintenance.schedule_next(sw2.id, date.today() - timedelta(days=3))

    assert scheduled.next_maintenance_date == due
    assert [r.equipment_id for r in await maintenance.overdue()] == [sw2.id]


async def test_date_range(maintenance, sw1):
    now = datetime.now()
    inside = await record(maintenance, sw1.id, date=now - timedelta(days=5))
    await record(maintenance, sw1.id, date=now - timedelta(days=50))

    found = await maintenance.by_date_range(now - timedelta(days=7), now)

    assert [r.id for r in found] == [inside.id]


async def test_delete_missing_record(maintenance):
    with pytest.raises(MaintenanceHistoryNotFound):
        await maintenance.delete(1)
