"""Equipment defaults, aggregate view, lookups and deletion."""

from datetime import date, timedelta

import pytest

from netequip.core.errors import (
    DuplicateEquipment,
    EquipmentNotFound,
    EquipmentTypeNotFound,
    NotFoundError,
)
from netequip.models.equipment import EquipmentStatus
from netequip.models.maintenance import MaintenanceType
from netequip.schemas import (
    DevicePortCreate,
    EquipmentCreate,
    EquipmentUpdate,
    IpAddressCreate,
    MaintenanceCreate,
)
from netequip.services import (
    DevicePortService,
    EquipmentService,
    IpAddressService,
    MaintenanceService,
)
from netequip.services.equipment import months_before


@pytest.fixture
def equipment(db):
    return EquipmentService(db)


@pytest.mark.parametrize(
    "day, months, expected",
    [
        (date(2024, 3, 31), 1, date(2024, 2, 29)),
        (date(2024, 1, 15), 6, date(2023, 7, 15)),
        (date(2023, 8, 31), 6, date(2023, 2, 28)),
        (date(2024, 5, 10), 0, date(2024, 5, 10)),
    ],
)
def test_months_before(day, months, expected):
    assert months_before(day, months) == expected


async def test_create_applies_defaults(equipment, sw1, switch_type):
    view = await equipment.get(sw1.id)

    assert view.status == EquipmentStatus.ACTIVE
    assert view.date_added == date.today()
    assert view.type_name == "Switch24"
    assert view.manufacturer == "Acme"
    assert (view.ports_count, view.ip_addresses_count, view.maintenance_count) == (0, 0, 0)


async def test_create_round_trip(equipment, switch_type):
    created = await equipment.create(
        EquipmentCreate(
            type_id=switch_type.id,
            name="Core-1",
            serial_number="SN-001",
            mac_address="00:1A:2B:3C:4D:5E",
            ip_address="192.168.1.10",
            address="Rack 4, Room 101",
            technical_params={"firmware": "1.2.3", "poe": True},
        )
    )
    fetched = await equipment.get(created.id)

    assert fetched == created
    assert fetched.technical_params == {"firmware": "1.2.3", "poe": True}


async def test_unknown_type(equipment):
    with pytest.raises(EquipmentTypeNotFound):
        await equipment.create(EquipmentCreate(type_id=999, name="Ghost"))


async def test_duplicate_serial_and_mac(equipment, switch_type):
    await equipment.create(
        EquipmentCreate(type_id=switch_type.id, name="A", serial_number="SN-1", mac_address="00:00:00:00:00:01")
    )
    with pytest.raises(DuplicateEquipment):
        await equipment.create(EquipmentCreate(type_id=switch_type.id, name="B", serial_number="SN-1"))
    with pytest.raises(DuplicateEquipment):
        await equipment.create(
            EquipmentCreate(type_id=switch_type.id, name="C", mac_address="00:00:00:00:00:01")
        )


async def test_update_keeps_status_and_stamps_date(equipment, sw1, switch_type):
    await equipment.change_status(sw1.id, EquipmentStatus.MAINTENANCE)

    updated = await equipment.update(sw1.id, EquipmentUpdate(type_id=switch_type.id, name="SW-1b"))

    assert updated.status == EquipmentStatus.MAINTENANCE
    assert updated.name == "SW-1b"
    assert updated.date_updated == date.today()


async def test_missing_equipment(equipment):
    with pytest.raises(EquipmentNotFound):
        await equipment.get(12345)
    with pytest.raises(EquipmentNotFound):
        await equipment.delete(12345)
    with pytest.raises(NotFoundError):
        await equipment.by_serial_number("nope")


async def test_search_is_case_insensitive(equipment, sw1, sw2):
    assert {e.name for e in await equipment.search_by_name("sw-")} == {"SW-1", "SW-2"}
    assert await equipment.search_by_name("100%") == []


async def test_status_filters(equipment, sw1, sw2, switch_type):
    await equipment.change_status(sw2.id, EquipmentStatus.RETIRED)

    assert [e.name for e in await equipment.by_status(EquipmentStatus.ACTIVE)] == ["SW-1"]
    assert await equipment.count_by_status(EquipmentStatus.RETIRED) == 1
    assert await equipment.count_by_type(switch_type.id) == 2


async def test_needing_maintenance(equipment, switch_type, sw1):
    stale = await equipment.create(EquipmentCreate(type_id=switch_type.id, name="Old"))
    fresh = await equipment.create(EquipmentCreate(type_id=switch_type.id, name="Fresh"))
    await equipment.update(
        stale.id,
        EquipmentUpdate(type_id=switch_type.id, name="Old", date_updated=date.today() - timedelta(days=400)),
    )
    await equipment.change_status(fresh.id, EquipmentStatus.ACTIVE)

    names = {e.name for e in await equipment.needing_maintenance(6)}

    # sw1 was never updated
    assert names == {"Old", "SW-1"}


async def test_added_after(equipment, sw1):
    assert await equipment.added_after(date.today()) == []
    assert len(await equipment.added_after(date.today() - timedelta(days=1))) == 1


async def test_delete_cascades_and_clears_links(db, equipment, sw1, sw2):
    ports = DevicePortService(db, symmetric_links=False)
    own = await ports.create(DevicePortCreate(equipment_id=sw1.id, port_number=1))
    remote = await ports.create(DevicePortCreate(equipment_id=sw2.id, port_number=1))
    await ports.connect(remote.id, own.id)
    await IpAddressService(db).create(IpAddressCreate(equipment_id=sw1.id, ip_address="10.1.1.1"))
    await MaintenanceService(db).create(MaintenanceCreate(equipment_id=sw1.id, type=MaintenanceType.ROUTINE))

    assert (await equipment.get(sw1.id)).maintenance_count == 1

    await equipment.delete(sw1.id)

    assert await ports.is_connected(remote.id) is False
    assert await IpAddressService(db).exists_by_ip("10.1.1.1") is False
    with pytest.raises(EquipmentNotFound):
        await equipment.get(sw1.id)
