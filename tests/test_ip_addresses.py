"""Global IP uniqueness and the one-primary-per-equipment rule."""

from datetime import date

import pytest

from netequip.core.errors import (
    DuplicateIpAddress,
    EquipmentNotFound,
    NotFoundError,
    PrimaryIpConflict,
)
from netequip.schemas import IpAddressCreate, IpAddressUpdate
from netequip.services import IpAddressService


@pytest.fixture
def ips(db):
    return IpAddressService(db)


async def add_ip(service, equipment_id, ip, **fields):
    return await service.create(IpAddressCreate(equipment_id=equipment_id, ip_address=ip, **fields))


async def test_assigned_date_defaults_to_today(ips, sw1):
    ip = await add_ip(ips, sw1.id, "10.0.0.1", subnet_mask="255.255.255.0")
    assert ip.assigned_date == date.today()
    assert ip.is_primary is False
    assert ip.equipment_name == "SW-1"


async def test_same_ip_on_other_equipment_is_duplicate(ips, sw1, sw2):
    await add_ip(ips, sw1.id, "10.0.0.1")
    with pytest.raises(DuplicateIpAddress):
        await add_ip(ips, sw2.id, "10.0.0.1")


async def test_unknown_equipment(ips):
    with pytest.raises(EquipmentNotFound):
        await add_ip(ips, 404, "10.0.0.1")


async def test_second_primary_is_rejected(ips, sw1):
    await add_ip(ips, sw1.id, "10.0.0.1", is_primary=True)
    with pytest.raises(PrimaryIpConflict):
        await add_ip(ips, sw1.id, "10.0.0.2", is_primary=True)


async def test_primaries_on_different_equipment(ips, sw1, sw2):
    await add_ip(ips, sw1.id, "10.0.0.1", is_primary=True)
    ip = await add_ip(ips, sw2.id, "10.0.0.2", is_primary=True)
    assert ip.is_primary is True


async def test_set_primary_requires_unset_first(ips, sw1):
    ip1 = await add_ip(ips, sw1.id, "10.0.0.1", is_primary=True)
    ip2 = await add_ip(ips, sw1.id, "10.0.0.2")

    with pytest.raises(PrimaryIpConflict):
        await ips.set_primary(ip2.id)

    await ips.unset_primary(ip1.id)
    promoted = await ips.set_primary(ip2.id)

    assert promoted.is_primary is True
    assert (await ips.primary_by_equipment(sw1.id)).id == ip2.id


async def test_set_primary_on_current_primary(ips, sw1):
    ip = await add_ip(ips, sw1.id, "10.0.0.1", is_primary=True)
    assert (await ips.set_primary(ip.id)).is_primary is True


async def test_update_current_primary_in_place(ips, sw1):
    ip = await add_ip(ips, sw1.id, "10.0.0.1", is_primary=True)
    updated = await ips.update(
        ip.id,
        IpAddressUpdate(equipment_id=sw1.id, ip_address="10.0.0.1", is_primary=True, gateway="10.0.0.254"),
    )
    assert updated.gateway == "10.0.0.254"


async def test_update_moving_primary_to_equipment_with_primary(ips, sw1, sw2):
    await add_ip(ips, sw1.id, "10.0.0.1", is_primary=True)
    ip = await add_ip(ips, sw2.id, "10.0.0.2", is_primary=True)
    with pytest.raises(PrimaryIpConflict):
        await ips.update(
            ip.id, IpAddressUpdate(equipment_id=sw1.id, ip_address="10.0.0.2", is_primary=True)
        )


async def test_update_to_taken_ip(ips, sw1):
    await add_ip(ips, sw1.id, "10.0.0.1")
    ip = await add_ip(ips, sw1.id, "10.0.0.2")
    with pytest.raises(DuplicateIpAddress):
        await ips.update(ip.id, IpAddressUpdate(equipment_id=sw1.id, ip_address="10.0.0.1"))


async def test_primary_lookup_without_primary(ips, sw1):
    await add_ip(ips, sw1.id, "10.0.0.1")
    with pytest.raises(NotFoundError):
        await ips.primary_by_equipment(sw1.id)


async def test_lookups(ips, sw1):
    await add_ip(ips, sw1.id, "10.0.0.1", network_type="MGMT", subnet_mask="255.255.255.0")
    await add_ip(ips, sw1.id, "10.0.1.1", network_type="DATA", subnet_mask="255.255.0.0")

    assert (await ips.by_ip("10.0.1.1")).network_type == "DATA"
    assert await ips.exists_by_ip("10.0.0.1") is True
    assert await ips.exists_by_ip("10.9.9.9") is False
    assert len(await ips.by_equipment_and_network_type(sw1.id, "MGMT")) == 1
    assert len(await ips.by_subnet_mask("255.255.0.0")) == 1
    assert await ips.count_by_equipment(sw1.id) == 2
