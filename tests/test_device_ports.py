"""Port numbering and port link rules."""

import pytest

from netequip.core.errors import (
    DevicePortNotFound,
    DuplicateDevicePort,
    InvalidPortConnection,
    PortNotConnected,
)
from netequip.models.device_port import PortStatus, PortType
from netequip.schemas import DevicePortCreate, DevicePortUpdate, EquipmentCreate
from netequip.services import DevicePortService, EquipmentService

# FIXTURES #########################################################################


@pytest.fixture
def ports(db):
    return DevicePortService(db, symmetric_links=False)


@pytest.fixture
def symmetric_ports(db):
    return DevicePortService(db, symmetric_links=True)


async def add_port(service, equipment_id, number, **fields):
    return await service.create(DevicePortCreate(equipment_id=equipment_id, port_number=number, **fields))


# NUMBERING ########################################################################


async def test_duplicate_port_number_on_same_equipment(ports, sw1):
    await add_port(ports, sw1.id, 1)
    with pytest.raises(DuplicateDevicePort):
        await add_port(ports, sw1.id, 1)


async def test_same_port_number_on_other_equipment(ports, sw1, sw2):
    await add_port(ports, sw1.id, 1)
    port = await add_port(ports, sw2.id, 1)
    assert port.equipment_id == sw2.id
    assert port.equipment_name == "SW-2"


async def test_update_keeps_own_number(ports, sw1):
    port = await add_port(ports, sw1.id, 3)
    updated = await ports.update(
        port.id,
        DevicePortUpdate(equipment_id=sw1.id, port_number=3, description="uplink"),
    )
    assert updated.description == "uplink"


async def test_update_to_taken_number(ports, sw1):
    await add_port(ports, sw1.id, 1)
    port = await add_port(ports, sw1.id, 2)
    with pytest.raises(DuplicateDevicePort):
        await ports.update(port.id, DevicePortUpdate(equipment_id=sw1.id, port_number=1))


# CONNECT / DISCONNECT #############################################################


async def test_connect_points_source_at_target(ports, sw1, sw2):
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw2.id, 1)

    result = await ports.connect(a.id, b.id)

    assert result.connected_to_port_id == b.id
    assert result.connected_to_equipment_id == sw2.id
    assert result.connected_to_equipment_name == "SW-2"
    assert result.connected_to_port_number == 1
    # one-directional by default
    assert await ports.is_connected(b.id) is False


async def test_connect_to_itself(ports, sw1):
    a = await add_port(ports, sw1.id, 1)
    with pytest.raises(InvalidPortConnection):
        await ports.connect(a.id, a.id)


async def test_connect_on_same_equipment(ports, sw1):
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw1.id, 2)
    with pytest.raises(InvalidPortConnection):
        await ports.connect(a.id, b.id)


async def test_connect_to_occupied_target(ports, db, sw1, sw2, switch_type):
    sw3 = await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-3"))
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw2.id, 1)
    c = await add_port(ports, sw3.id, 1)
    await ports.connect(b.id, c.id)

    with pytest.raises(InvalidPortConnection):
        await ports.connect(a.id, b.id)


async def test_connect_missing_port(ports, sw1):
    a = await add_port(ports, sw1.id, 1)
    with pytest.raises(DevicePortNotFound):
        await ports.connect(a.id, 999)


async def test_disconnect_is_idempotent(ports, sw1, sw2):
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw2.id, 1)
    await ports.connect(a.id, b.id)

    first = await ports.disconnect(a.id)
    second = await ports.disconnect(a.id)

    assert first.connected_to_port_id is None
    assert first.connected_to_equipment_id is None
    assert second.connected_to_port_id is None


async def test_connected_port_lookup(ports, sw1, sw2):
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw2.id, 1)

    with pytest.raises(PortNotConnected):
        await ports.get_connected_port(a.id)

    await ports.connect(a.id, b.id)
    assert (await ports.get_connected_port(a.id)).id == b.id


async def test_symmetric_connect_and_disconnect(symmetric_ports, sw1, sw2):
    a = await add_port(symmetric_ports, sw1.id, 1)
    b = await add_port(symmetric_ports, sw2.id, 1)

    await symmetric_ports.connect(a.id, b.id)
    assert (await symmetric_ports.get(b.id)).connected_to_port_id == a.id

    await symmetric_ports.disconnect(b.id)
    assert await symmetric_ports.is_connected(a.id) is False
    assert await symmetric_ports.is_connected(b.id) is False


async def test_symmetric_reconnect_releases_old_peer(symmetric_ports, db, sw1, sw2, switch_type):
    sw3 = await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-3"))
    a = await add_port(symmetric_ports, sw1.id, 1)
    b = await add_port(symmetric_ports, sw2.id, 1)
    c = await add_port(symmetric_ports, sw3.id, 1)

    await symmetric_ports.connect(a.id, b.id)
    await symmetric_ports.connect(a.id, c.id)

    assert await symmetric_ports.is_connected(b.id) is False
    assert (await symmetric_ports.get(c.id)).connected_to_port_id == a.id


async def test_second_source_on_same_target_directed(ports, db, sw1, sw2, switch_type):
    sw3 = await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-3"))
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw2.id, 1)
    c = await add_port(ports, sw3.id, 1)

    await ports.connect(a.id, b.id)
    # Open question: with directed links B never records A, so B still
    # looks free and a second source may claim it.
    result = await ports.connect(c.id, b.id)

    assert result.connected_to_port_id == b.id
    assert (await ports.get(a.id)).connected_to_port_id == b.id


async def test_second_source_on_same_target_symmetric(symmetric_ports, db, sw1, sw2, switch_type):
    sw3 = await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-3"))
    a = await add_port(symmetric_ports, sw1.id, 1)
    b = await add_port(symmetric_ports, sw2.id, 1)
    c = await add_port(symmetric_ports, sw3.id, 1)

    await symmetric_ports.connect(a.id, b.id)

    with pytest.raises(InvalidPortConnection):
        await symmetric_ports.connect(c.id, b.id)


# LINKS SET ON CREATE / UPDATE #####################################################


async def test_symmetric_update_clearing_link_releases_peer(symmetric_ports, db, sw1, sw2, switch_type):
    sw3 = await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-3"))
    a = await add_port(symmetric_ports, sw1.id, 1)
    b = await add_port(symmetric_ports, sw2.id, 1)
    x = await add_port(symmetric_ports, sw3.id, 1)
    await symmetric_ports.connect(a.id, b.id)

    await symmetric_ports.update(a.id, DevicePortUpdate(equipment_id=sw1.id, port_number=1))

    assert await symmetric_ports.is_connected(b.id) is False
    assert (await symmetric_ports.connect(x.id, b.id)).connected_to_port_id == b.id


async def test_symmetric_update_keeping_target_keeps_back_link(symmetric_ports, sw1, sw2):
    a = await add_port(symmetric_ports, sw1.id, 1)
    b = await add_port(symmetric_ports, sw2.id, 1)
    await symmetric_ports.connect(a.id, b.id)

    await symmetric_ports.update(
        a.id,
        DevicePortUpdate(
            equipment_id=sw1.id,
            port_number=1,
            description="uplink",
            connected_to_equipment_id=sw2.id,
            connected_to_port_id=b.id,
        ),
    )

    assert (await symmetric_ports.get(b.id)).connected_to_port_id == a.id


async def test_create_with_link_target_on_wrong_equipment(ports, sw1, sw2):
    b = await add_port(ports, sw2.id, 1)
    with pytest.raises(InvalidPortConnection):
        await add_port(ports, sw1.id, 1, connected_to_equipment_id=sw1.id, connected_to_port_id=b.id)


async def test_create_with_link_skips_occupied_check(ports, db, sw1, sw2, switch_type):
    sw3 = await EquipmentService(db).create(EquipmentCreate(type_id=switch_type.id, name="SW-3"))
    b = await add_port(ports, sw2.id, 1)
    c = await add_port(ports, sw3.id, 1)
    await ports.connect(b.id, c.id)

    a = await add_port(ports, sw1.id, 1, connected_to_equipment_id=sw2.id, connected_to_port_id=b.id)
    assert a.connected_to_port_id == b.id


async def test_update_without_targets_clears_link(ports, sw1, sw2):
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw2.id, 1)
    await ports.connect(a.id, b.id)

    updated = await ports.update(a.id, DevicePortUpdate(equipment_id=sw1.id, port_number=1))
    assert updated.connected_to_port_id is None


# LOOKUPS ##########################################################################


async def test_available_and_occupied(ports, sw1, sw2):
    a1 = await add_port(ports, sw1.id, 1)
    a2 = await add_port(ports, sw1.id, 2)
    b = await add_port(ports, sw2.id, 1)
    await ports.connect(a1.id, b.id)

    assert [p.id for p in await ports.available_by_equipment(sw1.id)] == [a2.id]
    assert [p.id for p in await ports.occupied_by_equipment(sw1.id)] == [a1.id]
    assert [p.id for p in await ports.connections_to_equipment(sw2.id)] == [a1.id]


async def test_ports_ordered_by_number(ports, sw1):
    for number in (5, 1, 3):
        await add_port(ports, sw1.id, number)
    assert [p.port_number for p in await ports.by_equipment(sw1.id)] == [1, 3, 5]


async def test_active_counts(ports, sw1):
    await add_port(ports, sw1.id, 1, status=PortStatus.ACTIVE, port_type=PortType.SFP_PLUS)
    port = await add_port(ports, sw1.id, 2, status=PortStatus.ACTIVE)
    await ports.change_status(port.id, PortStatus.DISABLED)

    assert await ports.count_by_equipment(sw1.id) == 2
    assert await ports.count_active_by_equipment(sw1.id) == 1
    sfp = await ports.by_equipment_type_and_status(sw1.id, PortType.SFP_PLUS, PortStatus.ACTIVE)
    assert [p.port_number for p in sfp] == [1]


async def test_delete_port_clears_links_to_it(ports, sw1, sw2):
    a = await add_port(ports, sw1.id, 1)
    b = await add_port(ports, sw2.id, 1)
    await ports.connect(a.id, b.id)

    await ports.delete(b.id)

    assert await ports.is_connected(a.id) is False
    with pytest.raises(DevicePortNotFound):
        await ports.delete(b.id)
