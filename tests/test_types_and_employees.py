"""Equipment type and employee services."""

import pytest

from netequip.core.errors import (
    DuplicateEmployeeEmail,
    DuplicateEquipmentType,
    EmployeeNotFound,
    EquipmentTypeInUse,
    EquipmentTypeNotFound,
    NotFoundError,
)
from netequip.models.maintenance import MaintenanceType
from netequip.schemas import EmployeeCreate, EquipmentCreate, EquipmentTypeCreate, MaintenanceCreate
from netequip.services import EmployeeService, EquipmentService, EquipmentTypeService, MaintenanceService


@pytest.fixture
def types(db):
    return EquipmentTypeService(db)


@pytest.fixture
def employees(db):
    return EmployeeService(db)


async def test_duplicate_type_name(types, switch_type):
    with pytest.raises(DuplicateEquipmentType):
        await types.create(EquipmentTypeCreate(name="Switch24"))


async def test_type_in_use_cannot_be_deleted(types, switch_type, sw1):
    with pytest.raises(EquipmentTypeInUse):
        await types.delete(switch_type.id)


async def test_unused_type_is_deleted(types):
    router = await types.create(EquipmentTypeCreate(name="Router"))
    await types.delete(router.id)
    with pytest.raises(EquipmentTypeNotFound):
        await types.get(router.id)
    with pytest.raises(EquipmentTypeNotFound):
        await types.delete(router.id)


async def test_type_lookups(types, switch_type):
    await types.create(EquipmentTypeCreate(name="Switch48", manufacturer="Acme", model="S-48"))
    await types.create(EquipmentTypeCreate(name="Edge", manufacturer="Acme", model="E-1"))

    assert [t.model for t in await types.by_manufacturer_sorted("Acme")] == ["E-1", "S-24", "S-48"]
    assert (await types.by_manufacturer_and_model("Acme", "S-48")).name == "Switch48"
    assert await types.exists_by_name("Edge") is True
    with pytest.raises(NotFoundError):
        await types.by_name("Firewall")


async def test_duplicate_employee_email(employees):
    await employees.create(EmployeeCreate(full_name="Ana Petrova", email="ana@example.com"))
    with pytest.raises(DuplicateEmployeeEmail):
        await employees.create(EmployeeCreate(full_name="Another Ana", email="ana@example.com"))


async def test_employees_without_email(employees):
    await employees.create(EmployeeCreate(full_name="No Mail"))
    await employees.create(EmployeeCreate(full_name="Also No Mail"))
    assert await employees.count() == 2


async def test_employee_search_and_position(employees):
    await employees.create(EmployeeCreate(full_name="Zoe Tech", position="Engineer"))
    await employees.create(EmployeeCreate(full_name="Adam Tech", position="Engineer"))
    await employees.create(EmployeeCreate(full_name="Boss", position="Manager"))

    assert [e.full_name for e in await employees.by_position_sorted("Engineer")] == ["Adam Tech", "Zoe Tech"]
    assert len(await employees.search_by_name("TECH")) == 2


async def test_delete_employee_detaches_references(db, employees, switch_type):
    tech = await employees.create(EmployeeCreate(full_name="Field Tech"))
    item = await EquipmentService(db).create(
        EquipmentCreate(type_id=switch_type.id, name="AP-1", employee_id=tech.id)
    )
    record = await MaintenanceService(db).create(
        MaintenanceCreate(equipment_id=item.id, type=MaintenanceType.REPAIR, performed_by_id=tech.id)
    )
    assert (await EquipmentService(db).get(item.id)).employee_full_name == "Field Tech"

    await employees.delete(tech.id)

    assert (await EquipmentService(db).get(item.id)).employee_id is None
    assert (await MaintenanceService(db).get(record.id)).performed_by_id is None
    with pytest.raises(EmployeeNotFound):
        await employees.delete(tech.id)
