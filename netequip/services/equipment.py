"""Equipment operations and aggregate view assembly."""

import calendar
import logging
from datetime import date

from sqlalchemy import or_, select, update

from netequip.config import get_settings
from netequip.core.errors import (
    DuplicateEquipment,
    EmployeeNotFound,
    EquipmentNotFound,
    EquipmentTypeNotFound,
    NotFoundError,
)
from netequip.models.device_port import DevicePort
from netequip.models.employee import Employee
from netequip.models.equipment import Equipment, EquipmentStatus
from netequip.models.equipment_type import EquipmentType
from netequip.models.ip_address import IpAddress
from netequip.models.maintenance import MaintenanceHistory
from netequip.schemas.equipment import (
    EquipmentCreate,
    EquipmentResponse,
    EquipmentSummary,
    EquipmentUpdate,
)
from netequip.services.base import BaseService

logger = logging.getLogger(__name__)


def months_before(day: date, months: int) -> date:
    """Return the same day ``months`` months earlier, clamped to the month's end."""
    month_index = day.year * 12 + day.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


class EquipmentService(BaseService):
    """CRUD, lookups and status changes for equipment."""

    # Response assembly

    async def to_response(self, equipment: Equipment) -> EquipmentResponse:
        """Build the full view: related names plus port, IP and maintenance counts."""
        equipment_type = await self.db.get(EquipmentType, equipment.type_id)
        employee = (
            await self.db.get(Employee, equipment.employee_id)
            if equipment.employee_id is not None
            else None
        )
        return EquipmentResponse(
            id=equipment.id,
            type_id=equipment.type_id,
            type_name=equipment_type.name if equipment_type else None,
            manufacturer=equipment_type.manufacturer if equipment_type else None,
            model=equipment_type.model if equipment_type else None,
            employee_id=equipment.employee_id,
            employee_full_name=employee.full_name if employee else None,
            name=equipment.name,
            serial_number=equipment.serial_number,
            mac_address=equipment.mac_address,
            ip_address=equipment.ip_address,
            address=equipment.address,
            status=equipment.status,
            date_added=equipment.date_added,
            date_updated=equipment.date_updated,
            technical_params=equipment.technical_params,
            ports_count=await self._count(DevicePort, DevicePort.equipment_id == equipment.id),
            ip_addresses_count=await self._count(IpAddress, IpAddress.equipment_id == equipment.id),
            maintenance_count=await self._count(
                MaintenanceHistory, MaintenanceHistory.equipment_id == equipment.id
            ),
        )

    async def to_summary(self, equipment: Equipment) -> EquipmentSummary:
        equipment_type = await self.db.get(EquipmentType, equipment.type_id)
        return EquipmentSummary(
            id=equipment.id,
            name=equipment.name,
            type_name=equipment_type.name if equipment_type else None,
            manufacturer=equipment_type.manufacturer if equipment_type else None,
            model=equipment_type.model if equipment_type else None,
            serial_number=equipment.serial_number,
            ip_address=equipment.ip_address,
            address=equipment.address,
            status=equipment.status,
            date_added=equipment.date_added,
            ports_count=await self._count(DevicePort, DevicePort.equipment_id == equipment.id),
        )

    async def _summaries(self, query) -> list[EquipmentSummary]:
        return [await self.to_summary(e) for e in await self._all(query)]

    # CRUD

    async def create(self, data: EquipmentCreate) -> EquipmentResponse:
        await self._require(EquipmentType, data.type_id, EquipmentTypeNotFound)
        await self._validate_unique_fields(None, data.serial_number, data.mac_address)
        if data.employee_id is not None:
            await self._require(Employee, data.employee_id, EmployeeNotFound)

        equipment = Equipment(**data.model_dump())
        if equipment.date_added is None:
            equipment.date_added = date.today()
        if equipment.status is None:
            equipment.status = EquipmentStatus.ACTIVE

        await self._save(equipment)
        logger.info(f"Created equipment {equipment.id} ({equipment.name})")
        return await self.to_response(equipment)

    async def get(self, equipment_id: int) -> EquipmentResponse:
        equipment = await self._require(Equipment, equipment_id, EquipmentNotFound)
        return await self.to_response(equipment)

    async def list_all(self) -> list[EquipmentSummary]:
        return await self._summaries(select(Equipment).order_by(Equipment.id))

    async def update(self, equipment_id: int, data: EquipmentUpdate) -> EquipmentResponse:
        equipment = await self._require(Equipment, equipment_id, EquipmentNotFound)
        await self._require(EquipmentType, data.type_id, EquipmentTypeNotFound)
        await self._validate_unique_fields(equipment_id, data.serial_number, data.mac_address)
        if data.employee_id is not None:
            await self._require(Employee, data.employee_id, EmployeeNotFound)

        update_data = data.model_dump()
        if update_data["status"] is None:
            del update_data["status"]
        if update_data["date_updated"] is None:
            update_data["date_updated"] = date.today()

        for field, value in update_data.items():
            setattr(equipment, field, value)

        await self._save(equipment)
        return await self.to_response(equipment)

    async def delete(self, equipment_id: int) -> None:
        """Delete equipment together with its ports, IP addresses and maintenance records.

        Ports on other equipment that point at this equipment or at one of its
        ports are disconnected first.
        """
        equipment = await self._require(Equipment, equipment_id, EquipmentNotFound)

        own_port_ids = list(
            (await self.db.execute(
                select(DevicePort.id).where(DevicePort.equipment_id == equipment_id)
            )).scalars().all()
        )
        await self.db.execute(
            update(DevicePort)
            .where(
                or_(
                    DevicePort.connected_to_equipment_id == equipment_id,
                    DevicePort.connected_to_port_id.in_(own_port_ids),
                )
            )
            .values(connected_to_equipment_id=None, connected_to_port_id=None)
        )
        await self.db.delete(equipment)
        await self.db.commit()
        logger.info(f"Deleted equipment {equipment_id} and {len(own_port_ids)} port(s)")

    async def change_status(self, equipment_id: int, status: EquipmentStatus) -> EquipmentResponse:
        equipment = await self._require(Equipment, equipment_id, EquipmentNotFound)
        logger.info(f"Equipment {equipment_id} status {equipment.status.value} -> {status.value}")
        equipment.status = status
        equipment.date_updated = date.today()
        await self._save(equipment)
        return await self.to_response(equipment)

    # Exact-match lookups

    async def _get_one_by(self, criterion, description: str) -> EquipmentResponse:
        equipment = await self._first(select(Equipment).where(criterion))
        if equipment is None:
            raise NotFoundError(f"Equipment with {description} not found")
        return await self.to_response(equipment)

    async def by_serial_number(self, serial_number: str) -> EquipmentResponse:
        return await self._get_one_by(
            Equipment.serial_number == serial_number, f"serial number '{serial_number}'"
        )

    async def by_mac_address(self, mac_address: str) -> EquipmentResponse:
        return await self._get_one_by(
            Equipment.mac_address == mac_address, f"MAC address '{mac_address}'"
        )

    async def by_ip_address(self, ip_address: str) -> EquipmentResponse:
        return await self._get_one_by(
            Equipment.ip_address == ip_address, f"IP address '{ip_address}'"
        )

    # Filters

    async def by_type(self, type_id: int) -> list[EquipmentSummary]:
        await self._require(EquipmentType, type_id, EquipmentTypeNotFound)
        return await self._summaries(select(Equipment).where(Equipment.type_id == type_id))

    async def by_employee(self, employee_id: int) -> list[EquipmentSummary]:
        await self._require(Employee, employee_id, EmployeeNotFound)
        return await self._summaries(select(Equipment).where(Equipment.employee_id == employee_id))

    async def by_status(self, status: EquipmentStatus) -> list[EquipmentSummary]:
        query = select(Equipment).where(Equipment.status == status).order_by(Equipment.name.asc())
        return await self._summaries(query)

    async def by_type_and_status(self, type_id: int, status: EquipmentStatus) -> list[EquipmentSummary]:
        await self._require(EquipmentType, type_id, EquipmentTypeNotFound)
        query = select(Equipment).where(Equipment.type_id == type_id, Equipment.status == status)
        return await self._summaries(query)

    async def search_by_name(self, name: str) -> list[EquipmentSummary]:
        query = select(Equipment).where(Equipment.name.icontains(name, autoescape=True))
        return await self._summaries(query)

    async def search_by_address(self, address: str) -> list[EquipmentSummary]:
        query = select(Equipment).where(Equipment.address.icontains(address, autoescape=True))
        return await self._summaries(query)

    async def added_after(self, day: date) -> list[EquipmentSummary]:
        return await self._summaries(select(Equipment).where(Equipment.date_added > day))

    async def needing_maintenance(self, months: int | None = None) -> list[EquipmentSummary]:
        """Equipment not updated within ``months`` months (or never updated)."""
        if months is None:
            months = get_settings().maintenance_staleness_months
        threshold = months_before(date.today(), months)
        query = select(Equipment).where(
            or_(Equipment.date_updated < threshold, Equipment.date_updated.is_(None))
        )
        items = await self._summaries(query)
        logger.info(f"{len(items)} equipment item(s) not updated since {threshold}")
        return items

    # Counts

    async def count_by_type(self, type_id: int) -> int:
        await self._require(EquipmentType, type_id, EquipmentTypeNotFound)
        return await self._count(Equipment, Equipment.type_id == type_id)

    async def count_by_status(self, status: EquipmentStatus) -> int:
        return await self._count(Equipment, Equipment.status == status)

    async def _validate_unique_fields(
        self, exclude_id: int | None, serial_number: str | None, mac_address: str | None
    ) -> None:
        checks = (
            ("serial number", Equipment.serial_number, serial_number),
            ("MAC address", Equipment.mac_address, mac_address),
        )
        for label, column, value in checks:
            if not value or not value.strip():
                continue
            existing = await self._first(select(Equipment).where(column == value))
            if existing is not None and existing.id != exclude_id:
                logger.warning(f"Equipment {label} already in use: {value}")
                raise DuplicateEquipment(label, value)
