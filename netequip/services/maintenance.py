"""Maintenance history operations."""

import logging
from datetime import date, datetime, timedelta

from sqlalchemy import select

from netequip.config import get_settings
from netequip.core.errors import (
    EmployeeNotFound,
    EquipmentNotFound,
    MaintenanceHistoryNotFound,
    NotFoundError,
)
from netequip.models.employee import Employee
from netequip.models.equipment import Equipment
from netequip.models.maintenance import MaintenanceHistory, MaintenanceType
from netequip.schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate
from netequip.services.base import BaseService

logger = logging.getLogger(__name__)


class MaintenanceService(BaseService):
    """CRUD, lookups and scheduling for maintenance records."""

    async def to_response(self, record: MaintenanceHistory) -> MaintenanceResponse:
        equipment = await self.db.get(Equipment, record.equipment_id)
        performer = (
            await self.db.get(Employee, record.performed_by_id)
            if record.performed_by_id is not None
            else None
        )
        return MaintenanceResponse(
            id=record.id,
            equipment_id=record.equipment_id,
            equipment_name=equipment.name if equipment else None,
            date=record.date,
            type=record.type,
            description=record.description,
            performed_by_id=record.performed_by_id,
            performed_by_name=performer.full_name if performer else None,
            cost=record.cost,
            next_maintenance_date=record.next_maintenance_date,
        )

    async def _responses(self, query) -> list[MaintenanceResponse]:
        return [await self.to_response(r) for r in await self._all(query)]

    async def _latest(self, equipment_id: int) -> MaintenanceHistory:
        record = await self._first(
            select(MaintenanceHistory)
            .where(MaintenanceHistory.equipment_id == equipment_id)
            .order_by(MaintenanceHistory.date.desc(), MaintenanceHistory.id.desc())
        )
        if record is None:
            raise NotFoundError(f"Equipment {equipment_id} has no maintenance records")
        return record

    # CRUD

    async def create(self, data: MaintenanceCreate) -> MaintenanceResponse:
        await self._require(Equipment, data.equipment_id, EquipmentNotFound)
        if data.performed_by_id is not None:
            await self._require(Employee, data.performed_by_id, EmployeeNotFound)

        record = MaintenanceHistory(**data.model_dump())
        if record.date is None:
            record.date = datetime.now()

        await self._save(record)
        logger.info(
            f"Recorded {record.type.value} maintenance {record.id} for equipment {record.equipment_id}"
        )
        return await self.to_response(record)

    async def get(self, record_id: int) -> MaintenanceResponse:
        record = await self._require(MaintenanceHistory, record_id, MaintenanceHistoryNotFound)
        return await self.to_response(record)

    async def list_all(self) -> list[MaintenanceResponse]:
        return await self._responses(select(MaintenanceHistory).order_by(MaintenanceHistory.id))

    async def update(self, record_id: int, data: MaintenanceUpdate) -> MaintenanceResponse:
        record = await self._require(MaintenanceHistory, record_id, MaintenanceHistoryNotFound)
        await self._require(Equipment, data.equipment_id, EquipmentNotFound)
        if data.performed_by_id is not None:
            await self._require(Employee, data.performed_by_id, EmployeeNotFound)

        for field, value in data.model_dump().items():
            setattr(record, field, value)

        await self._save(record)
        return await self.to_response(record)

    async def delete(self, record_id: int) -> None:
        record = await self._require(MaintenanceHistory, record_id, MaintenanceHistoryNotFound)
        await self.db.delete(record)
        await self.db.commit()
        logger.info(f"Deleted maintenance record {record_id}")

    # Lookups

    async def by_equipment(self, equipment_id: int) -> list[MaintenanceResponse]:
        """All records of an equipment item, newest first."""
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = (
            select(MaintenanceHistory)
            .where(MaintenanceHistory.equipment_id == equipment_id)
            .order_by(MaintenanceHistory.date.desc())
        )
        return await self._responses(query)

    async def by_equipment_and_type(
        self, equipment_id: int, maintenance_type: MaintenanceType
    ) -> list[MaintenanceResponse]:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = select(MaintenanceHistory).where(
            MaintenanceHistory.equipment_id == equipment_id,
            MaintenanceHistory.type == maintenance_type,
        )
        return await self._responses(query)

    async def by_performer(self, employee_id: int) -> list[MaintenanceResponse]:
        await self._require(Employee, employee_id, EmployeeNotFound)
        query = select(MaintenanceHistory).where(MaintenanceHistory.performed_by_id == employee_id)
        return await self._responses(query)

    async def by_date_range(self, start: datetime, end: datetime) -> list[MaintenanceResponse]:
        query = (
            select(MaintenanceHistory)
            .where(MaintenanceHistory.date.between(start, end))
            .order_by(MaintenanceHistory.date.asc())
        )
        return await self._responses(query)

    async def by_type(self, maintenance_type: MaintenanceType) -> list[MaintenanceResponse]:
        query = select(MaintenanceHistory).where(MaintenanceHistory.type == maintenance_type)
        return await self._responses(query)

    async def latest_by_equipment(self, equipment_id: int) -> MaintenanceResponse:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        return await self.to_response(await self._latest(equipment_id))

    async def overdue(self) -> list[MaintenanceResponse]:
        """Records whose next maintenance date has passed, earliest first."""
        query = (
            select(MaintenanceHistory)
            .where(MaintenanceHistory.next_maintenance_date < date.today())
            .order_by(MaintenanceHistory.next_maintenance_date.asc())
        )
        return await self._responses(query)

    async def recent(self, equipment_id: int, days: int | None = None) -> list[MaintenanceResponse]:
        if days is None:
            days = get_settings().recent_maintenance_days
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        since = datetime.now() - timedelta(days=days)
        query = (
            select(MaintenanceHistory)
            .where(
                MaintenanceHistory.equipment_id == equipment_id,
                MaintenanceHistory.date >= since,
            )
            .order_by(MaintenanceHistory.date.desc())
        )
        return await self._responses(query)

    async def schedule_next(self, equipment_id: int, next_date: date) -> MaintenanceResponse:
        """Set the next maintenance date on the equipment's latest record."""
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        record = await self._latest(equipment_id)
        record.next_maintenance_date = next_date
        await self._save(record)
        logger.info(f"Next maintenance for equipment {equipment_id} scheduled on {next_date}")
        return await self.to_response(record)

    # Counts

    async def count_by_equipment(self, equipment_id: int) -> int:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        return await self._count(MaintenanceHistory, MaintenanceHistory.equipment_id == equipment_id)

    async def count_by_type(self, maintenance_type: MaintenanceType) -> int:
        return await self._count(MaintenanceHistory, MaintenanceHistory.type == maintenance_type)
