"""Maintenance history API endpoints."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from netequip.models.base import get_db
from netequip.models.maintenance import MaintenanceType
from netequip.schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate
from netequip.services.maintenance import MaintenanceService

router = APIRouter()


def get_service(db: AsyncSession = Depends(get_db)) -> MaintenanceService:
    return MaintenanceService(db)


@router.get("", response_model=list[MaintenanceResponse])
async def list_maintenance(service: MaintenanceService = Depends(get_service)):
    """List all maintenance records."""
    return await service.list_all()


@router.get("/overdue", response_model=list[MaintenanceResponse])
async def list_overdue(service: MaintenanceService = Depends(get_service)):
    """Records whose next maintenance date has passed."""
    return await service.overdue()


@router.get("/date-range", response_model=list[MaintenanceResponse])
async def list_by_date_range(
    start: datetime,
    end: datetime,
    service: MaintenanceService = Depends(get_service),
):
    return await service.by_date_range(start, end)


@router.get("/type/{maintenance_type}", response_model=list[MaintenanceResponse])
async def list_by_type(maintenance_type: MaintenanceType, service: MaintenanceService = Depends(get_service)):
    return await service.by_type(maintenance_type)


@router.get("/type/{maintenance_type}/count", response_model=int)
async def count_by_type(maintenance_type: MaintenanceType, service: MaintenanceService = Depends(get_service)):
    return await service.count_by_type(maintenance_type)


@router.get("/employee/{employee_id}", response_model=list[MaintenanceResponse])
async def list_by_performer(employee_id: int, service: MaintenanceService = Depends(get_service)):
    return await service.by_performer(employee_id)


@router.get("/equipment/{equipment_id}", response_model=list[MaintenanceResponse])
async def list_by_equipment(equipment_id: int, service: MaintenanceService = Depends(get_service)):
    """An equipment item's maintenance history, newest first."""
    return await service.by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/latest", response_model=MaintenanceResponse)
async def get_latest(equipment_id: int, service: MaintenanceService = Depends(get_service)):
    return await service.latest_by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/type/{maintenance_type}", response_model=list[MaintenanceResponse])
async def list_by_equipment_and_type(
    equipment_id: int,
    maintenance_type: MaintenanceType,
    service: MaintenanceService = Depends(get_service),
):
    return await service.by_equipment_and_type(equipment_id, maintenance_type)


@router.get("/equipment/{equipment_id}/recent", response_model=list[MaintenanceResponse])
async def list_recent(
    equipment_id: int,
    days: int | None = Query(None, ge=0),
    service: MaintenanceService = Depends(get_service),
):
    """Records from the last N days (default from settings)."""
    return await service.recent(equipment_id, days)


@router.get("/equipment/{equipment_id}/count", response_model=int)
async def count_by_equipment(equipment_id: int, service: MaintenanceService = Depends(get_service)):
    return await service.count_by_equipment(equipment_id)


@router.patch("/equipment/{equipment_id}/schedule-next", response_model=MaintenanceResponse)
async def schedule_next(
    equipment_id: int,
    date: date,
    service: MaintenanceService = Depends(get_service),
):
    """Set the next maintenance date on the equipment's latest record."""
    return await service.schedule_next(equipment_id, date)


@router.get("/{record_id}", response_model=MaintenanceResponse)
async def get_maintenance(record_id: int, service: MaintenanceService = Depends(get_service)):
    """Get a specific maintenance record by ID."""
    return await service.get(record_id)


@router.post("", response_model=MaintenanceResponse, status_code=201)
async def create_maintenance(
    record_data: MaintenanceCreate, service: MaintenanceService = Depends(get_service)
):
    """Record a maintenance event."""
    return await service.create(record_data)


@router.put("/{record_id}", response_model=MaintenanceResponse)
async def update_maintenance(
    record_id: int,
    record_data: MaintenanceUpdate,
    service: MaintenanceService = Depends(get_service),
):
    """Update a maintenance record."""
    return await service.update(record_id, record_data)


@router.delete("/{record_id}", status_code=204)
async def delete_maintenance(record_id: int, service: MaintenanceService = Depends(get_service)):
    await service.delete(record_id)
