"""Equipment API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from netequip.models.base import get_db
from netequip.models.equipment import EquipmentStatus
from netequip.schemas.equipment import (
    EquipmentCreate,
    EquipmentResponse,
    EquipmentSummary,
    EquipmentUpdate,
)
from netequip.services.equipment import EquipmentService

router = APIRouter()


def get_service(db: AsyncSession = Depends(get_db)) -> EquipmentService:
    return EquipmentService(db)


@router.get("", response_model=list[EquipmentSummary])
async def list_equipment(service: EquipmentService = Depends(get_service)):
    """List all equipment (summary view)."""
    return await service.list_all()


@router.get("/added-after", response_model=list[EquipmentSummary])
async def list_added_after(
    date: date = Query(..., description="ISO date; returns items added strictly after it"),
    service: EquipmentService = Depends(get_service),
):
    return await service.added_after(date)


@router.get("/needs-maintenance", response_model=list[EquipmentSummary])
async def list_needing_maintenance(
    months: int | None = Query(None, ge=0, description="Staleness threshold in months"),
    service: EquipmentService = Depends(get_service),
):
    """List equipment not updated within the staleness threshold (default from settings)."""
    return await service.needing_maintenance(months)


@router.get("/serial/{serial_number}", response_model=EquipmentResponse)
async def get_by_serial_number(serial_number: str, service: EquipmentService = Depends(get_service)):
    return await service.by_serial_number(serial_number)


@router.get("/mac/{mac_address}", response_model=EquipmentResponse)
async def get_by_mac_address(mac_address: str, service: EquipmentService = Depends(get_service)):
    return await service.by_mac_address(mac_address)


@router.get("/ip/{ip_address}", response_model=EquipmentResponse)
async def get_by_ip_address(ip_address: str, service: EquipmentService = Depends(get_service)):
    return await service.by_ip_address(ip_address)


@router.get("/search/name", response_model=list[EquipmentSummary])
async def search_by_name(name: str, service: EquipmentService = Depends(get_service)):
    """Case-insensitive substring search on equipment name."""
    return await service.search_by_name(name)


@router.get("/search/address", response_model=list[EquipmentSummary])
async def search_by_address(address: str, service: EquipmentService = Depends(get_service)):
    """Case-insensitive substring search on physical address."""
    return await service.search_by_address(address)


@router.get("/type/{type_id}", response_model=list[EquipmentSummary])
async def list_by_type(type_id: int, service: EquipmentService = Depends(get_service)):
    return await service.by_type(type_id)


@router.get("/type/{type_id}/count", response_model=int)
async def count_by_type(type_id: int, service: EquipmentService = Depends(get_service)):
    return await service.count_by_type(type_id)


@router.get("/type/{type_id}/status/{status}", response_model=list[EquipmentSummary])
async def list_by_type_and_status(
    type_id: int,
    status: EquipmentStatus,
    service: EquipmentService = Depends(get_service),
):
    return await service.by_type_and_status(type_id, status)


@router.get("/employee/{employee_id}", response_model=list[EquipmentSummary])
async def list_by_employee(employee_id: int, service: EquipmentService = Depends(get_service)):
    return await service.by_employee(employee_id)


@router.get("/status/{status}", response_model=list[EquipmentSummary])
async def list_by_status(status: EquipmentStatus, service: EquipmentService = Depends(get_service)):
    """List equipment with a status, ordered by name."""
    return await service.by_status(status)


@router.get("/status/{status}/count", response_model=int)
async def count_by_status(status: EquipmentStatus, service: EquipmentService = Depends(get_service)):
    return await service.count_by_status(status)


@router.get("/{equipment_id}", response_model=EquipmentResponse)
async def get_equipment(equipment_id: int, service: EquipmentService = Depends(get_service)):
    """Get equipment with related names and port/IP/maintenance counts."""
    return await service.get(equipment_id)


@router.post("", response_model=EquipmentResponse, status_code=201)
async def create_equipment(
    equipment_data: EquipmentCreate, service: EquipmentService = Depends(get_service)
):
    """Create new equipment."""
    return await service.create(equipment_data)


@router.put("/{equipment_id}", response_model=EquipmentResponse)
async def update_equipment(
    equipment_id: int,
    equipment_data: EquipmentUpdate,
    service: EquipmentService = Depends(get_service),
):
    """Update equipment."""
    return await service.update(equipment_id, equipment_data)


@router.patch("/{equipment_id}/status", response_model=EquipmentResponse)
async def change_status(
    equipment_id: int,
    status: EquipmentStatus,
    service: EquipmentService = Depends(get_service),
):
    """Change the lifecycle status and stamp date_updated."""
    return await service.change_status(equipment_id, status)


@router.delete("/{equipment_id}", status_code=204)
async def delete_equipment(equipment_id: int, service: EquipmentService = Depends(get_service)):
    """Delete equipment together with its ports, IP addresses and maintenance records."""
    await service.delete(equipment_id)
