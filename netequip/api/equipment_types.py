"""Equipment type API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from netequip.models.base import get_db
from netequip.schemas.equipment_type import (
    EquipmentTypeCreate,
    EquipmentTypeResponse,
    EquipmentTypeUpdate,
)
from netequip.services.equipment_type import EquipmentTypeService

router = APIRouter()


def get_service(db: AsyncSession = Depends(get_db)) -> EquipmentTypeService:
    return EquipmentTypeService(db)


@router.get("", response_model=list[EquipmentTypeResponse])
async def list_equipment_types(service: EquipmentTypeService = Depends(get_service)):
    """List all equipment types."""
    return await service.list_all()


@router.get("/search", response_model=EquipmentTypeResponse)
async def get_by_manufacturer_and_model(
    manufacturer: str,
    model: str,
    service: EquipmentTypeService = Depends(get_service),
):
    """Find the type with an exact manufacturer and model."""
    return await service.by_manufacturer_and_model(manufacturer, model)


@router.get("/exists", response_model=bool)
async def exists_by_name(name: str, service: EquipmentTypeService = Depends(get_service)):
    """Check whether a type name is taken."""
    return await service.exists_by_name(name)


@router.get("/by-name/{name}", response_model=EquipmentTypeResponse)
async def get_by_name(name: str, service: EquipmentTypeService = Depends(get_service)):
    return await service.by_name(name)


@router.get("/manufacturer/{manufacturer}", response_model=list[EquipmentTypeResponse])
async def list_by_manufacturer(manufacturer: str, service: EquipmentTypeService = Depends(get_service)):
    return await service.by_manufacturer(manufacturer)


@router.get("/manufacturer/{manufacturer}/sorted", response_model=list[EquipmentTypeResponse])
async def list_by_manufacturer_sorted(
    manufacturer: str, service: EquipmentTypeService = Depends(get_service)
):
    """List a manufacturer's types ordered by model."""
    return await service.by_manufacturer_sorted(manufacturer)


@router.get("/{type_id}", response_model=EquipmentTypeResponse)
async def get_equipment_type(type_id: int, service: EquipmentTypeService = Depends(get_service)):
    """Get a specific equipment type by ID."""
    return await service.get(type_id)


@router.post("", response_model=EquipmentTypeResponse, status_code=201)
async def create_equipment_type(
    type_data: EquipmentTypeCreate, service: EquipmentTypeService = Depends(get_service)
):
    """Create a new equipment type."""
    return await service.create(type_data)


@router.put("/{type_id}", response_model=EquipmentTypeResponse)
async def update_equipment_type(
    type_id: int,
    type_data: EquipmentTypeUpdate,
    service: EquipmentTypeService = Depends(get_service),
):
    """Update an equipment type."""
    return await service.update(type_id, type_data)


@router.delete("/{type_id}", status_code=204)
async def delete_equipment_type(type_id: int, service: EquipmentTypeService = Depends(get_service)):
    """Delete an equipment type that no equipment references."""
    await service.delete(type_id)
