"""IP address API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from netequip.models.base import get_db
from netequip.schemas.ip_address import IpAddressCreate, IpAddressResponse, IpAddressUpdate
from netequip.services.ip_address import IpAddressService

router = APIRouter()


def get_service(db: AsyncSession = Depends(get_db)) -> IpAddressService:
    return IpAddressService(db)


@router.get("", response_model=list[IpAddressResponse])
async def list_ip_addresses(service: IpAddressService = Depends(get_service)):
    """List all IP address assignments."""
    return await service.list_all()


@router.get("/search", response_model=IpAddressResponse)
async def get_by_ip(ip: str, service: IpAddressService = Depends(get_service)):
    """Find an assignment by its exact address string."""
    return await service.by_ip(ip)


@router.get("/exists", response_model=bool)
async def exists_by_ip(ip: str, service: IpAddressService = Depends(get_service)):
    return await service.exists_by_ip(ip)


@router.get("/network-type/{network_type}", response_model=list[IpAddressResponse])
async def list_by_network_type(network_type: str, service: IpAddressService = Depends(get_service)):
    return await service.by_network_type(network_type)


@router.get("/subnet-mask/{subnet_mask}", response_model=list[IpAddressResponse])
async def list_by_subnet_mask(subnet_mask: str, service: IpAddressService = Depends(get_service)):
    return await service.by_subnet_mask(subnet_mask)


@router.get("/equipment/{equipment_id}", response_model=list[IpAddressResponse])
async def list_by_equipment(equipment_id: int, service: IpAddressService = Depends(get_service)):
    return await service.by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/primary", response_model=IpAddressResponse)
async def get_primary(equipment_id: int, service: IpAddressService = Depends(get_service)):
    """Get the primary address of an equipment item (404 when none)."""
    return await service.primary_by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/network-type/{network_type}", response_model=list[IpAddressResponse])
async def list_by_equipment_and_network_type(
    equipment_id: int,
    network_type: str,
    service: IpAddressService = Depends(get_service),
):
    return await service.by_equipment_and_network_type(equipment_id, network_type)


@router.get("/equipment/{equipment_id}/count", response_model=int)
async def count_by_equipment(equipment_id: int, service: IpAddressService = Depends(get_service)):
    return await service.count_by_equipment(equipment_id)


@router.get("/{ip_id}", response_model=IpAddressResponse)
async def get_ip_address(ip_id: int, service: IpAddressService = Depends(get_service)):
    """Get a specific IP address assignment by ID."""
    return await service.get(ip_id)


@router.post("", response_model=IpAddressResponse, status_code=201)
async def create_ip_address(ip_data: IpAddressCreate, service: IpAddressService = Depends(get_service)):
    """Assign an IP address to equipment."""
    return await service.create(ip_data)


@router.put("/{ip_id}", response_model=IpAddressResponse)
async def update_ip_address(
    ip_id: int,
    ip_data: IpAddressUpdate,
    service: IpAddressService = Depends(get_service),
):
    """Update an IP address assignment."""
    return await service.update(ip_id, ip_data)


@router.delete("/{ip_id}", status_code=204)
async def delete_ip_address(ip_id: int, service: IpAddressService = Depends(get_service)):
    await service.delete(ip_id)


@router.patch("/{ip_id}/set-primary", response_model=IpAddressResponse)
async def set_primary(ip_id: int, service: IpAddressService = Depends(get_service)):
    """Mark an address as primary (409 if the equipment already has one)."""
    return await service.set_primary(ip_id)


@router.patch("/{ip_id}/unset-primary", response_model=IpAddressResponse)
async def unset_primary(ip_id: int, service: IpAddressService = Depends(get_service)):
    return await service.unset_primary(ip_id)
