"""Device port API endpoints, including port connect/disconnect."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from netequip.models.base import get_db
from netequip.models.device_port import PortStatus, PortType
from netequip.schemas.device_port import DevicePortCreate, DevicePortResponse, DevicePortUpdate
from netequip.services.device_port import DevicePortService

router = APIRouter()


def get_service(db: AsyncSession = Depends(get_db)) -> DevicePortService:
    return DevicePortService(db)


@router.get("", response_model=list[DevicePortResponse])
async def list_ports(service: DevicePortService = Depends(get_service)):
    """List all device ports."""
    return await service.list_all()


@router.get("/status/{status}", response_model=list[DevicePortResponse])
async def list_by_status(status: PortStatus, service: DevicePortService = Depends(get_service)):
    return await service.by_status(status)


@router.get("/type/{port_type}", response_model=list[DevicePortResponse])
async def list_by_type(port_type: PortType, service: DevicePortService = Depends(get_service)):
    return await service.by_type(port_type)


@router.get("/equipment/{equipment_id}", response_model=list[DevicePortResponse])
async def list_by_equipment(equipment_id: int, service: DevicePortService = Depends(get_service)):
    """List an equipment item's ports ordered by port number."""
    return await service.by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/port/{port_number}", response_model=DevicePortResponse)
async def get_by_equipment_and_number(
    equipment_id: int,
    port_number: int,
    service: DevicePortService = Depends(get_service),
):
    return await service.by_equipment_and_number(equipment_id, port_number)


@router.get("/equipment/{equipment_id}/active", response_model=list[DevicePortResponse])
async def list_active(equipment_id: int, service: DevicePortService = Depends(get_service)):
    return await service.active_by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/available", response_model=list[DevicePortResponse])
async def list_available(equipment_id: int, service: DevicePortService = Depends(get_service)):
    """Ports with no link target."""
    return await service.available_by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/occupied", response_model=list[DevicePortResponse])
async def list_occupied(equipment_id: int, service: DevicePortService = Depends(get_service)):
    """Ports with a link target."""
    return await service.occupied_by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/connections", response_model=list[DevicePortResponse])
async def list_connections_to(equipment_id: int, service: DevicePortService = Depends(get_service)):
    """Ports on any equipment that point at this equipment."""
    return await service.connections_to_equipment(equipment_id)


@router.get(
    "/equipment/{equipment_id}/type/{port_type}/status/{status}",
    response_model=list[DevicePortResponse],
)
async def list_by_equipment_type_and_status(
    equipment_id: int,
    port_type: PortType,
    status: PortStatus,
    service: DevicePortService = Depends(get_service),
):
    return await service.by_equipment_type_and_status(equipment_id, port_type, status)


@router.get("/equipment/{equipment_id}/count", response_model=int)
async def count_by_equipment(equipment_id: int, service: DevicePortService = Depends(get_service)):
    return await service.count_by_equipment(equipment_id)


@router.get("/equipment/{equipment_id}/count-active", response_model=int)
async def count_active(equipment_id: int, service: DevicePortService = Depends(get_service)):
    return await service.count_active_by_equipment(equipment_id)


@router.get("/{port_id}", response_model=DevicePortResponse)
async def get_port(port_id: int, service: DevicePortService = Depends(get_service)):
    """Get a specific port by ID."""
    return await service.get(port_id)


@router.get("/{port_id}/connected", response_model=DevicePortResponse)
async def get_connected_port(port_id: int, service: DevicePortService = Depends(get_service)):
    """Get the port this port is linked to (404 when unconnected)."""
    return await service.get_connected_port(port_id)


@router.get("/{port_id}/is-connected", response_model=bool)
async def is_port_connected(port_id: int, service: DevicePortService = Depends(get_service)):
    return await service.is_connected(port_id)


@router.post("", response_model=DevicePortResponse, status_code=201)
async def create_port(port_data: DevicePortCreate, service: DevicePortService = Depends(get_service)):
    """Create a new device port."""
    return await service.create(port_data)


@router.put("/{port_id}", response_model=DevicePortResponse)
async def update_port(
    port_id: int,
    port_data: DevicePortUpdate,
    service: DevicePortService = Depends(get_service),
):
    """Update a device port."""
    return await service.update(port_id, port_data)


@router.delete("/{port_id}", status_code=204)
async def delete_port(port_id: int, service: DevicePortService = Depends(get_service)):
    """Delete a device port; ports linked to it are disconnected."""
    await service.delete(port_id)


@router.patch("/{source_id}/connect/{target_id}", response_model=DevicePortResponse)
async def connect_ports(
    source_id: int,
    target_id: int,
    service: DevicePortService = Depends(get_service),
):
    """Link a port to a free port on another equipment item."""
    return await service.connect(source_id, target_id)


@router.patch("/{port_id}/disconnect", response_model=DevicePortResponse)
async def disconnect_port(port_id: int, service: DevicePortService = Depends(get_service)):
    """Clear a port's link. Succeeds when the port is already unconnected."""
    return await service.disconnect(port_id)


@router.patch("/{port_id}/status", response_model=DevicePortResponse)
async def change_status(
    port_id: int,
    status: PortStatus,
    service: DevicePortService = Depends(get_service),
):
    return await service.change_status(port_id, status)
