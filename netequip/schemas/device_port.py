"""Device port schemas."""

from pydantic import BaseModel

from netequip.models.device_port import PortSpeed, PortStatus, PortType
from netequip.schemas.constraints import PortNumber, bounded_str


class DevicePortCreate(BaseModel):
    """Schema for creating a device port.

    ``connected_to_equipment_id`` and ``connected_to_port_id`` are resolved
    independently; when both are given the port must belong to that equipment.
    """

    equipment_id: int
    port_number: PortNumber
    port_type: PortType | None = None
    status: PortStatus | None = None
    speed: PortSpeed | None = None
    connected_to_equipment_id: int | None = None
    connected_to_port_id: int | None = None
    description: bounded_str(200) | None = None


class DevicePortUpdate(DevicePortCreate):
    """Schema for replacing a device port."""


class DevicePortResponse(BaseModel):
    """Device port view with owner and link target names resolved."""

    id: int
    equipment_id: int
    equipment_name: str | None
    port_number: int
    port_type: PortType | None
    status: PortStatus | None
    speed: PortSpeed | None
    connected_to_equipment_id: int | None
    connected_to_equipment_name: str | None
    connected_to_port_id: int | None
    connected_to_port_number: int | None
    description: str | None
