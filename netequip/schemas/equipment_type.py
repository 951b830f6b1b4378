"""Equipment type schemas."""

from pydantic import BaseModel

from netequip.schemas.constraints import PortCount, bounded_str, required_str


class EquipmentTypeCreate(BaseModel):
    """Schema for creating an equipment type."""

    name: required_str(50)
    manufacturer: bounded_str(100) | None = None
    model: bounded_str(100) | None = None
    default_port_count: PortCount | None = None
    connection_type: bounded_str(50) | None = None
    osi_level: bounded_str(20) | None = None
    description: str | None = None


class EquipmentTypeUpdate(EquipmentTypeCreate):
    """Schema for replacing an equipment type."""


class EquipmentTypeResponse(BaseModel):
    """Schema for equipment type response."""

    id: int
    name: str
    manufacturer: str | None
    model: str | None
    default_port_count: int | None
    connection_type: str | None
    osi_level: str | None
    description: str | None

    model_config = {"from_attributes": True}
