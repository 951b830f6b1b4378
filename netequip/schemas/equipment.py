"""Equipment schemas."""

from datetime import date
from typing import Any

from pydantic import BaseModel

from netequip.models.equipment import EquipmentStatus
from netequip.schemas.constraints import IpAddressText, MacAddress, bounded_str, required_str


class EquipmentBase(BaseModel):
    """Fields shared by create and update requests."""

    type_id: int
    employee_id: int | None = None
    name: required_str(100)
    serial_number: bounded_str(100) | None = None
    mac_address: MacAddress | None = None
    ip_address: IpAddressText | None = None
    address: bounded_str(250) | None = None
    technical_params: dict[str, Any] | None = None


class EquipmentCreate(EquipmentBase):
    """Schema for creating equipment. Status defaults to Active, date_added to today."""

    status: EquipmentStatus | None = EquipmentStatus.ACTIVE
    date_added: date | None = None


class EquipmentUpdate(EquipmentBase):
    """Schema for replacing equipment. An omitted status keeps the current one."""

    status: EquipmentStatus | None = None
    date_updated: date | None = None


class EquipmentResponse(BaseModel):
    """Full equipment view with related names and child counts."""

    id: int
    type_id: int
    type_name: str | None
    manufacturer: str | None
    model: str | None
    employee_id: int | None
    employee_full_name: str | None
    name: str
    serial_number: str | None
    mac_address: str | None
    ip_address: str | None
    address: str | None
    status: EquipmentStatus
    date_added: date | None
    date_updated: date | None
    technical_params: dict[str, Any] | None
    ports_count: int
    ip_addresses_count: int
    maintenance_count: int


class EquipmentSummary(BaseModel):
    """Compact equipment view for list endpoints."""

    id: int
    name: str
    type_name: str | None
    manufacturer: str | None
    model: str | None
    serial_number: str | None
    ip_address: str | None
    address: str | None
    status: EquipmentStatus
    date_added: date | None
    ports_count: int
