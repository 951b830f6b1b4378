"""Pydantic schemas for API request/response models."""

from netequip.schemas.device_port import DevicePortCreate, DevicePortResponse, DevicePortUpdate
from netequip.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from netequip.schemas.equipment import (
    EquipmentCreate,
    EquipmentResponse,
    EquipmentSummary,
    EquipmentUpdate,
)
from netequip.schemas.equipment_type import (
    EquipmentTypeCreate,
    EquipmentTypeResponse,
    EquipmentTypeUpdate,
)
from netequip.schemas.errors import ErrorResponse, ValidationErrorResponse
from netequip.schemas.ip_address import IpAddressCreate, IpAddressResponse, IpAddressUpdate
from netequip.schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate

__all__ = [
    "EquipmentTypeCreate",
    "EquipmentTypeUpdate",
    "EquipmentTypeResponse",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
    "EquipmentCreate",
    "EquipmentUpdate",
    "EquipmentResponse",
    "EquipmentSummary",
    "DevicePortCreate",
    "DevicePortUpdate",
    "DevicePortResponse",
    "IpAddressCreate",
    "IpAddressUpdate",
    "IpAddressResponse",
    "MaintenanceCreate",
    "MaintenanceUpdate",
    "MaintenanceResponse",
    "ErrorResponse",
    "ValidationErrorResponse",
]
