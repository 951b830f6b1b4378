"""Database models."""

from netequip.models.base import Base
from netequip.models.device_port import DevicePort, PortSpeed, PortStatus, PortType
from netequip.models.employee import Employee
from netequip.models.equipment import Equipment, EquipmentStatus
from netequip.models.equipment_type import EquipmentType
from netequip.models.ip_address import IpAddress
from netequip.models.maintenance import MaintenanceHistory, MaintenanceType

__all__ = [
    "Base",
    "EquipmentType",
    "Employee",
    "Equipment",
    "EquipmentStatus",
    "DevicePort",
    "PortType",
    "PortStatus",
    "PortSpeed",
    "IpAddress",
    "MaintenanceHistory",
    "MaintenanceType",
]
