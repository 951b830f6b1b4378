"""Domain services: invariant checks, lookups and response assembly."""

from netequip.services.device_port import DevicePortService
from netequip.services.employee import EmployeeService
from netequip.services.equipment import EquipmentService
from netequip.services.equipment_type import EquipmentTypeService
from netequip.services.ip_address import IpAddressService
from netequip.services.maintenance import MaintenanceService

__all__ = [
    "EquipmentTypeService",
    "EmployeeService",
    "EquipmentService",
    "DevicePortService",
    "IpAddressService",
    "MaintenanceService",
]
