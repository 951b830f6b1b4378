"""Domain errors and their HTTP status mapping.

Every domain error carries a ``kind`` tag. The API layer never matches on
exception classes; it looks the tag up in ``STATUS_BY_KIND``.
"""

import enum


class ErrorKind(enum.Enum):
    """Error categories understood by the API layer."""

    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    CONFLICT = "conflict"
    INVALID_OPERATION = "invalid_operation"
    VALIDATION = "validation"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE: 409,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_OPERATION: 400,
    ErrorKind.VALIDATION: 400,
}


def status_for(kind: ErrorKind | None) -> int:
    """Return the HTTP status for an error kind, 500 when unclassified."""
    return STATUS_BY_KIND.get(kind, 500)


class NetEquipError(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Not found

class NotFoundError(NetEquipError):
    kind = ErrorKind.NOT_FOUND


class EquipmentTypeNotFound(NotFoundError):
    def __init__(self, type_id: int):
        super().__init__(f"Equipment type with id {type_id} not found")


class EmployeeNotFound(NotFoundError):
    def __init__(self, employee_id: int):
        super().__init__(f"Employee with id {employee_id} not found")


class EquipmentNotFound(NotFoundError):
    def __init__(self, equipment_id: int):
        super().__init__(f"Equipment with id {equipment_id} not found")


class DevicePortNotFound(NotFoundError):
    def __init__(self, port_id: int):
        super().__init__(f"Device port with id {port_id} not found")


class IpAddressNotFound(NotFoundError):
    def __init__(self, ip_id: int):
        super().__init__(f"IP address with id {ip_id} not found")


class MaintenanceHistoryNotFound(NotFoundError):
    def __init__(self, record_id: int):
        super().__init__(f"Maintenance record with id {record_id} not found")


class PortNotConnected(NotFoundError):
    def __init__(self, port_id: int):
        super().__init__(f"Port {port_id} is not connected to any port")


# Duplicates

class DuplicateError(NetEquipError):
    kind = ErrorKind.DUPLICATE


class DuplicateEquipmentType(DuplicateError):
    def __init__(self, name: str):
        super().__init__(f"Equipment type '{name}' already exists")


class DuplicateEmployeeEmail(DuplicateError):
    def __init__(self, email: str):
        super().__init__(f"Employee with email '{email}' already exists")


class DuplicateEquipment(DuplicateError):
    def __init__(self, field: str, value: str):
        super().__init__(f"Equipment with {field} '{value}' already exists")


class DuplicateDevicePort(DuplicateError):
    def __init__(self, equipment_id: int, port_number: int):
        super().__init__(f"Port {port_number} already exists on equipment {equipment_id}")


class DuplicateIpAddress(DuplicateError):
    def __init__(self, ip_address: str):
        super().__init__(f"IP address '{ip_address}' is already assigned")


# Business rule conflicts

class ConflictError(NetEquipError):
    kind = ErrorKind.CONFLICT


class PrimaryIpConflict(ConflictError):
    def __init__(self, equipment_id: int):
        super().__init__(f"Equipment {equipment_id} already has a primary IP address")


class EquipmentTypeInUse(ConflictError):
    def __init__(self, type_id: int, usage_count: int):
        super().__init__(
            f"Equipment type {type_id} is used by {usage_count} equipment item(s) and cannot be deleted"
        )


# Invalid operations

class InvalidOperationError(NetEquipError):
    kind = ErrorKind.INVALID_OPERATION


class InvalidPortConnection(InvalidOperationError):
    pass
