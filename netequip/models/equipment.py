"""Equipment model, the central inventory record."""

import enum
from datetime import date

from sqlalchemy import JSON, Date, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from netequip.models.base import Base


class EquipmentStatus(enum.Enum):
    """Lifecycle status of a piece of equipment."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    MAINTENANCE = "Maintenance"
    RETIRED = "Retired"


class Equipment(Base):
    """Network equipment item."""

    __tablename__ = "equipment"

    # Foreign keys
    type_id: Mapped[int] = mapped_column(ForeignKey("equipment_type.id"), index=True)
    employee_id: Mapped[int | None] = mapped_column(
        ForeignKey("employee.id"), nullable=True, index=True
    )

    # Identification
    name: Mapped[str] = mapped_column(String(100), index=True)
    serial_number: Mapped[str | None] = mapped_column(String(100), unique=True, nullable=True)
    mac_address: Mapped[str | None] = mapped_column(String(50), unique=True, nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True, index=True)
    address: Mapped[str | None] = mapped_column(String(250), nullable=True)

    # Lifecycle
    status: Mapped[EquipmentStatus] = mapped_column(
        Enum(EquipmentStatus), default=EquipmentStatus.ACTIVE
    )
    date_added: Mapped[date] = mapped_column(Date)
    date_updated: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Opaque device-specific metadata
    technical_params: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    # Relationships
    type: Mapped["EquipmentType"] = relationship("EquipmentType")
    employee: Mapped["Employee | None"] = relationship("Employee")
    ports: Mapped[list["DevicePort"]] = relationship(
        "DevicePort",
        back_populates="equipment",
        foreign_keys="DevicePort.equipment_id",
        cascade="all, delete-orphan",
    )
    ip_addresses: Mapped[list["IpAddress"]] = relationship(
        "IpAddress", back_populates="equipment", cascade="all, delete-orphan"
    )
    maintenance_records: Mapped[list["MaintenanceHistory"]] = relationship(
        "MaintenanceHistory", back_populates="equipment", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("ix_equipment_type_status", "type_id", "status"),
        Index("ix_equipment_date_updated", "date_updated"),
    )

    def __repr__(self) -> str:
        return f"<Equipment(id={self.id}, name={self.name}, status={self.status.value})>"


from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netequip.models.device_port import DevicePort
    from netequip.models.employee import Employee
    from netequip.models.equipment_type import EquipmentType
    from netequip.models.ip_address import IpAddress
    from netequip.models.maintenance import MaintenanceHistory
