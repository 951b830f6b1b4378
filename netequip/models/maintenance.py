"""Maintenance history model."""

import datetime as dt
import enum
from decimal import Decimal

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Index, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from netequip.models.base import Base


class MaintenanceType(enum.Enum):
    """Kinds of maintenance work."""

    ROUTINE = "Routine"
    REPAIR = "Repair"
    UPGRADE = "Upgrade"
    EMERGENCY = "Emergency"
    PREVENTIVE = "Preventive"


class MaintenanceHistory(Base):
    """A maintenance event performed on a piece of equipment."""

    __tablename__ = "maintenance_history"

    equipment_id: Mapped[int] = mapped_column(ForeignKey("equipment.id"), index=True)
    performed_by_id: Mapped[int | None] = mapped_column(
        ForeignKey("employee.id"), nullable=True, index=True
    )

    date: Mapped[dt.datetime] = mapped_column(DateTime)
    type: Mapped[MaintenanceType] = mapped_column(Enum(MaintenanceType))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    next_maintenance_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    equipment: Mapped["Equipment"] = relationship("Equipment", back_populates="maintenance_records")
    performed_by: Mapped["Employee | None"] = relationship("Employee")

    __table_args__ = (
        Index("ix_maintenance_history_equipment_date", "equipment_id", "date"),
        Index("ix_maintenance_history_next_date", "next_maintenance_date"),
    )

    def __repr__(self) -> str:
        return f"<MaintenanceHistory(id={self.id}, equipment_id={self.equipment_id}, type={self.type.value})>"


from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netequip.models.employee import Employee
    from netequip.models.equipment import Equipment
