"""IP address assignment model."""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from netequip.models.base import Base


class IpAddress(Base):
    """IP address assigned to a piece of equipment."""

    __tablename__ = "ip_address"

    equipment_id: Mapped[int] = mapped_column(ForeignKey("equipment.id"), index=True)
    ip_address: Mapped[str] = mapped_column(String(45), unique=True, index=True)
    subnet_mask: Mapped[str | None] = mapped_column(String(45), nullable=True)
    gateway: Mapped[str | None] = mapped_column(String(45), nullable=True)
    network_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False)
    assigned_date: Mapped[date] = mapped_column(Date)

    equipment: Mapped["Equipment"] = relationship("Equipment", back_populates="ip_addresses")

    __table_args__ = (
        # At most one primary address per equipment
        Index(
            "uq_ip_address_primary_per_equipment",
            "equipment_id",
            unique=True,
            postgresql_where=text("is_primary"),
            sqlite_where=text("is_primary = 1"),
        ),
    )

    def __repr__(self) -> str:
        return f"<IpAddress(id={self.id}, ip={self.ip_address}, primary={self.is_primary})>"


from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netequip.models.equipment import Equipment
