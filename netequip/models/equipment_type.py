"""Equipment type model."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from netequip.models.base import Base


class EquipmentType(Base):
    """Catalogue entry describing a class of network equipment."""

    __tablename__ = "equipment_type"

    name: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    manufacturer: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    default_port_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    connection_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    osi_level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<EquipmentType(id={self.id}, name={self.name})>"
