"""Device port model and its link to another port."""

import enum

from sqlalchemy import Enum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from netequip.models.base import Base


class PortType(enum.Enum):
    """Physical port form factors."""

    RJ45 = "RJ45"
    SFP = "SFP"
    SFP_PLUS = "SFP+"
    QSFP = "QSFP"
    QSFP_PLUS = "QSFP+"
    QSFP28 = "QSFP28"
    CONSOLE = "Console"
    USB = "USB"


class PortStatus(enum.Enum):
    """Operational port status."""

    ACTIVE = "Active"
    DISABLED = "Disabled"
    ERROR = "Error"
    TESTING = "Testing"


class PortSpeed(enum.Enum):
    """Port bandwidth tiers."""

    MBPS_10 = "10Mbps"
    MBPS_100 = "100Mbps"
    GBPS_1 = "1Gbps"
    GBPS_10 = "10Gbps"
    GBPS_25 = "25Gbps"
    GBPS_40 = "40Gbps"
    GBPS_100 = "100Gbps"


class DevicePort(Base):
    """A physical port on a piece of equipment.

    A port may point at a port on another device (``connected_to_port``),
    together with that port's owner (``connected_to_equipment``). Both fields
    are null while the port is unconnected.
    """

    __tablename__ = "device_port"

    equipment_id: Mapped[int] = mapped_column(ForeignKey("equipment.id"), index=True)
    port_number: Mapped[int] = mapped_column(Integer)
    port_type: Mapped[PortType | None] = mapped_column(Enum(PortType), nullable=True)
    status: Mapped[PortStatus | None] = mapped_column(Enum(PortStatus), nullable=True)
    speed: Mapped[PortSpeed | None] = mapped_column(Enum(PortSpeed), nullable=True)
    description: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Link target
    connected_to_equipment_id: Mapped[int | None] = mapped_column(
        ForeignKey("equipment.id"), nullable=True, index=True
    )
    connected_to_port_id: Mapped[int | None] = mapped_column(
        ForeignKey("device_port.id"), nullable=True, index=True
    )

    # Relationships
    equipment: Mapped["Equipment"] = relationship(
        "Equipment", back_populates="ports", foreign_keys=[equipment_id]
    )
    connected_to_equipment: Mapped["Equipment | None"] = relationship(
        "Equipment", foreign_keys=[connected_to_equipment_id]
    )
    connected_to_port: Mapped["DevicePort | None"] = relationship(
        "DevicePort", remote_side="DevicePort.id", foreign_keys=[connected_to_port_id]
    )

    __table_args__ = (
        UniqueConstraint("equipment_id", "port_number", name="uq_device_port_equipment_number"),
    )

    @property
    def is_connected(self) -> bool:
        return self.connected_to_port_id is not None

    def __repr__(self) -> str:
        return f"<DevicePort(id={self.id}, equipment_id={self.equipment_id}, number={self.port_number})>"


from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netequip.models.equipment import Equipment
