"""Employee model (equipment custodians and maintenance staff)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from netequip.models.base import Base


class Employee(Base):
    """Employee responsible for equipment or maintenance work."""

    __tablename__ = "employee"

    full_name: Mapped[str] = mapped_column(String(100), index=True)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), unique=True, nullable=True)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, full_name={self.full_name})>"
