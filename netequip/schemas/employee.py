"""Employee schemas."""

from pydantic import BaseModel

from netequip.schemas.constraints import Email, bounded_str, required_str


class EmployeeCreate(BaseModel):
    """Schema for creating an employee."""

    full_name: required_str(100)
    position: bounded_str(100) | None = None
    email: Email | None = None


class EmployeeUpdate(EmployeeCreate):
    """Schema for replacing an employee."""


class EmployeeResponse(BaseModel):
    """Schema for employee response."""

    id: int
    full_name: str
    position: str | None
    email: str | None

    model_config = {"from_attributes": True}
