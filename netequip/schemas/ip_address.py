"""IP address schemas."""

from datetime import date

from pydantic import BaseModel

from netequip.schemas.constraints import IpAddressText, bounded_str


class IpAddressCreate(BaseModel):
    """Schema for assigning an IP address. assigned_date defaults to today."""

    equipment_id: int
    ip_address: IpAddressText
    subnet_mask: bounded_str(45) | None = None
    gateway: bounded_str(45) | None = None
    network_type: bounded_str(20) | None = None
    is_primary: bool = False
    assigned_date: date | None = None


class IpAddressUpdate(IpAddressCreate):
    """Schema for replacing an IP address assignment."""


class IpAddressResponse(BaseModel):
    """Schema for IP address response."""

    id: int
    equipment_id: int
    equipment_name: str | None
    ip_address: str
    subnet_mask: str | None
    gateway: str | None
    network_type: str | None
    is_primary: bool
    assigned_date: date | None
