"""Maintenance history schemas."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel

from netequip.models.maintenance import MaintenanceType
from netequip.schemas.constraints import FutureDate, Money, bounded_str


class MaintenanceCreate(BaseModel):
    """Schema for recording maintenance. date defaults to now."""

    equipment_id: int
    date: dt.datetime | None = None
    type: MaintenanceType
    description: bounded_str(1000) | None = None
    performed_by_id: int | None = None
    cost: Money | None = None
    next_maintenance_date: FutureDate | None = None


class MaintenanceUpdate(MaintenanceCreate):
    """Schema for replacing a maintenance record."""

    date: dt.datetime


class MaintenanceResponse(BaseModel):
    """Maintenance record with equipment and performer names resolved."""

    id: int
    equipment_id: int
    equipment_name: str | None
    date: dt.datetime
    type: MaintenanceType
    description: str | None
    performed_by_id: int | None
    performed_by_name: str | None
    cost: Decimal | None
    next_maintenance_date: dt.date | None
