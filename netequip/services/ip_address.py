"""IP address assignments and the one-primary-per-equipment rule."""

import logging
from datetime import date

from sqlalchemy import select

from netequip.core.errors import (
    DuplicateIpAddress,
    EquipmentNotFound,
    IpAddressNotFound,
    NotFoundError,
    PrimaryIpConflict,
)
from netequip.models.equipment import Equipment
from netequip.models.ip_address import IpAddress
from netequip.schemas.ip_address import IpAddressCreate, IpAddressResponse, IpAddressUpdate
from netequip.services.base import BaseService

logger = logging.getLogger(__name__)


class IpAddressService(BaseService):
    """CRUD, lookups and primary-flag management for IP addresses."""

    async def to_response(self, ip: IpAddress) -> IpAddressResponse:
        equipment = await self.db.get(Equipment, ip.equipment_id)
        return IpAddressResponse(
            id=ip.id,
            equipment_id=ip.equipment_id,
            equipment_name=equipment.name if equipment else None,
            ip_address=ip.ip_address,
            subnet_mask=ip.subnet_mask,
            gateway=ip.gateway,
            network_type=ip.network_type,
            is_primary=ip.is_primary,
            assigned_date=ip.assigned_date,
        )

    async def _responses(self, query) -> list[IpAddressResponse]:
        return [await self.to_response(ip) for ip in await self._all(query)]

    async def _primary_of(self, equipment_id: int) -> IpAddress | None:
        return await self._first(
            select(IpAddress).where(
                IpAddress.equipment_id == equipment_id,
                IpAddress.is_primary.is_(True),
            )
        )

    async def _validate_primary(self, equipment_id: int, exclude_id: int | None) -> None:
        """Raise if another address of ``equipment_id`` is already primary."""
        current = await self._primary_of(equipment_id)
        if current is None or current.id == exclude_id:
            return
        logger.warning(
            f"Equipment {equipment_id} already has primary IP {current.ip_address} (id {current.id})"
        )
        raise PrimaryIpConflict(equipment_id)

    # CRUD

    async def create(self, data: IpAddressCreate) -> IpAddressResponse:
        await self._require(Equipment, data.equipment_id, EquipmentNotFound)

        if await self.exists_by_ip(data.ip_address):
            logger.warning(f"Duplicate IP address: {data.ip_address}")
            raise DuplicateIpAddress(data.ip_address)

        if data.is_primary:
            await self._validate_primary(data.equipment_id, None)

        ip = IpAddress(**data.model_dump())
        if ip.assigned_date is None:
            ip.assigned_date = date.today()

        await self._save(ip)
        logger.info(f"Assigned {ip.ip_address} to equipment {ip.equipment_id} (primary={ip.is_primary})")
        return await self.to_response(ip)

    async def get(self, ip_id: int) -> IpAddressResponse:
        return await self.to_response(await self._require(IpAddress, ip_id, IpAddressNotFound))

    async def list_all(self) -> list[IpAddressResponse]:
        return await self._responses(select(IpAddress).order_by(IpAddress.id))

    async def update(self, ip_id: int, data: IpAddressUpdate) -> IpAddressResponse:
        ip = await self._require(IpAddress, ip_id, IpAddressNotFound)
        await self._require(Equipment, data.equipment_id, EquipmentNotFound)

        if ip.ip_address != data.ip_address and await self.exists_by_ip(data.ip_address):
            logger.warning(f"Duplicate IP address on update: {data.ip_address}")
            raise DuplicateIpAddress(data.ip_address)

        # Re-saving the current primary of the same equipment is not a conflict
        if data.is_primary and (data.equipment_id != ip.equipment_id or not ip.is_primary):
            await self._validate_primary(data.equipment_id, ip_id)

        for field, value in data.model_dump().items():
            setattr(ip, field, value)
        if ip.assigned_date is None:
            ip.assigned_date = date.today()

        await self._save(ip)
        return await self.to_response(ip)

    async def delete(self, ip_id: int) -> None:
        ip = await self._require(IpAddress, ip_id, IpAddressNotFound)
        await self.db.delete(ip)
        await self.db.commit()
        logger.info(f"Deleted IP address {ip_id}")

    # Primary flag

    async def set_primary(self, ip_id: int) -> IpAddressResponse:
        ip = await self._require(IpAddress, ip_id, IpAddressNotFound)
        await self._validate_primary(ip.equipment_id, ip_id)
        ip.is_primary = True
        await self._save(ip)
        logger.info(f"IP {ip.ip_address} is now primary for equipment {ip.equipment_id}")
        return await self.to_response(ip)

    async def unset_primary(self, ip_id: int) -> IpAddressResponse:
        ip = await self._require(IpAddress, ip_id, IpAddressNotFound)
        ip.is_primary = False
        await self._save(ip)
        return await self.to_response(ip)

    # Lookups

    async def by_equipment(self, equipment_id: int) -> list[IpAddressResponse]:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        return await self._responses(select(IpAddress).where(IpAddress.equipment_id == equipment_id))

    async def primary_by_equipment(self, equipment_id: int) -> IpAddressResponse:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        ip = await self._primary_of(equipment_id)
        if ip is None:
            raise NotFoundError(f"Equipment {equipment_id} has no primary IP address")
        return await self.to_response(ip)

    async def by_ip(self, ip_address: str) -> IpAddressResponse:
        ip = await self._first(select(IpAddress).where(IpAddress.ip_address == ip_address))
        if ip is None:
            raise NotFoundError(f"IP address '{ip_address}' not found")
        return await self.to_response(ip)

    async def by_network_type(self, network_type: str) -> list[IpAddressResponse]:
        return await self._responses(select(IpAddress).where(IpAddress.network_type == network_type))

    async def by_equipment_and_network_type(
        self, equipment_id: int, network_type: str
    ) -> list[IpAddressResponse]:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        query = select(IpAddress).where(
            IpAddress.equipment_id == equipment_id,
            IpAddress.network_type == network_type,
        )
        return await self._responses(query)

    async def by_subnet_mask(self, subnet_mask: str) -> list[IpAddressResponse]:
        return await self._responses(select(IpAddress).where(IpAddress.subnet_mask == subnet_mask))

    async def exists_by_ip(self, ip_address: str) -> bool:
        return await self._count(IpAddress, IpAddress.ip_address == ip_address) > 0

    async def count_by_equipment(self, equipment_id: int) -> int:
        await self._require(Equipment, equipment_id, EquipmentNotFound)
        return await self._count(IpAddress, IpAddress.equipment_id == equipment_id)
