"""Equipment type catalogue operations."""

import logging

from sqlalchemy import select

from netequip.core.errors import (
    DuplicateEquipmentType,
    EquipmentTypeInUse,
    EquipmentTypeNotFound,
    NotFoundError,
)
from netequip.models.equipment import Equipment
from netequip.models.equipment_type import EquipmentType
from netequip.schemas.equipment_type import (
    EquipmentTypeCreate,
    EquipmentTypeResponse,
    EquipmentTypeUpdate,
)
from netequip.services.base import BaseService

logger = logging.getLogger(__name__)


class EquipmentTypeService(BaseService):
    """CRUD and lookups for equipment types."""

    def to_response(self, equipment_type: EquipmentType) -> EquipmentTypeResponse:
        return EquipmentTypeResponse.model_validate(equipment_type)

    async def create(self, data: EquipmentTypeCreate) -> EquipmentTypeResponse:
        if await self.exists_by_name(data.name):
            logger.warning(f"Duplicate equipment type name: {data.name}")
            raise DuplicateEquipmentType(data.name)

        equipment_type = EquipmentType(**data.model_dump())
        await self._save(equipment_type)
        logger.info(f"Created equipment type {equipment_type.id} ({equipment_type.name})")
        return self.to_response(equipment_type)

    async def get(self, type_id: int) -> EquipmentTypeResponse:
        equipment_type = await self._require(EquipmentType, type_id, EquipmentTypeNotFound)
        return self.to_response(equipment_type)

    async def list_all(self) -> list[EquipmentTypeResponse]:
        types = await self._all(select(EquipmentType).order_by(EquipmentType.id))
        return [self.to_response(t) for t in types]

    async def update(self, type_id: int, data: EquipmentTypeUpdate) -> EquipmentTypeResponse:
        equipment_type = await self._require(EquipmentType, type_id, EquipmentTypeNotFound)

        if equipment_type.name != data.name and await self.exists_by_name(data.name):
            logger.warning(f"Duplicate equipment type name on update: {data.name}")
            raise DuplicateEquipmentType(data.name)

        for field, value in data.model_dump().items():
            setattr(equipment_type, field, value)

        await self._save(equipment_type)
        return self.to_response(equipment_type)

    async def delete(self, type_id: int) -> None:
        """Delete a type. Refused while any equipment still references it."""
        equipment_type = await self._require(EquipmentType, type_id, EquipmentTypeNotFound)

        usage = await self._count(Equipment, Equipment.type_id == type_id)
        if usage:
            logger.warning(f"Refusing to delete equipment type {type_id}: used by {usage} item(s)")
            raise EquipmentTypeInUse(type_id, usage)

        await self.db.delete(equipment_type)
        await self.db.commit()
        logger.info(f"Deleted equipment type {type_id}")

    async def by_manufacturer(self, manufacturer: str) -> list[EquipmentTypeResponse]:
        query = select(EquipmentType).where(EquipmentType.manufacturer == manufacturer)
        return [self.to_response(t) for t in await self._all(query)]

    async def by_manufacturer_sorted(self, manufacturer: str) -> list[EquipmentTypeResponse]:
        query = (
            select(EquipmentType)
            .where(EquipmentType.manufacturer == manufacturer)
            .order_by(EquipmentType.model.asc())
        )
        return [self.to_response(t) for t in await self._all(query)]

    async def by_manufacturer_and_model(self, manufacturer: str, model: str) -> EquipmentTypeResponse:
        equipment_type = await self._first(
            select(EquipmentType).where(
                EquipmentType.manufacturer == manufacturer,
                EquipmentType.model == model,
            )
        )
        if equipment_type is None:
            raise NotFoundError(f"Equipment type {manufacturer} {model} not found")
        return self.to_response(equipment_type)

    async def by_name(self, name: str) -> EquipmentTypeResponse:
        equipment_type = await self._first(select(EquipmentType).where(EquipmentType.name == name))
        if equipment_type is None:
            raise NotFoundError(f"Equipment type '{name}' not found")
        return self.to_response(equipment_type)

    async def exists_by_name(self, name: str) -> bool:
        return await self._count(EquipmentType, EquipmentType.name == name) > 0
