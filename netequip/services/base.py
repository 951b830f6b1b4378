"""Shared plumbing for the service classes."""

from typing import TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from netequip.core.errors import NetEquipError
from netequip.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseService:
    """Holds the request session and common lookups.

    Write methods commit once at the end, so each invariant check and the
    write it guards run in the same transaction.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _require(
        self, model: type[ModelT], obj_id: int, error: type[NetEquipError]
    ) -> ModelT:
        """Load a row by id or raise ``error(obj_id)``."""
        obj = await self.db.get(model, obj_id)
        if obj is None:
            raise error(obj_id)
        return obj

    async def _count(self, model: type[Base], *criteria) -> int:
        query = select(func.count()).select_from(model)
        if criteria:
            query = query.where(*criteria)
        return (await self.db.scalar(query)) or 0

    async def _all(self, query) -> list:
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def _first(self, query):
        result = await self.db.execute(query.limit(1))
        return result.scalars().first()

    async def _save(self, obj: Base) -> None:
        self.db.add(obj)
        await self.db.commit()
