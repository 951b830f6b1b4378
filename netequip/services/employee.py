"""Employee operations."""

import logging

from sqlalchemy import select, update

from netequip.core.errors import DuplicateEmployeeEmail, EmployeeNotFound, NotFoundError
from netequip.models.employee import Employee
from netequip.models.equipment import Equipment
from netequip.models.maintenance import MaintenanceHistory
from netequip.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from netequip.services.base import BaseService

logger = logging.getLogger(__name__)


class EmployeeService(BaseService):
    """CRUD and lookups for employees."""

    def to_response(self, employee: Employee) -> EmployeeResponse:
        return EmployeeResponse.model_validate(employee)

    async def create(self, data: EmployeeCreate) -> EmployeeResponse:
        if data.email and await self.exists_by_email(data.email):
            logger.warning(f"Duplicate employee email: {data.email}")
            raise DuplicateEmployeeEmail(data.email)

        employee = Employee(**data.model_dump())
        await self._save(employee)
        logger.info(f"Created employee {employee.id} ({employee.full_name})")
        return self.to_response(employee)

    async def get(self, employee_id: int) -> EmployeeResponse:
        return self.to_response(await self._require(Employee, employee_id, EmployeeNotFound))

    async def list_all(self) -> list[EmployeeResponse]:
        employees = await self._all(select(Employee).order_by(Employee.id))
        return [self.to_response(e) for e in employees]

    async def update(self, employee_id: int, data: EmployeeUpdate) -> EmployeeResponse:
        employee = await self._require(Employee, employee_id, EmployeeNotFound)

        if data.email and data.email != employee.email and await self.exists_by_email(data.email):
            logger.warning(f"Duplicate employee email on update: {data.email}")
            raise DuplicateEmployeeEmail(data.email)

        for field, value in data.model_dump().items():
            setattr(employee, field, value)

        await self._save(employee)
        return self.to_response(employee)

    async def delete(self, employee_id: int) -> None:
        """Delete an employee, detaching them from equipment and maintenance records."""
        employee = await self._require(Employee, employee_id, EmployeeNotFound)

        await self.db.execute(
            update(Equipment).where(Equipment.employee_id == employee_id).values(employee_id=None)
        )
        await self.db.execute(
            update(MaintenanceHistory)
            .where(MaintenanceHistory.performed_by_id == employee_id)
            .values(performed_by_id=None)
        )
        await self.db.delete(employee)
        await self.db.commit()
        logger.info(f"Deleted employee {employee_id}")

    async def search_by_name(self, name: str) -> list[EmployeeResponse]:
        query = select(Employee).where(Employee.full_name.icontains(name, autoescape=True))
        return [self.to_response(e) for e in await self._all(query)]

    async def by_email(self, email: str) -> EmployeeResponse:
        employee = await self._first(select(Employee).where(Employee.email == email))
        if employee is None:
            raise NotFoundError(f"Employee with email '{email}' not found")
        return self.to_response(employee)

    async def by_position(self, position: str) -> list[EmployeeResponse]:
        query = select(Employee).where(Employee.position == position)
        return [self.to_response(e) for e in await self._all(query)]

    async def by_position_sorted(self, position: str) -> list[EmployeeResponse]:
        query = (
            select(Employee)
            .where(Employee.position == position)
            .order_by(Employee.full_name.asc())
        )
        return [self.to_response(e) for e in await self._all(query)]

    async def exists_by_email(self, email: str) -> bool:
        return await self._count(Employee, Employee.email == email) > 0

    async def count(self) -> int:
        return await self._count(Employee)
