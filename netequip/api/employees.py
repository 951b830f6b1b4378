"""Employee API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from netequip.models.base import get_db
from netequip.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from netequip.services.employee import EmployeeService

router = APIRouter()


def get_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(service: EmployeeService = Depends(get_service)):
    """List all employees."""
    return await service.list_all()


@router.get("/search", response_model=list[EmployeeResponse])
async def search_by_name(name: str, service: EmployeeService = Depends(get_service)):
    """Case-insensitive substring search on full name."""
    return await service.search_by_name(name)


@router.get("/count", response_model=int)
async def count_employees(service: EmployeeService = Depends(get_service)):
    return await service.count()


@router.get("/exists/email", response_model=bool)
async def exists_by_email(email: str, service: EmployeeService = Depends(get_service)):
    return await service.exists_by_email(email)


@router.get("/by-email/{email}", response_model=EmployeeResponse)
async def get_by_email(email: str, service: EmployeeService = Depends(get_service)):
    return await service.by_email(email)


@router.get("/position/{position}", response_model=list[EmployeeResponse])
async def list_by_position(position: str, service: EmployeeService = Depends(get_service)):
    return await service.by_position(position)


@router.get("/position/{position}/sorted", response_model=list[EmployeeResponse])
async def list_by_position_sorted(position: str, service: EmployeeService = Depends(get_service)):
    """List employees in a position ordered by full name."""
    return await service.by_position_sorted(position)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: int, service: EmployeeService = Depends(get_service)):
    """Get a specific employee by ID."""
    return await service.get(employee_id)


@router.post("", response_model=EmployeeResponse, status_code=201)
async def create_employee(employee_data: EmployeeCreate, service: EmployeeService = Depends(get_service)):
    """Create a new employee."""
    return await service.create(employee_data)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    employee_data: EmployeeUpdate,
    service: EmployeeService = Depends(get_service),
):
    """Update an employee."""
    return await service.update(employee_id, employee_data)


@router.delete("/{employee_id}", status_code=204)
async def delete_employee(employee_id: int, service: EmployeeService = Depends(get_service)):
    """Delete an employee and detach them from equipment and maintenance records."""
    await service.delete(employee_id)
