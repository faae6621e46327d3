"""Employee API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import get_current_user
from api.v1.dependencies import get_employee_service
from api.v1.schemas.common import ERROR_RESPONSES
from api.v1.schemas.employee import (
    EmployeeCreate,
    EmployeeDetailResponse,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.employee_service import EmployeeService

router = APIRouter(
    prefix="/employees",
    tags=["employees"],
    dependencies=[Depends(get_current_user)],
    responses=ERROR_RESPONSES,
)


@router.get("", response_model=EmployeeListResponse, summary="List employees")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_employees(
    request: Request,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeListResponse:
    """Get all employees."""
    employees = await service.list_all()
    data = [EmployeeResponse.model_validate(e) for e in employees]
    return EmployeeListResponse(data=data, meta={"total": len(data)})


@router.post(
    "",
    response_model=EmployeeDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
    responses={400: {"description": "Email already in use"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_employee(
    request: Request,
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeDetailResponse:
    """Create an employee. Status defaults to ACTIVE."""
    employee = await service.create(
        full_name=body.full_name,
        document_type=body.document_type,
        document_number=body.document_number,
        email=body.email,
        status=body.status,
    )
    return EmployeeDetailResponse(data=EmployeeResponse.model_validate(employee))


@router.get(
    "/{employee_id}",
    response_model=EmployeeDetailResponse,
    summary="Get an employee",
    responses={404: {"description": "Employee not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_employee(
    request: Request,
    employee_id: UUID,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeDetailResponse:
    employee = await service.get_by_id(employee_id)
    return EmployeeDetailResponse(data=EmployeeResponse.model_validate(employee))


@router.put(
    "/{employee_id}",
    response_model=EmployeeDetailResponse,
    summary="Update an employee",
    responses={
        400: {"description": "Email already in use"},
        404: {"description": "Employee not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_employee(
    request: Request,
    employee_id: UUID,
    body: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeDetailResponse:
    """Update an employee. Omitted fields are kept."""
    employee = await service.update(
        employee_id,
        full_name=body.full_name,
        document_type=body.document_type,
        document_number=body.document_number,
        email=body.email,
        status=body.status,
    )
    return EmployeeDetailResponse(data=EmployeeResponse.model_validate(employee))


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an employee",
    responses={
        204: {"description": "Employee deleted"},
        404: {"description": "Employee not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_employee(
    request: Request,
    employee_id: UUID,
    service: EmployeeService = Depends(get_employee_service),
) -> None:
    """Delete an employee and drop it from every group."""
    await service.delete(employee_id)
    return None
