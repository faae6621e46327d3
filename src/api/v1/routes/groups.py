"""Group API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import get_current_user
from api.v1.dependencies import get_group_service
from api.v1.schemas.common import ERROR_RESPONSES
from api.v1.schemas.group import (
    AssignEmployeesRequest,
    GroupCreate,
    GroupDetailResponse,
    GroupListResponse,
    GroupMemberEmailsResponse,
    GroupResponse,
    GroupUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.group import Group
from domain.services.group_service import GroupService

router = APIRouter(
    prefix="/groups",
    tags=["groups"],
    dependencies=[Depends(get_current_user)],
    responses=ERROR_RESPONSES,
)


@router.get(
    "",
    response_model=GroupListResponse,
    summary="List groups",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_groups(
    request: Request,
    service: GroupService = Depends(get_group_service),
) -> GroupListResponse:
    """Get all groups with their members."""
    groups = await service.list_all()
    data = [_build_group_response(g) for g in groups]
    return GroupListResponse(data=data, meta={"total": len(data)})


@router.post(
    "",
    response_model=GroupDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a group",
    responses={
        201: {"description": "Group created"},
        400: {"description": "Blank field or duplicate name"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_group(
    request: Request,
    body: GroupCreate,
    service: GroupService = Depends(get_group_service),
) -> GroupDetailResponse:
    """Create an empty group. Names are unique ignoring case."""
    group = await service.create(name=body.name, address=body.address)
    return GroupDetailResponse(data=_build_group_response(group))


@router.get(
    "/{group_id}",
    response_model=GroupDetailResponse,
    summary="Get a group",
    responses={404: {"description": "Group not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_group(
    request: Request,
    group_id: UUID,
    service: GroupService = Depends(get_group_service),
) -> GroupDetailResponse:
    """Get a group and its members."""
    group = await service.get_by_id(group_id)
    return GroupDetailResponse(data=_build_group_response(group))


@router.put(
    "/{group_id}",
    response_model=GroupDetailResponse,
    summary="Update a group",
    responses={
        400: {"description": "Blank field or duplicate name"},
        404: {"description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_group(
    request: Request,
    group_id: UUID,
    body: GroupUpdate,
    service: GroupService = Depends(get_group_service),
) -> GroupDetailResponse:
    """Update name and/or address. Omitted fields are kept."""
    group = await service.update(
        group_id=group_id,
        name=body.name,
        address=body.address,
    )
    return GroupDetailResponse(data=_build_group_response(group))


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a group",
    responses={
        204: {"description": "Group deleted"},
        400: {"description": "Group still has employees"},
        404: {"description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_group(
    request: Request,
    group_id: UUID,
    service: GroupService = Depends(get_group_service),
) -> None:
    """Delete a group. Not allowed while it has employees."""
    await service.delete(group_id)
    return None


# --- Group Membership ---


@router.post(
    "/{group_id}/employees",
    response_model=GroupDetailResponse,
    summary="Assign employees to a group",
    responses={
        400: {
            "description": (
                "Invalid list, unknown employee, inactive employee "
                "or employee already in group"
            )
        },
        404: {"description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def assign_employees(
    request: Request,
    group_id: UUID,
    body: AssignEmployeesRequest,
    service: GroupService = Depends(get_group_service),
) -> GroupDetailResponse:
    """Assign employees to a group. Either all are assigned or none."""
    group = await service.assign_employees(group_id, body.employee_ids)
    return GroupDetailResponse(data=_build_group_response(group))


@router.delete(
    "/{group_id}/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an employee from a group",
    responses={
        204: {"description": "Employee removed from group"},
        400: {"description": "Unknown employee or employee not in group"},
        404: {"description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_employee(
    request: Request,
    group_id: UUID,
    employee_id: UUID,
    service: GroupService = Depends(get_group_service),
) -> None:
    """Remove one employee from a group."""
    await service.remove_employee(group_id, employee_id)
    return None


@router.get(
    "/{group_id}/members/emails",
    response_model=GroupMemberEmailsResponse,
    summary="List member emails",
    responses={404: {"description": "Group not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_member_emails(
    request: Request,
    group_id: UUID,
    service: GroupService = Depends(get_group_service),
) -> GroupMemberEmailsResponse:
    """Distinct, non-blank emails of the group's employees."""
    emails = await service.get_member_emails(group_id)
    return GroupMemberEmailsResponse(data=emails, meta={"total": len(emails)})


def _build_group_response(group: Group) -> GroupResponse:
    """Convert domain entity to response schema."""
    return GroupResponse.model_validate(group)
