"""Pydantic schemas for Group API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.employee import EmployeeSummary


class GroupCreate(BaseModel):
    """Schema for creating a group."""

    name: str = Field(..., min_length=1, max_length=100)
    address: str = Field(..., min_length=1, max_length=255)


class GroupUpdate(BaseModel):
    """Schema for updating a group. Omitted fields are left unchanged."""

    name: str | None = Field(None, max_length=100)
    address: str | None = Field(None, max_length=255)


class AssignEmployeesRequest(BaseModel):
    """Schema for assigning employees to a group."""

    # Null entries are tolerated and discarded by the service
    employee_ids: list[UUID | None] = Field(..., min_length=1)


class GroupResponse(BaseModel):
    """Schema for Group response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    address: str
    created_at: datetime
    updated_at: datetime
    version: int
    employees: list[EmployeeSummary] = Field(default_factory=list)


class GroupListResponse(BaseModel):
    """Schema for list of Groups response."""

    data: list[GroupResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class GroupDetailResponse(BaseModel):
    """Schema for single Group response."""

    data: GroupResponse


class GroupMemberEmailsResponse(BaseModel):
    """Schema for the distinct member emails of a group."""

    data: list[str]
    meta: dict[str, Any] = Field(default_factory=dict)
