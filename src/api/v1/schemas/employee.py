"""Pydantic schemas for Employee API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from domain.entities.employee import EmployeeStatus


class EmployeeCreate(BaseModel):
    """Schema for creating an employee."""

    full_name: str = Field(..., min_length=1, max_length=200)
    document_type: str = Field(..., min_length=1, max_length=50)
    document_number: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    status: EmployeeStatus | None = None


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee. Omitted fields are left unchanged."""

    full_name: str | None = Field(None, min_length=1, max_length=200)
    document_type: str | None = Field(None, min_length=1, max_length=50)
    document_number: str | None = Field(None, min_length=1, max_length=50)
    email: EmailStr | None = None
    status: EmployeeStatus | None = None


class EmployeeResponse(BaseModel):
    """Schema for Employee response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str
    document_type: str
    document_number: str
    email: str
    status: EmployeeStatus
    created_at: datetime
    updated_at: datetime
    version: int


class EmployeeSummary(BaseModel):
    """Compact employee view embedded in group responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str
    email: str
    status: EmployeeStatus


class EmployeeListResponse(BaseModel):
    """Schema for list of Employees response."""

    data: list[EmployeeResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class EmployeeDetailResponse(BaseModel):
    """Schema for single Employee response."""

    data: EmployeeResponse
