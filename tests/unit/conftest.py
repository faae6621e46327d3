"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.employee import Employee, EmployeeStatus
from domain.entities.group import Group


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.groups = AsyncMock()
        self.employees = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type:
            await self.rollback()


def make_employee(
    email: str = "jane@infragest.test",
    status: EmployeeStatus = EmployeeStatus.ACTIVE,
    full_name: str = "Jane Doe",
) -> Employee:
    """Build an employee with sensible defaults."""
    return Employee(
        full_name=full_name,
        document_type="CC",
        document_number="1020304050",
        email=email,
        status=status,
    )


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def active_employee() -> Employee:
    return make_employee("active@infragest.test")


@pytest.fixture
def inactive_employee() -> Employee:
    return make_employee("inactive@infragest.test", status=EmployeeStatus.INACTIVE)


@pytest.fixture
def group() -> Group:
    return Group(name="Field Ops", address="Calle 10 #20-30")
