"""Employee repository protocol."""

from typing import Iterable, Protocol
from uuid import UUID

from domain.entities.employee import Employee


class IEmployeeRepository(Protocol):
    """Repository interface for Employee entities."""

    async def get(self, id: UUID) -> Employee | None:
        """Get an employee by ID."""
        ...

    async def get_many(self, ids: Iterable[UUID]) -> list[Employee]:
        """Get all employees whose ID is in ``ids`` with a single query."""
        ...

    async def list_all(self) -> list[Employee]:
        """Get all employees."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check for an email, ignoring case and surrounding whitespace."""
        ...

    async def create(self, employee: Employee) -> Employee:
        """Create a new employee."""
        ...

    async def update(self, employee: Employee) -> Employee:
        """Update an existing employee."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an employee and its group memberships."""
        ...
