"""Unit of Work protocol."""

from typing import Any, Protocol

from domain.repositories.employee_repository import IEmployeeRepository
from domain.repositories.group_repository import IGroupRepository


class IUnitOfWork(Protocol):
    """One transaction spanning the group and employee stores.

    Writes become visible only after ``commit``. Leaving the context with an
    exception rolls everything back. Implementations raise
    ``UniqueConstraintError`` when the store rejects a write on a uniqueness
    constraint, and ``DatabaseError`` for any other store failure.
    """

    @property
    def groups(self) -> IGroupRepository: ...

    @property
    def employees(self) -> IEmployeeRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "IUnitOfWork": ...

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...
