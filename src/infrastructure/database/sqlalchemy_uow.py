"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import DatabaseError
from infrastructure.database.errors import translate_integrity_errors
from infrastructure.database.repositories.sqlalchemy_employee_repo import (
    SQLAlchemyEmployeeRepository,
)
from infrastructure.database.repositories.sqlalchemy_group_repo import SQLAlchemyGroupRepository

logger = structlog.get_logger()


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    Constraint violations on flush or commit surface as
    ``UniqueConstraintError``; any other SQLAlchemy failure leaving the
    context is rolled back and re-raised as ``DatabaseError``.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    @property
    def groups(self) -> SQLAlchemyGroupRepository:
        """Get group repository."""
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return SQLAlchemyGroupRepository(self._session)

    @property
    def employees(self) -> SQLAlchemyEmployeeRepository:
        """Get employee repository."""
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return SQLAlchemyEmployeeRepository(self._session)

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            with translate_integrity_errors():
                await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            try:
                if exc_type:
                    await self.rollback()
            finally:
                await self._session.close()
                self._session = None

        if isinstance(exc_val, SQLAlchemyError):
            logger.error(
                "database_error",
                error=str(exc_val),
                error_type=type(exc_val).__name__,
            )
            raise DatabaseError() from exc_val
