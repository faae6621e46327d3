"""Employee service layer with business logic."""

from typing import Callable, List, Optional
from uuid import UUID

import structlog

from core.exceptions import (
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    InvalidUuidError,
    OperationNotAllowedError,
    UniqueConstraintError,
)
from domain.entities.employee import Employee, EmployeeStatus
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.membership import normalize_key
from domain.services.validation import require_text

logger = structlog.get_logger()


class EmployeeService:
    """Service layer for employee management."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> List[Employee]:
        """Get all employees."""
        async with self._uow_factory() as uow:
            return await uow.employees.list_all()

    async def get_by_id(self, employee_id: Optional[UUID]) -> Employee:
        """Get an employee by ID."""
        async with self._uow_factory() as uow:
            return await self._load_employee(uow, employee_id)

    async def create(
        self,
        full_name: Optional[str],
        document_type: Optional[str],
        document_number: Optional[str],
        email: Optional[str],
        status: Optional[EmployeeStatus] = None,
    ) -> Employee:
        """Create an employee. Emails are unique ignoring case."""
        clean_name = require_text(full_name)
        clean_document_type = require_text(document_type)
        clean_document_number = require_text(document_number)
        clean_email = require_text(email)

        async with self._uow_factory() as uow:
            if await uow.employees.exists_by_email(clean_email):
                logger.warning("employee_email_taken", email=clean_email)
                raise EmployeeAlreadyExistsError(clean_email)

            employee = Employee(
                full_name=clean_name,
                document_type=clean_document_type,
                document_number=clean_document_number,
                email=clean_email,
                status=status or EmployeeStatus.ACTIVE,
            )

            try:
                created = await uow.employees.create(employee)
                await uow.commit()
            except UniqueConstraintError as exc:
                raise _translate_write_conflict(exc, clean_email) from exc

            logger.info("employee_created", employee_id=str(created.id))
            return created

    async def update(
        self,
        employee_id: Optional[UUID],
        full_name: Optional[str] = None,
        document_type: Optional[str] = None,
        document_number: Optional[str] = None,
        email: Optional[str] = None,
        status: Optional[EmployeeStatus] = None,
    ) -> Employee:
        """Partially update an employee. A changed email is re-checked."""
        async with self._uow_factory() as uow:
            employee = await self._load_employee(uow, employee_id)

            if email is not None:
                clean_email = require_text(email)
                if normalize_key(clean_email) != normalize_key(employee.email):
                    if await uow.employees.exists_by_email(clean_email):
                        logger.warning(
                            "employee_email_taken",
                            employee_id=str(employee.id),
                            email=clean_email,
                        )
                        raise EmployeeAlreadyExistsError(clean_email)
                employee.email = clean_email

            if full_name is not None:
                employee.full_name = require_text(full_name)
            if document_type is not None:
                employee.document_type = require_text(document_type)
            if document_number is not None:
                employee.document_number = require_text(document_number)
            if status is not None:
                employee.status = status

            try:
                updated = await uow.employees.update(employee)
                await uow.commit()
            except UniqueConstraintError as exc:
                raise _translate_write_conflict(exc, employee.email) from exc

            return updated

    async def delete(self, employee_id: Optional[UUID]) -> None:
        """Delete an employee. Group memberships go with it."""
        async with self._uow_factory() as uow:
            employee = await self._load_employee(uow, employee_id)

            await uow.employees.delete(employee.id)
            await uow.commit()

            logger.info("employee_deleted", employee_id=str(employee.id))

    # --- Internal helpers ---

    async def _load_employee(
        self, uow: IUnitOfWork, employee_id: Optional[UUID]
    ) -> Employee:
        if employee_id is None:
            raise InvalidUuidError("null")

        employee = await uow.employees.get(employee_id)
        if not employee:
            raise EmployeeNotFoundError(str(employee_id))
        return employee


def _translate_write_conflict(
    exc: UniqueConstraintError, email: str
) -> EmployeeAlreadyExistsError | OperationNotAllowedError:
    if exc.involves("email_key"):
        return EmployeeAlreadyExistsError(email)
    return OperationNotAllowedError("conflicting write")
