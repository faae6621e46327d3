"""Group service layer with business logic."""

from typing import Any, Callable, Iterable, List, NoReturn, Optional
from uuid import UUID

import structlog

from core.exceptions import (
    AppException,
    EmployeeAlreadyInGroupError,
    EmployeeNotActiveError,
    EmployeeNotFoundError,
    EmployeeNotInGroupError,
    GroupAlreadyExistsError,
    GroupDeleteNotAllowedError,
    GroupNotFoundError,
    InvalidEmployeeListError,
    InvalidUuidError,
    OperationNotAllowedError,
    UniqueConstraintError,
)
from domain.entities.group import Group
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import membership
from domain.services.membership import ErrorKind, MembershipViolation, ViolationCode
from domain.services.validation import require_text

logger = structlog.get_logger()


class GroupService:
    """Service layer for groups and their employee membership."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> List[Group]:
        """Get all groups with their members."""
        async with self._uow_factory() as uow:
            return await uow.groups.list_all()

    async def get_by_id(self, group_id: Optional[UUID]) -> Group:
        """Get a group by ID."""
        async with self._uow_factory() as uow:
            return await self._load_group(uow, group_id)

    async def create(self, name: Optional[str], address: Optional[str]) -> Group:
        """Create an empty group. Names are unique ignoring case."""
        clean_name = require_text(name)
        clean_address = require_text(address)

        async with self._uow_factory() as uow:
            if await uow.groups.exists_by_name(clean_name):
                logger.warning("group_name_taken", name=clean_name)
                raise GroupAlreadyExistsError(clean_name)

            try:
                created = await uow.groups.create(
                    Group(name=clean_name, address=clean_address)
                )
                await uow.commit()
            except UniqueConstraintError as exc:
                raise _translate_write_conflict(exc, clean_name) from exc

            logger.info("group_created", group_id=str(created.id), name=created.name)
            return created

    async def update(
        self,
        group_id: Optional[UUID],
        name: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Group:
        """Partially update a group. Omitted fields are left unchanged."""
        async with self._uow_factory() as uow:
            group = await self._load_group(uow, group_id)

            if name is not None:
                clean_name = require_text(name)
                if membership.normalize_key(clean_name) != membership.normalize_key(group.name):
                    if await uow.groups.exists_by_name(clean_name):
                        logger.warning("group_name_taken", name=clean_name)
                        raise GroupAlreadyExistsError(clean_name)
                group.name = clean_name

            if address is not None:
                clean_address = require_text(address)
                if clean_address != group.address:
                    group.address = clean_address

            try:
                updated = await uow.groups.save(group)
                await uow.commit()
            except UniqueConstraintError as exc:
                raise _translate_write_conflict(exc, group.name) from exc

            return updated

    async def delete(self, group_id: Optional[UUID]) -> None:
        """Delete a group. Only allowed once it has no members."""
        async with self._uow_factory() as uow:
            group = await self._load_group(uow, group_id)

            violation = membership.validate_deletable(group)
            if violation:
                logger.warning(
                    "group_delete_blocked",
                    group_id=str(group.id),
                    member_count=len(group.employees),
                )
                _raise_violation(violation)

            try:
                await uow.groups.delete(group.id)
                await uow.commit()
            except UniqueConstraintError as exc:
                raise OperationNotAllowedError("group membership changed concurrently") from exc

            logger.info("group_deleted", group_id=str(group.id))

    async def assign_employees(
        self,
        group_id: Optional[UUID],
        employee_ids: Optional[Iterable[Any]],
    ) -> Group:
        """Assign a batch of employees to a group, all or nothing."""
        async with self._uow_factory() as uow:
            group = await self._load_group(uow, group_id)

            requested = membership.normalize_employee_ids(employee_ids)
            resolved = await uow.employees.get_many(requested) if requested else []

            outcome = membership.assign_employees(group, requested, resolved)
            if outcome.violation:
                _raise_violation(outcome.violation)

            group.employees = list(outcome.members)
            try:
                saved = await uow.groups.save(group)
                await uow.commit()
            except UniqueConstraintError as exc:
                raise OperationNotAllowedError("group membership changed concurrently") from exc

            logger.info(
                "employees_assigned",
                group_id=str(group.id),
                employee_count=len(requested),
            )
            return saved

    async def remove_employee(
        self,
        group_id: Optional[UUID],
        employee_id: Optional[UUID],
    ) -> None:
        """Remove one employee from a group."""
        if employee_id is None:
            raise InvalidUuidError("null")

        async with self._uow_factory() as uow:
            group = await self._load_group(uow, group_id)
            employee = await uow.employees.get(employee_id)

            outcome = membership.remove_employee(group, employee_id, employee)
            if outcome.violation:
                _raise_violation(outcome.violation)

            group.employees = list(outcome.members)
            try:
                await uow.groups.save(group)
                await uow.commit()
            except UniqueConstraintError as exc:
                raise OperationNotAllowedError("group membership changed concurrently") from exc

            logger.info(
                "employee_removed",
                group_id=str(group.id),
                employee_id=str(employee_id),
            )

    async def get_member_emails(self, group_id: Optional[UUID]) -> List[str]:
        """Distinct non-blank emails of the group's members."""
        async with self._uow_factory() as uow:
            group = await self._load_group(uow, group_id)
            return membership.collect_member_emails(group)

    # --- Internal helpers ---

    async def _load_group(self, uow: IUnitOfWork, group_id: Optional[UUID]) -> Group:
        """Load a group snapshot with members or raise."""
        if group_id is None:
            raise InvalidUuidError("null")

        group = await uow.groups.get(group_id)
        if not group:
            raise GroupNotFoundError(str(group_id))
        return group

def _translate_write_conflict(exc: UniqueConstraintError, name: str) -> AppException:
    """Map a store-level unique violation to the matching business error."""
    if exc.involves("name_key"):
        return GroupAlreadyExistsError(name)
    return OperationNotAllowedError("conflicting write")


def _raise_violation(violation: MembershipViolation) -> NoReturn:
    """Raise the API error matching a membership rule violation."""
    subject = str(violation.subject_id) if violation.subject_id else ""

    if violation.code == ViolationCode.INVALID_EMPLOYEE_LIST:
        raise InvalidEmployeeListError()
    if violation.code == ViolationCode.EMPLOYEE_NOT_FOUND:
        raise EmployeeNotFoundError(
            subject,
            status_code=404 if violation.kind == ErrorKind.NOT_FOUND else 400,
            missing_ids=violation.details.get("missing_ids"),
        )
    if violation.code == ViolationCode.EMPLOYEE_NOT_ACTIVE:
        raise EmployeeNotActiveError(subject)
    if violation.code == ViolationCode.EMPLOYEE_ALREADY_IN_GROUP:
        raise EmployeeAlreadyInGroupError(subject)
    if violation.code == ViolationCode.EMPLOYEE_NOT_IN_GROUP:
        raise EmployeeNotInGroupError(subject)
    if violation.code == ViolationCode.GROUP_DELETE_NOT_ALLOWED:
        raise GroupDeleteNotAllowedError(subject)
    raise OperationNotAllowedError(violation.code.value)
