"""Group membership rules.

Stateless functions over fully loaded ``Group`` snapshots. Rule violations
are returned as tagged values instead of raised, so callers decide how to
surface them. None of these functions touch the store.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence
from uuid import UUID

from domain.entities.employee import Employee
from domain.entities.group import Group


class ErrorKind(str, Enum):
    """Classification of a rule violation."""

    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_SERVER = "INTERNAL_SERVER"


class ViolationCode(str, Enum):
    """Membership rule that was broken."""

    INVALID_EMPLOYEE_LIST = "INVALID_EMPLOYEE_LIST"
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    EMPLOYEE_NOT_ACTIVE = "EMPLOYEE_NOT_ACTIVE"
    EMPLOYEE_ALREADY_IN_GROUP = "EMPLOYEE_ALREADY_IN_GROUP"
    EMPLOYEE_NOT_IN_GROUP = "EMPLOYEE_NOT_IN_GROUP"
    GROUP_DELETE_NOT_ALLOWED = "GROUP_DELETE_NOT_ALLOWED"


@dataclass(frozen=True)
class MembershipViolation:
    """A single rule violation, tagged with its error kind."""

    code: ViolationCode
    kind: ErrorKind = ErrorKind.BAD_REQUEST
    subject_id: UUID | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MembershipOutcome:
    """Result of a membership operation: new members or a violation."""

    members: tuple[Employee, ...] = ()
    violation: MembershipViolation | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None

    @classmethod
    def success(cls, members: Iterable[Employee]) -> "MembershipOutcome":
        return cls(members=tuple(members))

    @classmethod
    def failure(cls, violation: MembershipViolation) -> "MembershipOutcome":
        return cls(violation=violation)


def normalize_key(value: str) -> str:
    """Canonical form used for case-insensitive uniqueness checks."""
    return value.strip().lower()


def normalize_employee_ids(raw_ids: Iterable[Any] | None) -> list[UUID]:
    """Drop null and malformed ids, de-duplicate, keep request order."""
    seen: set[UUID] = set()
    ids: list[UUID] = []
    for raw in raw_ids or ():
        if raw is None:
            continue
        if isinstance(raw, UUID):
            candidate = raw
        else:
            try:
                candidate = UUID(str(raw))
            except ValueError:
                continue
        if candidate not in seen:
            seen.add(candidate)
            ids.append(candidate)
    return ids


def assign_employees(
    group: Group,
    requested_ids: Iterable[Any] | None,
    resolved: Sequence[Employee],
) -> MembershipOutcome:
    """Attach employees to ``group`` or report the first violation.

    ``resolved`` is the result of one batch lookup for the requested ids.
    The check is all-or-nothing: on any violation the group is untouched.
    """
    ids = normalize_employee_ids(requested_ids)
    if not ids:
        return MembershipOutcome.failure(
            MembershipViolation(code=ViolationCode.INVALID_EMPLOYEE_LIST)
        )

    by_id = {employee.id: employee for employee in resolved}
    missing = [employee_id for employee_id in ids if employee_id not in by_id]
    if missing:
        return MembershipOutcome.failure(
            MembershipViolation(
                code=ViolationCode.EMPLOYEE_NOT_FOUND,
                subject_id=missing[0],
                details={"missing_ids": [str(m) for m in missing]},
            )
        )

    current = group.member_ids
    candidates = [by_id[employee_id] for employee_id in ids]
    for employee in candidates:
        if not employee.is_active:
            return MembershipOutcome.failure(
                MembershipViolation(
                    code=ViolationCode.EMPLOYEE_NOT_ACTIVE,
                    subject_id=employee.id,
                )
            )
        if employee.id in current:
            return MembershipOutcome.failure(
                MembershipViolation(
                    code=ViolationCode.EMPLOYEE_ALREADY_IN_GROUP,
                    subject_id=employee.id,
                )
            )

    return MembershipOutcome.success([*group.employees, *candidates])


def remove_employee(
    group: Group,
    employee_id: UUID,
    employee: Employee | None,
) -> MembershipOutcome:
    """Detach one employee from ``group``.

    A missing employee record is a bad request here, not a not-found: the
    group exists, the reference inside the request does not.
    """
    if employee is None:
        return MembershipOutcome.failure(
            MembershipViolation(
                code=ViolationCode.EMPLOYEE_NOT_FOUND,
                subject_id=employee_id,
            )
        )

    if not group.has_member(employee.id):
        return MembershipOutcome.failure(
            MembershipViolation(
                code=ViolationCode.EMPLOYEE_NOT_IN_GROUP,
                subject_id=employee.id,
            )
        )

    return MembershipOutcome.success(
        member for member in group.employees if member.id != employee.id
    )


def validate_deletable(group: Group) -> MembershipViolation | None:
    """Only groups without members may be deleted."""
    if group.employees:
        return MembershipViolation(
            code=ViolationCode.GROUP_DELETE_NOT_ALLOWED,
            subject_id=group.id,
            details={"member_count": len(group.employees)},
        )
    return None


def collect_member_emails(group: Group) -> list[str]:
    """Distinct, trimmed, non-blank member emails in sorted order."""
    emails: set[str] = set()
    for employee in group.employees:
        if employee.email is None:
            continue
        email = employee.email.strip()
        if email:
            emails.add(email)
    return sorted(emails)
