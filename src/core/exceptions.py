"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Not found errors (404)
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_UUID = "INVALID_UUID"
    INVALID_EMPLOYEE_LIST = "INVALID_EMPLOYEE_LIST"
    GROUP_ALREADY_EXISTS = "GROUP_ALREADY_EXISTS"
    GROUP_DELETE_NOT_ALLOWED = "GROUP_DELETE_NOT_ALLOWED"
    EMPLOYEE_ALREADY_EXISTS = "EMPLOYEE_ALREADY_EXISTS"
    EMPLOYEE_NOT_ACTIVE = "EMPLOYEE_NOT_ACTIVE"
    EMPLOYEE_ALREADY_IN_GROUP = "EMPLOYEE_ALREADY_IN_GROUP"
    EMPLOYEE_NOT_IN_GROUP = "EMPLOYEE_NOT_IN_GROUP"
    OPERATION_NOT_ALLOWED = "OPERATION_NOT_ALLOWED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


def error_body(error_code: str, message: str, details: Any | None = None) -> dict[str, Any]:
    """Build the JSON error envelope every failed request returns."""
    return {"error_code": error_code, "message": message, "details": details}


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return error_body(self.error_code.value, self.message, self.details)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class InvalidRequestError(AppException):
    """Request payload is missing required values."""

    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_REQUEST,
            message=message,
            status_code=400,
        )


class InvalidUuidError(AppException):
    """Identifier is absent or malformed."""

    def __init__(self, value: str = "null") -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_UUID,
            message=f"Invalid identifier: {value}",
            status_code=400,
            details={"value": value},
        )


class GroupNotFoundError(AppException):
    """Group not found."""

    def __init__(self, group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.GROUP_NOT_FOUND,
            message=f"Group not found: {group_id}",
            status_code=404,
            details={"group_id": group_id},
        )


class GroupAlreadyExistsError(AppException):
    """A group with the same name (case-insensitive) already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(
            error_code=ErrorCode.GROUP_ALREADY_EXISTS,
            message=f"Group already exists: {name}",
            status_code=400,
            details={"name": name},
        )


class GroupDeleteNotAllowedError(AppException):
    """Group still has members and cannot be deleted."""

    def __init__(self, group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.GROUP_DELETE_NOT_ALLOWED,
            message=f"Cannot delete group with assigned employees: {group_id}",
            status_code=400,
            details={"group_id": group_id},
        )


class EmployeeNotFoundError(AppException):
    """Employee not found.

    Direct employee lookups report 404. When the employee is only referenced
    by a group operation the caller passes ``status_code=400``.
    """

    def __init__(
        self,
        employee_id: str,
        status_code: int = 404,
        missing_ids: list[str] | None = None,
    ) -> None:
        details: dict[str, Any] = {"employee_id": employee_id}
        if missing_ids:
            details["missing_ids"] = missing_ids
        super().__init__(
            error_code=ErrorCode.EMPLOYEE_NOT_FOUND,
            message=f"Employee not found: {employee_id}",
            status_code=status_code,
            details=details,
        )


class EmployeeAlreadyExistsError(AppException):
    """An employee with the same email (case-insensitive) already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMPLOYEE_ALREADY_EXISTS,
            message=f"Employee already exists with email: {email}",
            status_code=400,
            details={"email": email},
        )


class EmployeeNotActiveError(AppException):
    """Employee is not active and cannot be assigned."""

    def __init__(self, employee_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMPLOYEE_NOT_ACTIVE,
            message=f"Employee {employee_id} is not active",
            status_code=400,
            details={"employee_id": employee_id},
        )


class EmployeeAlreadyInGroupError(AppException):
    """Employee is already a member of the group."""

    def __init__(self, employee_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMPLOYEE_ALREADY_IN_GROUP,
            message=f"Employee {employee_id} already belongs to the group",
            status_code=400,
            details={"employee_id": employee_id},
        )


class EmployeeNotInGroupError(AppException):
    """Employee is not a member of the group."""

    def __init__(self, employee_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMPLOYEE_NOT_IN_GROUP,
            message=f"Employee {employee_id} does not belong to the group",
            status_code=400,
            details={"employee_id": employee_id},
        )


class InvalidEmployeeListError(AppException):
    """Employee id list is empty after discarding invalid entries."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_EMPLOYEE_LIST,
            message="Invalid employee list",
            status_code=400,
        )


class OperationNotAllowedError(AppException):
    """A write conflicted with a concurrent change in the store."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.OPERATION_NOT_ALLOWED,
            message=f"Operation not allowed: {reason}",
            status_code=400,
            details={"reason": reason},
        )


class DatabaseError(AppException):
    """Underlying store failure unrelated to business rules."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=message,
            status_code=500,
        )


class UniqueConstraintError(Exception):
    """Store rejected a write because of an integrity constraint or a stale version.

    Raised by the persistence layer and translated by services into the
    matching business error; never rendered to clients directly.
    """

    def __init__(self, constraint: str) -> None:
        self.constraint = constraint
        super().__init__(constraint)

    def involves(self, column: str) -> bool:
        return column in self.constraint
