"""Group domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.employee import Employee


@dataclass
class Group:
    """Domain entity for a group with its materialized membership.

    ``employees`` is always fully loaded by the repository and holds each
    employee at most once.
    """

    name: str
    address: str
    id: UUID = field(default_factory=uuid4)
    employees: list[Employee] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    version: int = 1

    @property
    def member_ids(self) -> set[UUID]:
        return {employee.id for employee in self.employees}

    def has_member(self, employee_id: UUID) -> bool:
        return employee_id in self.member_ids
