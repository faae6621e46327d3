"""Employee domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4


class EmployeeStatus(str, Enum):
    """Eligibility status of an employee."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


@dataclass
class Employee:
    """Domain entity for an employee."""

    full_name: str
    document_type: str
    document_number: str
    email: str
    id: UUID = field(default_factory=uuid4)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    version: int = 1

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
