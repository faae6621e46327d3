"""SQLAlchemy implementation of Employee repository."""

from typing import Iterable
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.employee import Employee, EmployeeStatus
from domain.services.membership import normalize_key
from infrastructure.database.errors import ensure_version, translate_integrity_errors
from infrastructure.database.models import EmployeeModel, GroupEmployeeModel


class SQLAlchemyEmployeeRepository:
    """SQLAlchemy implementation of IEmployeeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Employee | None:
        """Get an employee by ID."""
        stmt = select(EmployeeModel).where(EmployeeModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.to_entity(model) if model else None

    async def get_many(self, ids: Iterable[UUID]) -> list[Employee]:
        """Get every employee in ``ids`` with one query. Unknown ids are skipped."""
        id_list = list(ids)
        if not id_list:
            return []
        stmt = select(EmployeeModel).where(EmployeeModel.id.in_(id_list))
        result = await self._session.execute(stmt)
        return [self.to_entity(model) for model in result.scalars()]

    async def list_all(self) -> list[Employee]:
        """Get all employees ordered by name."""
        stmt = select(EmployeeModel).order_by(EmployeeModel.full_name, EmployeeModel.created_at)
        result = await self._session.execute(stmt)
        return [self.to_entity(model) for model in result.scalars()]

    async def exists_by_email(self, email: str) -> bool:
        """Check for an email, ignoring case."""
        stmt = select(exists().where(EmployeeModel.email_key == normalize_key(email)))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def create(self, employee: Employee) -> Employee:
        """Create a new employee."""
        model = self._to_model(employee)
        self._session.add(model)
        with translate_integrity_errors():
            await self._session.flush()
        await self._session.refresh(model)
        return self.to_entity(model)

    async def update(self, employee: Employee) -> Employee:
        """Update an existing employee."""
        stmt = select(EmployeeModel).where(EmployeeModel.id == employee.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Employee {employee.id} not found")

        with translate_integrity_errors():
            ensure_version(model.version, employee.version, employee.id)

        model.full_name = employee.full_name
        model.document_type = employee.document_type
        model.document_number = employee.document_number
        model.email = employee.email
        model.email_key = normalize_key(employee.email)
        model.status = employee.status.value

        with translate_integrity_errors():
            await self._session.flush()
        await self._session.refresh(model)
        return self.to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete an employee and its membership rows."""
        stmt = select(EmployeeModel).where(EmployeeModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.execute(
            delete(GroupEmployeeModel).where(GroupEmployeeModel.employee_id == id)
        )
        await self._session.delete(model)
        with translate_integrity_errors():
            await self._session.flush()
        return True

    @staticmethod
    def to_entity(model: EmployeeModel) -> Employee:
        """Convert ORM model to domain entity."""
        return Employee(
            id=model.id,
            full_name=model.full_name,
            document_type=model.document_type,
            document_number=model.document_number,
            email=model.email,
            status=EmployeeStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )

    def _to_model(self, entity: Employee) -> EmployeeModel:
        """Convert domain entity to ORM model."""
        return EmployeeModel(
            id=entity.id,
            full_name=entity.full_name,
            document_type=entity.document_type,
            document_number=entity.document_number,
            email=entity.email,
            email_key=normalize_key(entity.email),
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
