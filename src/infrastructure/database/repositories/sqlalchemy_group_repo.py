"""SQLAlchemy implementation of Group repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Select, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.group import Group
from domain.services.membership import normalize_key
from infrastructure.database.errors import ensure_version, translate_integrity_errors
from infrastructure.database.models import GroupEmployeeModel, GroupModel
from infrastructure.database.repositories.sqlalchemy_employee_repo import (
    SQLAlchemyEmployeeRepository,
)


class SQLAlchemyGroupRepository:
    """SQLAlchemy implementation of IGroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Group | None:
        """Get a group by ID with its members."""
        stmt = self._select_with_members().where(GroupModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Group]:
        """Get all groups ordered by creation time."""
        stmt = self._select_with_members().order_by(GroupModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def exists_by_name(self, name: str) -> bool:
        """Check for a group name, ignoring case."""
        stmt = select(exists().where(GroupModel.name_key == normalize_key(name)))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def create(self, group: Group) -> Group:
        """Create a new group."""
        model = self._to_model(group)
        self._session.add(model)
        with translate_integrity_errors():
            await self._session.flush()
        return await self._reload(model.id)

    async def save(self, group: Group) -> Group:
        """Update attributes and synchronize membership rows."""
        stmt = self._select_with_members().where(GroupModel.id == group.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Group {group.id} not found")

        with translate_integrity_errors():
            ensure_version(model.version, group.version, group.id)

        model.name = group.name
        model.name_key = normalize_key(group.name)
        model.address = group.address
        model.updated_at = datetime.utcnow()

        wanted = [employee.id for employee in group.employees]
        current = {membership.employee_id for membership in model.memberships}

        for membership in list(model.memberships):
            if membership.employee_id not in wanted:
                model.memberships.remove(membership)

        for employee_id in wanted:
            if employee_id not in current:
                model.memberships.append(
                    GroupEmployeeModel(group_id=model.id, employee_id=employee_id)
                )

        with translate_integrity_errors():
            await self._session.flush()
        return await self._reload(model.id)

    async def delete(self, id: UUID) -> bool:
        """Delete a group (cascade deletes membership rows)."""
        stmt = select(GroupModel).where(GroupModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        with translate_integrity_errors():
            await self._session.flush()
        return True

    async def _reload(self, id: UUID) -> Group:
        """Re-read a group after a flush so members are fully materialized."""
        stmt = (
            self._select_with_members()
            .where(GroupModel.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return self._to_entity(result.scalar_one())

    @staticmethod
    def _select_with_members() -> Select[tuple[GroupModel]]:
        return select(GroupModel).options(
            selectinload(GroupModel.memberships).selectinload(GroupEmployeeModel.employee)
        )

    def _to_entity(self, model: GroupModel) -> Group:
        """Convert ORM model to domain entity."""
        return Group(
            id=model.id,
            name=model.name,
            address=model.address,
            employees=[
                SQLAlchemyEmployeeRepository.to_entity(membership.employee)
                for membership in model.memberships
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )

    def _to_model(self, entity: Group) -> GroupModel:
        """Convert domain entity to ORM model."""
        return GroupModel(
            id=entity.id,
            name=entity.name,
            name_key=normalize_key(entity.name),
            address=entity.address,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            memberships=[
                GroupEmployeeModel(group_id=entity.id, employee_id=employee.id)
                for employee in entity.employees
            ],
        )
