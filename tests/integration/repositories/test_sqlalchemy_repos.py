"""Integration tests for the SQLAlchemy repositories and unit of work."""

from dataclasses import replace
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import UniqueConstraintError
from domain.entities.employee import Employee, EmployeeStatus
from domain.entities.group import Group
from infrastructure.database.repositories.sqlalchemy_employee_repo import (
    SQLAlchemyEmployeeRepository,
)
from infrastructure.database.repositories.sqlalchemy_group_repo import SQLAlchemyGroupRepository
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def _employee(email: str, status: EmployeeStatus = EmployeeStatus.ACTIVE) -> Employee:
    return Employee(
        full_name="Test Employee",
        document_type="CC",
        document_number="998877",
        email=email,
        status=status,
    )


class TestEmployeeRepository:
    @pytest.mark.asyncio
    async def test_exists_by_email_ignores_case(self, db_session: AsyncSession):
        repo = SQLAlchemyEmployeeRepository(db_session)
        await repo.create(_employee("Ana@Infragest.test"))

        assert await repo.exists_by_email("ana@infragest.test")
        assert await repo.exists_by_email("  ANA@INFRAGEST.TEST ")
        assert not await repo.exists_by_email("other@infragest.test")

    @pytest.mark.asyncio
    async def test_duplicate_email_key_is_unique_violation(self, db_session: AsyncSession):
        repo = SQLAlchemyEmployeeRepository(db_session)
        await repo.create(_employee("ana@infragest.test"))

        with pytest.raises(UniqueConstraintError) as exc_info:
            await repo.create(_employee("ANA@infragest.test"))

        assert exc_info.value.involves("email_key")

    @pytest.mark.asyncio
    async def test_get_many_skips_unknown_ids(self, db_session: AsyncSession):
        repo = SQLAlchemyEmployeeRepository(db_session)
        a = await repo.create(_employee("a@infragest.test"))
        b = await repo.create(_employee("b@infragest.test"))

        found = await repo.get_many([a.id, uuid4(), b.id])

        assert {e.id for e in found} == {a.id, b.id}
        assert await repo.get_many([]) == []

    @pytest.mark.asyncio
    async def test_status_round_trips(self, db_session: AsyncSession):
        repo = SQLAlchemyEmployeeRepository(db_session)
        created = await repo.create(_employee("x@infragest.test", EmployeeStatus.INACTIVE))

        loaded = await repo.get(created.id)

        assert loaded is not None
        assert loaded.status == EmployeeStatus.INACTIVE
        assert not loaded.is_active

    @pytest.mark.asyncio
    async def test_update_from_stale_snapshot_is_rejected(self, db_session: AsyncSession):
        repo = SQLAlchemyEmployeeRepository(db_session)
        created = await repo.create(_employee("v@infragest.test"))
        assert created.version == 1

        updated = await repo.update(replace(created, full_name="First Edit"))
        assert updated.version == 2

        with pytest.raises(UniqueConstraintError) as exc_info:
            await repo.update(replace(created, full_name="Second Edit"))

        assert exc_info.value.involves("stale_version")
        loaded = await repo.get(created.id)
        assert loaded is not None
        assert loaded.full_name == "First Edit"

    @pytest.mark.asyncio
    async def test_delete_removes_memberships(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            employee = await uow.employees.create(_employee("m@infragest.test"))
            group = await uow.groups.create(Group(name="Ops", address="Calle 1"))
            group.employees = [employee]
            await uow.groups.save(group)
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.employees.delete(employee.id)
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            reloaded = await uow.groups.get(group.id)
            assert reloaded is not None
            assert reloaded.employees == []
            assert not await uow.employees.delete(employee.id)


class TestGroupRepository:
    @pytest.mark.asyncio
    async def test_exists_by_name_ignores_case(self, db_session: AsyncSession):
        repo = SQLAlchemyGroupRepository(db_session)
        await repo.create(Group(name="Field Ops", address="Calle 1"))

        assert await repo.exists_by_name("field ops")
        assert await repo.exists_by_name(" FIELD OPS ")
        assert not await repo.exists_by_name("Night Ops")

    @pytest.mark.asyncio
    async def test_duplicate_name_key_is_unique_violation(self, db_session: AsyncSession):
        repo = SQLAlchemyGroupRepository(db_session)
        await repo.create(Group(name="ACME", address="Calle 1"))

        with pytest.raises(UniqueConstraintError) as exc_info:
            await repo.create(Group(name="acme", address="Calle 2"))

        assert exc_info.value.involves("name_key")

    @pytest.mark.asyncio
    async def test_save_synchronizes_members(self, db_session: AsyncSession):
        employees = SQLAlchemyEmployeeRepository(db_session)
        groups = SQLAlchemyGroupRepository(db_session)
        a = await employees.create(_employee("a@infragest.test"))
        b = await employees.create(_employee("b@infragest.test"))
        group = await groups.create(Group(name="Ops", address="Calle 1"))

        group.employees = [a, b]
        saved = await groups.save(group)
        assert {e.id for e in saved.employees} == {a.id, b.id}

        saved.employees = [b]
        saved = await groups.save(saved)
        assert [e.id for e in saved.employees] == [b.id]
        assert saved.employees[0].email == "b@infragest.test"

    @pytest.mark.asyncio
    async def test_save_from_stale_snapshot_is_rejected(self, db_session: AsyncSession):
        repo = SQLAlchemyGroupRepository(db_session)
        created = await repo.create(Group(name="Ops", address="Calle 1"))

        saved = await repo.save(replace(created, address="Calle 2"))
        assert saved.version == created.version + 1

        with pytest.raises(UniqueConstraintError) as exc_info:
            await repo.save(replace(created, address="Calle 3"))

        assert exc_info.value.involves("stale_version")

    @pytest.mark.asyncio
    async def test_get_missing_group(self, db_session: AsyncSession):
        repo = SQLAlchemyGroupRepository(db_session)

        assert await repo.get(uuid4()) is None
        assert not await repo.delete(uuid4())


class TestUnitOfWork:
    @pytest.mark.asyncio
    async def test_commit_persists(self, session_factory: async_sessionmaker[AsyncSession]):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            created = await uow.groups.create(Group(name="Ops", address="Calle 1"))
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.groups.get(created.id) is not None

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, session_factory: async_sessionmaker[AsyncSession]):
        group = Group(name="Ops", address="Calle 1")

        with pytest.raises(RuntimeError):
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                await uow.groups.create(group)
                raise RuntimeError("abort")

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.groups.get(group.id) is None

    @pytest.mark.asyncio
    async def test_repositories_require_context(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        uow = SQLAlchemyUnitOfWork(session_factory)

        with pytest.raises(RuntimeError):
            _ = uow.groups
