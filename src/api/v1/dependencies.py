"""Service wiring for the v1 routers.

Services are built once per process and open a fresh Unit of Work (and so a
fresh session) for every call. Tests replace them via
``app.dependency_overrides``.
"""

from functools import lru_cache

from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.employee_service import EmployeeService
from domain.services.group_service import GroupService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def _uow_factory() -> IUnitOfWork:
    return SQLAlchemyUnitOfWork(async_session_factory)


@lru_cache
def get_employee_service() -> EmployeeService:
    return EmployeeService(_uow_factory)


@lru_cache
def get_group_service() -> GroupService:
    return GroupService(_uow_factory)

