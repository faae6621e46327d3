"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.employees import router as employees_router
from api.v1.routes.groups import router as groups_router

router = APIRouter()
router.include_router(employees_router)
router.include_router(groups_router)
