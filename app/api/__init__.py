"""HTTP routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api import health, roles, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(roles.router, prefix="/roles", tags=["roles"])
