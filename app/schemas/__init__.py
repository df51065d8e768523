"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.role import RoleCreate, RoleRead, RoleRef
from app.schemas.user import MUTABLE_USER_FIELDS, UserPatch, UserPayload, UserRead

__all__ = [
    "HealthResponse",
    "MUTABLE_USER_FIELDS",
    "RoleCreate",
    "RoleRead",
    "RoleRef",
    "UserPatch",
    "UserPayload",
    "UserRead",
]
