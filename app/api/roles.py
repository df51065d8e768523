"""Role endpoints: list, read, create and delete roles."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Role
from app.schemas.role import RoleCreate, RoleRead
from app.services import roles as role_service

router = APIRouter()


@router.get("", response_model=list[RoleRead])
def list_roles(
    db: Annotated[Session, Depends(get_db)],
) -> list[Role]:
    return role_service.get_all_roles(db)


@router.get("/{role_id}", response_model=RoleRead)
def get_role(
    role_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    """Return one role, or 404 with an empty body."""
    role = role_service.get_role_by_id(db, role_id)
    if role is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return role


@router.post("", response_model=RoleRead)
def create_role(
    body: RoleCreate,
    db: Annotated[Session, Depends(get_db)],
) -> Role:
    """Create a role. Duplicate name or friendlyName is rejected with 409."""
    role = Role(name=body.name, friendly_name=body.friendly_name)
    return role_service.create_role(db, role)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(
    role_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete a role and its user assignments. Always 204."""
    role_service.delete_role(db, role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
