"""User endpoints: CRUD over application users with default-role assignment and partial updates."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import ApplicationUser, Role
from app.schemas.role import RoleRef
from app.schemas.user import UserPatch, UserPayload, UserRead
from app.services import roles as role_service
from app.services import users as user_service
from app.services.roles import DefaultRoleNotFoundError

router = APIRouter()


def _resolve_roles(db: Session, refs: list[RoleRef] | None) -> set[Role]:
    """Map role references from a payload onto stored roles (by id, else by name)."""
    resolved: set[Role] = set()
    for ref in refs or []:
        if ref.id is None and not ref.name:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Role reference needs an id or a name.",
            )
        role = None
        if ref.id is not None:
            role = role_service.get_role_by_id(db, ref.id)
        elif ref.name:
            role = role_service.find_by_name(db, ref.name)
        if role is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Unknown role: {ref.id if ref.id is not None else ref.name!r}",
            )
        resolved.add(role)
    return resolved


@router.get("", response_model=list[UserRead])
def list_users(
    db: Annotated[Session, Depends(get_db)],
) -> list[ApplicationUser]:
    """Return every user."""
    return user_service.get_all_users(db)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    """Return one user, or 404 with an empty body."""
    user = user_service.get_user_by_id(db, user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.post("", response_model=UserRead)
def create_user(
    body: UserPayload,
    db: Annotated[Session, Depends(get_db)],
) -> ApplicationUser:
    """
    Create a user and return it with its assigned id.

    When roles is empty the default role (ROLE_GUEST) is attached. If that role
    does not exist the request fails with a server error.
    """
    roles = _resolve_roles(db, body.roles)
    if not roles:
        default_role = role_service.find_default_role(db)
        if default_role is None:
            raise DefaultRoleNotFoundError()
        roles.add(default_role)

    user = ApplicationUser(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
        oauth2_provider=body.oauth2_provider,
        oauth2_id=body.oauth2_id,
        roles=roles,
    )
    return user_service.create_user(db, user)


@router.put("/{user_id}", response_model=UserRead)
def put_user(
    user_id: int,
    body: UserPayload,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Replace a user's fields (roles are not changed). 404 when the user does not exist.

    An unknown id is not turned into a create.
    """
    user = user_service.update_user(db, user_id, body)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.patch("/{user_id}", response_model=UserRead)
def patch_user(
    user_id: int,
    body: UserPatch,
    db: Annotated[Session, Depends(get_db)],
):
    """Overwrite only the fields sent with a non-null value; 404 when the user does not exist."""
    user = user_service.get_user_by_id(db, user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    if body.email is not None:
        user.email = body.email
    if body.first_name is not None:
        user.first_name = body.first_name
    if body.last_name is not None:
        user.last_name = body.last_name
    if body.password is not None:
        user.password = body.password
    if body.oauth2_provider is not None:
        user.oauth2_provider = body.oauth2_provider
    if body.oauth2_id is not None:
        user.oauth2_id = body.oauth2_id

    return user_service.update_user(db, user.id, user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Delete a user. Always 204, whether or not the user existed."""
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
