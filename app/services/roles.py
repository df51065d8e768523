"""Role directory: lookups, creation and deletion of roles, including the default role."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Role

logger = logging.getLogger(__name__)

# Role attached to a new user created without roles.
DEFAULT_ROLE_NAME = "ROLE_GUEST"


class DefaultRoleNotFoundError(Exception):
    """Raised when a user is created without roles and the default role is not in the database."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or f"Default role {DEFAULT_ROLE_NAME} not found"
        super().__init__(self.message)


def find_by_name(db: Session, name: str) -> Role | None:
    """Return the role with this machine name, or None."""
    return db.query(Role).filter(Role.name == name).first()


def find_default_role(db: Session) -> Role | None:
    """Return the default role (ROLE_GUEST), or None when it has not been seeded."""
    return find_by_name(db, DEFAULT_ROLE_NAME)


def get_role_by_id(db: Session, role_id: int) -> Role | None:
    return db.get(Role, role_id)


def get_all_roles(db: Session) -> list[Role]:
    return db.query(Role).all()


def create_role(db: Session, role: Role) -> Role:
    """
    Persist a new role and return it with its id.

    Raises IntegrityError (after rolling back) when name or friendly_name is taken.
    """
    db.add(role)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Role not created, name or friendly name already exists: name=%s", role.name)
        raise
    db.refresh(role)
    logger.info("Created role id=%s name=%s", role.id, role.name)
    return role


def delete_role(db: Session, role_id: int) -> None:
    """
    Delete a role by id. Unknown ids are ignored.

    Users holding the role keep existing; only their assignment to it is removed.
    """
    role = db.get(Role, role_id)
    if role is None:
        return
    for user in list(role.users):
        user.roles.discard(role)
    db.delete(role)
    db.commit()
    logger.info("Deleted role id=%s name=%s", role_id, role.name)
