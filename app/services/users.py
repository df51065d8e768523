"""User directory: CRUD over application users.

Default-role assignment is not done here; the HTTP layer applies it before
calling create_user. update_user never touches the role-set.
"""

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import ApplicationUser
from app.schemas.user import MUTABLE_USER_FIELDS

logger = logging.getLogger(__name__)


class UserDetails(Protocol):
    """Anything carrying the six mutable user fields (an ORM user or a request schema)."""

    first_name: str | None
    last_name: str | None
    email: str | None
    password: str | None
    oauth2_provider: str | None
    oauth2_id: str | None


class RoleAssignmentNotImplementedError(NotImplementedError):
    """Raised by add_role_to_user / remove_role_from_user, which are not supported yet."""

    def __init__(self, operation: str) -> None:
        self.message = f"{operation} is not implemented"
        super().__init__(self.message)


def _commit(db: Session, user: ApplicationUser, action: str) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("User not %s, email already in use: email=%s", action, user.email)
        raise


def get_all_users(db: Session) -> list[ApplicationUser]:
    return db.query(ApplicationUser).all()


def get_user_by_id(db: Session, user_id: int) -> ApplicationUser | None:
    return db.get(ApplicationUser, user_id)


def create_user(db: Session, user: ApplicationUser) -> ApplicationUser:
    """
    Persist a user as given and return it with its id.

    Raises IntegrityError (after rolling back) when the email is already in use.
    """
    db.add(user)
    _commit(db, user, "created")
    db.refresh(user)
    logger.info("Created user id=%s roles=%s", user.id, sorted(r.name for r in user.roles))
    return user


def update_user(db: Session, user_id: int, details: UserDetails) -> ApplicationUser | None:
    """
    Replace the mutable fields of user user_id with those of details.

    Every field is copied, including None values. The role-set is left as is even
    when details carries a different one. Returns None when the user does not exist.
    """
    user = db.get(ApplicationUser, user_id)
    if user is None:
        return None
    for field in MUTABLE_USER_FIELDS:
        setattr(user, field, getattr(details, field))
    _commit(db, user, "updated")
    db.refresh(user)
    logger.info("Updated user id=%s", user.id)
    return user


def delete_user(db: Session, user_id: int) -> None:
    """Delete a user by id. Unknown ids are ignored."""
    user = db.get(ApplicationUser, user_id)
    if user is None:
        return
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s", user_id)


def add_role_to_user(db: Session, user_id: int, role_name: str) -> ApplicationUser | None:
    # TODO: look up role_name via roles.find_by_name, add it to user.roles and commit once role editing is exposed over HTTP.
    raise RoleAssignmentNotImplementedError("add_role_to_user")


def remove_role_from_user(db: Session, user_id: int, role_name: str) -> ApplicationUser | None:
    raise RoleAssignmentNotImplementedError("remove_role_from_user")
