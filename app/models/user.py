"""ORM model for application users and their role assignments."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from app.models.base import Base

# Join table for the user <-> role many-to-many; owned by ApplicationUser.roles.
user_roles = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("application_user.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("role.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class ApplicationUser(Base):
    """
    User account of the nutrition tracker.

    password is stored as supplied. oauth2_provider / oauth2_id link an external
    identity when the account was created through an OAuth2 login.
    """

    __tablename__ = "application_user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    oauth2_provider = Column(String(64), nullable=True)
    oauth2_id = Column(String(255), nullable=True)

    roles = relationship(
        "Role",
        secondary=user_roles,
        collection_class=set,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"ApplicationUser(id={self.id!r}, email={self.email!r})"
