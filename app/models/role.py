"""ORM model for roles granted to application users."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class Role(Base):
    """
    Named role, e.g. ROLE_GUEST / "Guest".

    name is the machine key; friendly_name is the display label. Both are unique.
    users is a read-only reverse view; assignments are edited on ApplicationUser.roles.
    """

    __tablename__ = "role"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True, index=True)
    friendly_name = Column(String(128), nullable=False, unique=True)

    users = relationship(
        "ApplicationUser",
        secondary="user_roles",
        collection_class=set,
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"Role(id={self.id!r}, name={self.name!r})"
