"""ORM model for units of measure used by recipe ingredients."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class UnitOfMeasure(Base):
    """A unit such as Gram, Cup or Pinch."""

    __tablename__ = "unit_of_measure"

    id = Column(Integer, primary_key=True, autoincrement=True)
    unit = Column(String(64), nullable=True)
