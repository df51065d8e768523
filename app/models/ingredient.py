"""ORM model for ingredients and their nutrition facts."""

from sqlalchemy import Column, Float, Integer, String

from app.models.base import Base


class Ingredient(Base):
    """
    Ingredient with nutrition values.

    calories is in kcal; protein, fat and carbohydrates are in grams.
    """

    __tablename__ = "ingredient"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    calories = Column(Float, nullable=True)
    protein = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)
    carbohydrates = Column(Float, nullable=True)
