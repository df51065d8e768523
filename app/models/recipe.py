"""ORM models for recipes and the ingredient lines they are made of."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class Recipe(Base):
    __tablename__ = "recipe"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)

    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
    )


class RecipeIngredient(Base):
    """One ingredient line of a recipe: amount of an ingredient in a unit."""

    __tablename__ = "recipe_ingredient"

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Float, nullable=True)
    recipe_id = Column(Integer, ForeignKey("recipe.id"), nullable=True)
    ingredient_id = Column(Integer, ForeignKey("ingredient.id"), nullable=True)
    unit_id = Column(Integer, ForeignKey("unit_of_measure.id"), nullable=True)

    recipe = relationship("Recipe", back_populates="ingredients")
    ingredient = relationship("Ingredient")
    unit_of_measure = relationship("UnitOfMeasure")
