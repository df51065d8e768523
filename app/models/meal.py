"""ORM models for logged meals, their type, and the recipes eaten in them."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class MealType(Base):
    """Kind of meal, e.g. Breakfast or Dinner."""

    __tablename__ = "meal_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True)

    meals = relationship(
        "Meal",
        back_populates="meal_type",
        cascade="all, delete-orphan",
    )


class Meal(Base):
    """A meal eaten by a user at a point in time."""

    __tablename__ = "meal"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meal_time = Column(DateTime(timezone=True), nullable=True)
    meal_type_id = Column(Integer, ForeignKey("meal_types.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("application_user.id"), nullable=True)

    meal_type = relationship("MealType", back_populates="meals")
    user = relationship("ApplicationUser")
    meal_recipes = relationship(
        "MealRecipe",
        back_populates="meal",
        cascade="all, delete-orphan",
    )


class MealRecipe(Base):
    __tablename__ = "meal_recipe"

    id = Column(Integer, primary_key=True, autoincrement=True)
    servings = Column(Float, nullable=True)
    meal_id = Column(Integer, ForeignKey("meal.id"), nullable=True)
    recipe_id = Column(Integer, ForeignKey("recipe.id"), nullable=True)

    meal = relationship("Meal", back_populates="meal_recipes")
    recipe = relationship("Recipe")
