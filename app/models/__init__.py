"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.ingredient import Ingredient
from app.models.meal import Meal, MealRecipe, MealType
from app.models.measurement import UnitOfMeasure
from app.models.recipe import Recipe, RecipeIngredient
from app.models.role import Role
from app.models.user import ApplicationUser, user_roles

__all__ = [
    "ApplicationUser",
    "Base",
    "Ingredient",
    "Meal",
    "MealRecipe",
    "MealType",
    "Recipe",
    "RecipeIngredient",
    "Role",
    "UnitOfMeasure",
    "user_roles",
]
