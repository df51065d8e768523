"""Initial schema: users, roles, user_roles, and meal/recipe/ingredient/unit tables.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("friendly_name", sa.String(length=128), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_role")),
        sa.UniqueConstraint("friendly_name", name=op.f("uq_role_friendly_name")),
    )
    op.create_index(op.f("ix_role_name"), "role", ["name"], unique=True)

    op.create_table(
        "application_user",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("oauth2_provider", sa.String(length=64), nullable=True),
        sa.Column("oauth2_id", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_application_user")),
    )
    op.create_index(
        op.f("ix_application_user_email"),
        "application_user",
        ["email"],
        unique=True,
    )

    op.create_table(
        "user_roles",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["application_user.id"],
            name=op.f("fk_user_roles_user_id_application_user"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["role_id"],
            ["role.id"],
            name=op.f("fk_user_roles_role_id_role"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("user_id", "role_id", name=op.f("pk_user_roles")),
    )

    op.create_table(
        "unit_of_measure",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("unit", sa.String(length=64), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_unit_of_measure")),
    )

    op.create_table(
        "meal_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meal_types")),
        sa.UniqueConstraint("name", name=op.f("uq_meal_types_name")),
    )

    op.create_table(
        "ingredient",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("calories", sa.Float(), nullable=True),
        sa.Column("protein", sa.Float(), nullable=True),
        sa.Column("fat", sa.Float(), nullable=True),
        sa.Column("carbohydrates", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_ingredient")),
    )

    op.create_table(
        "recipe",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_recipe")),
    )

    op.create_table(
        "recipe_ingredient",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("amount", sa.Float(), nullable=True),
        sa.Column("recipe_id", sa.Integer(), nullable=True),
        sa.Column("ingredient_id", sa.Integer(), nullable=True),
        sa.Column("unit_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["recipe_id"], ["recipe.id"], name=op.f("fk_recipe_ingredient_recipe_id_recipe")
        ),
        sa.ForeignKeyConstraint(
            ["ingredient_id"],
            ["ingredient.id"],
            name=op.f("fk_recipe_ingredient_ingredient_id_ingredient"),
        ),
        sa.ForeignKeyConstraint(
            ["unit_id"],
            ["unit_of_measure.id"],
            name=op.f("fk_recipe_ingredient_unit_id_unit_of_measure"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_recipe_ingredient")),
    )

    op.create_table(
        "meal",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meal_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("meal_type_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["meal_type_id"], ["meal_types.id"], name=op.f("fk_meal_meal_type_id_meal_types")
        ),
        sa.ForeignKeyConstraint(
            ["user_id"], ["application_user.id"], name=op.f("fk_meal_user_id_application_user")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meal")),
    )

    op.create_table(
        "meal_recipe",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("servings", sa.Float(), nullable=True),
        sa.Column("meal_id", sa.Integer(), nullable=True),
        sa.Column("recipe_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["meal_id"], ["meal.id"], name=op.f("fk_meal_recipe_meal_id_meal")),
        sa.ForeignKeyConstraint(
            ["recipe_id"], ["recipe.id"], name=op.f("fk_meal_recipe_recipe_id_recipe")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meal_recipe")),
    )


def downgrade() -> None:
    op.drop_table("meal_recipe")
    op.drop_table("meal")
    op.drop_table("recipe_ingredient")
    op.drop_table("recipe")
    op.drop_table("ingredient")
    op.drop_table("meal_types")
    op.drop_table("unit_of_measure")
    op.drop_table("user_roles")
    op.drop_index(op.f("ix_application_user_email"), table_name="application_user")
    op.drop_table("application_user")
    op.drop_index(op.f("ix_role_name"), table_name="role")
    op.drop_table("role")
