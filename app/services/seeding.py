"""Reference-data seeding: default roles, units of measure and meal types.

Runs once per process start (application lifespan or `python -m app.seed`).
Every step checks what already exists, so running it repeatedly never duplicates rows.
"""

import logging

from sqlalchemy.orm import Session

from app.models import MealType, Role, UnitOfMeasure

logger = logging.getLogger(__name__)

# (name, friendly_name); the first entry is the default role for new users.
DEFAULT_ROLES: tuple[tuple[str, str], ...] = (
    ("ROLE_GUEST", "Guest"),
    ("ROLE_USER", "User"),
    ("ROLE_ADMIN", "Administrator"),
)

DEFAULT_UNITS_OF_MEASURE: tuple[str, ...] = (
    "Teaspoon",
    "Tablespoon",
    "Cup",
    "Milliliter",
    "Liter",
    "Fluid Ounce",
    "Pint",
    "Quart",
    "Gallon",
    "Gram",
    "Kilogram",
    "Ounce",
    "Pound",
    "Piece",
    "Slice",
    "Pinch",
)

DEFAULT_MEAL_TYPES: tuple[str, ...] = (
    "Breakfast",
    "Brunch",
    "Lunch",
    "Dinner",
    "Snack",
    "Dessert",
    "Supper",
)


def seed_roles(session: Session) -> int:
    """Add each default role whose name is not present yet. Returns how many were added."""
    added = 0
    for name, friendly_name in DEFAULT_ROLES:
        exists = session.query(Role.id).filter(Role.name == name).first()
        if exists is None:
            session.add(Role(name=name, friendly_name=friendly_name))
            added += 1
    return added


def seed_units_of_measure(session: Session) -> int:
    """Add the default units only when the table is empty."""
    if session.query(UnitOfMeasure).count() > 0:
        return 0
    session.add_all(UnitOfMeasure(unit=unit) for unit in DEFAULT_UNITS_OF_MEASURE)
    return len(DEFAULT_UNITS_OF_MEASURE)


def seed_meal_types(session: Session) -> int:
    """Add the default meal types only when the table is empty."""
    if session.query(MealType).count() > 0:
        return 0
    session.add_all(MealType(name=name) for name in DEFAULT_MEAL_TYPES)
    return len(DEFAULT_MEAL_TYPES)


def seed_reference_data(session: Session) -> dict[str, int]:
    """
    Seed roles, units of measure and meal types in one transaction.

    Returns the number of rows inserted per table. Idempotent: safe to run on every boot.
    """
    inserted = {
        "roles": seed_roles(session),
        "units_of_measure": seed_units_of_measure(session),
        "meal_types": seed_meal_types(session),
    }
    session.commit()

    if any(inserted.values()):
        logger.info(
            "Reference data seeded: roles=%s, units_of_measure=%s, meal_types=%s",
            inserted["roles"],
            inserted["units_of_measure"],
            inserted["meal_types"],
        )
    else:
        logger.info("Reference data already present; nothing seeded.")
    return inserted
