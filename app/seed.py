"""
CLI entrypoint for seeding reference data (roles, units of measure, meal types):

  python -m app.seed

Safe to run repeatedly; existing rows are left alone. The API also runs this
on startup unless SEED_ON_STARTUP=false.
"""

import logging
import sys

from app.core.database import SessionLocal
from app.services.seeding import seed_reference_data

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Insert missing reference data and report what was added."""
    db = SessionLocal()
    try:
        inserted = seed_reference_data(db)
        logger.info("Seed completed: %s", inserted)
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
