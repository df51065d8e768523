"""Settings and the database session dependency shared by routers and services."""

from app.core.config import get_settings, settings
from app.core.database import SessionLocal, get_db

__all__ = ["get_settings", "settings", "get_db", "SessionLocal"]
