"""Database engine and session management for PostgreSQL or SQLite URLs."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings


def _is_in_memory_sqlite(url: str) -> bool:
    """True for sqlite:// and sqlite:///:memory: style URLs (no file on disk)."""
    if not url.startswith("sqlite"):
        return False
    path = url.split("://", 1)[1].lstrip("/")
    return path == "" or path.startswith(":memory:")


def engine_options(url: str) -> dict[str, Any]:
    """
    Keyword arguments for create_engine that suit the given URL.

    SQLite connections are shared with FastAPI's worker threads, so the same-thread
    check is disabled. An in-memory database lives inside a single connection, so it
    is pinned with StaticPool; otherwise every thread would see its own empty database.
    """
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if _is_in_memory_sqlite(url):
        options["poolclass"] = StaticPool
    return options


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **engine_options(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
