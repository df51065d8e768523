"""FastAPI application entrypoint. No business logic; only wiring, startup seeding and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.api import router as api_router
from app.core.config import settings
from app.core.database import SessionLocal
from app.services.roles import DefaultRoleNotFoundError
from app.services.seeding import seed_reference_data

logger = logging.getLogger(__name__)


def _seed_on_startup() -> None:
    db = SessionLocal()
    try:
        seed_reference_data(db)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Seed reference data once before the first request is served."""
    if settings.SEED_ON_STARTUP:
        await run_in_threadpool(_seed_on_startup)
    yield


app = FastAPI(
    title="Kalsumed API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(_request: Request, exc: IntegrityError) -> JSONResponse:
    """Unique constraint violations (email, role name, friendly name) become 409."""
    logger.warning("Integrity error: %s", str(exc.orig)[:500])
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Resource conflicts with an existing record."},
    )


@app.exception_handler(DefaultRoleNotFoundError)
async def default_role_missing_handler(
    _request: Request, exc: DefaultRoleNotFoundError
) -> JSONResponse:
    """The default role must be seeded before users can be created without roles."""
    logger.error("Cannot create user: %s", exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Kalsumed API"}
