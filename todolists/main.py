"""Main FastAPI application for the todo list API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request

from . import db
from .api import router as api_router
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .settings import get_settings

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open and close the storage backend."""
    settings = get_settings()
    logger.info("Starting todo list API (storage=%s)", settings.storage_backend)
    if settings.uses_database:
        logger.info("Database storage selected, enabling Postgres persistence")
        try:
            await db.init_db(
                settings.database_url,
                min_size=settings.db_pool_min_size,
                max_size=settings.db_pool_max_size,
            )
        except Exception:
            logger.exception("Failed to initialize database connection")
            raise
    else:
        logger.info("Using session-scoped in-memory storage")

    yield

    logger.info("Shutting down todo list API...")
    await db.close_db()


app = FastAPI(
    title="Todo Lists API",
    description="Named todo lists with session or Postgres storage",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request_token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(request_token)
    response.headers["X-Request-ID"] = request_id
    return response


@app.middleware("http")
async def session_cookie_middleware(request: Request, call_next):
    response = await call_next(request)
    session_id = getattr(request.state, "new_session_id", None)
    if session_id:
        settings = get_settings()
        response.set_cookie(
            key=settings.session_cookie_name,
            value=session_id,
            httponly=True,
            secure=settings.session_cookie_secure,
            samesite="lax",
        )
    return response


@app.get("/")
def root() -> Dict[str, str]:
    """Root endpoint with basic API info."""
    return {
        "message": "Todo Lists API",
        "endpoints": "/api/lists",
    }


@app.get("/health")
def read_health() -> Dict[str, str]:
    return {"status": "ok", "storage": get_settings().storage_backend}


app.include_router(api_router, prefix="/api")
