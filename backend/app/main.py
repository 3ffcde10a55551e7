"""Employee Registry API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RegistryError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage initialized on startup and released on shutdown via lifespan
    - Static frontend mounted last so /api/* takes precedence

Run with: uvicorn app.main:app --port 3001
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.dependencies import close_memory_repository, init_memory_repository
from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import init_db, close_db
from app.infrastructure.observability import setup_logging
from app.config import Settings, get_settings
from app.api.routes import employees, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.storage_backend == "memory":
        init_memory_repository()
    else:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_schema:
            await manager.create_schema()
    logger.info(
        f"Employee Registry API started ({settings.storage_backend} storage)",
    )
    yield
    close_memory_repository()
    await close_db()
    logger.info("Employee Registry API shutting down")


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title="Employee Registry API",
        description="Create, list, update and delete employee records.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(employees.router)

    register_error_handlers(app)

    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True), name="static",
        )
    return app


app = create_app(get_settings())
