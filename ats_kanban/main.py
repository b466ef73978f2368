"""
Main FastAPI application.

This is the entry point for the API server.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from ats_kanban.clients.base import create_http_client
from ats_kanban.core.config import settings
from ats_kanban.core.logging_config import configure_logging
from ats_kanban.db.session import Database
from ats_kanban.errors import AppError, app_error_handler
from ats_kanban.routers import candidates, health, positions
from ats_kanban.ui.routes import positions as ui_positions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the database handle and the outbound API client on startup,
    close whatever this lifespan opened on shutdown.
    """
    logger.info("Starting %s...", settings.APP_NAME)

    owns_database = not app.state.database.is_open
    if owns_database:
        app.state.database.open()

    owns_api_client = app.state.api_client is None
    if owns_api_client:
        app.state.api_client = create_http_client()

    yield

    logger.info("Shutting down %s...", settings.APP_NAME)
    if owns_api_client:
        await app.state.api_client.aclose()
        app.state.api_client = None
    if owns_database:
        await app.state.database.close()


def create_app(
    database: Optional[Database] = None,
    api_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the application.

    ``database`` and ``api_client`` may be passed in already open (tests,
    scripts); otherwise the lifespan creates them from settings.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Applicant tracking API and Kanban board",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.database = database or Database(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.api_client = api_client

    app.add_exception_handler(AppError, app_error_handler)

    # API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(positions.router)
    app.include_router(candidates.router)

    # UI routes
    app.include_router(ui_positions.router)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/ui/positions", status_code=303)

    return app


configure_logging(settings.LOG_LEVEL)

# uvicorn ats_kanban.main:app --port 3010
app = create_app()
