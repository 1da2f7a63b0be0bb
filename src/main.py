"""
FastAPI Notebook Application.

Main application entry point with all routers and middleware.
Following Clean Code principles: meaningful names, single responsibility, no hardcoding.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.note_router import router as note_router
from api.system_router import router as system_router
from api.dependencies import get_note_context
from core.logging_config import configure_logging
from core.constants import (
    API_TITLE,
    API_VERSION,
    API_DESCRIPTION,
    API_MESSAGE_ROOT,
    API_STATUS_DEGRADED,
    API_STATUS_HEALTHY,
    API_STATUS_RUNNING,
    CONTACT_NAME,
    CONTACT_URL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LOG_LEVEL,
    ENDPOINT_ROOT,
    ENDPOINT_HEALTH,
    ENDPOINT_DOCS,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_PORT,
    STARTUP_MESSAGE,
    SHUTDOWN_MESSAGE,
    SERVER_START_MESSAGE,
    CORS_ALLOW_ORIGINS,
    CORS_ALLOW_CREDENTIALS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_HEADERS,
)
from persistence import NoteContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def application_lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Closes the database client on shutdown.
    """
    logger.info(STARTUP_MESSAGE)

    yield

    get_note_context().close()
    logger.info(SHUTDOWN_MESSAGE)


def create_fastapi_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Separates application creation from configuration for better testability.
    """
    return FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        contact={
            "name": CONTACT_NAME,
            "url": CONTACT_URL,
        },
        lifespan=application_lifespan,
    )


def configure_cors_middleware(application: FastAPI) -> None:
    """Configure CORS middleware with constants."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=CORS_ALLOW_CREDENTIALS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )


def register_api_routers(application: FastAPI) -> None:
    """Register all API routers with the application."""
    application.include_router(note_router)
    application.include_router(system_router)


async def create_health_check_response(note_context: NoteContext) -> dict:
    """Create health check response with database status."""
    database_available = await note_context.ping()

    return {
        "status": API_STATUS_HEALTHY if database_available else API_STATUS_DEGRADED,
        "database": {
            "name": note_context.settings.database,
            "available": database_available,
        },
    }


def create_root_response() -> dict:
    """Create root endpoint response with API information."""
    return {
        "message": API_MESSAGE_ROOT,
        "version": API_VERSION,
        "docs": ENDPOINT_DOCS,
        "health": ENDPOINT_HEALTH,
        "status": API_STATUS_RUNNING
    }


def get_server_configuration() -> tuple[str, int, str]:
    """Get server host, port and log level from environment variables."""
    host = os.getenv(ENV_HOST, DEFAULT_HOST)
    port = int(os.getenv(ENV_PORT, DEFAULT_PORT))
    log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).lower()
    return host, port, log_level


def start_development_server() -> None:
    """Start development server with configuration from environment."""
    import uvicorn

    host, port, log_level = get_server_configuration()
    configure_logging(log_level)
    logger.info(f"{SERVER_START_MESSAGE} on {host}:{port}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,  # Enable auto-reload in development
        log_level=log_level,
    )


# Create FastAPI application using factory functions
app = create_fastapi_application()
configure_cors_middleware(app)
register_api_routers(app)


@app.get(ENDPOINT_ROOT, summary="Root endpoint")
async def root_endpoint():
    """Root endpoint providing basic API information."""
    return create_root_response()


@app.get(ENDPOINT_HEALTH, summary="Health check")
async def health_check_endpoint(note_context: NoteContext = Depends(get_note_context)):
    """Health check endpoint for monitoring."""
    return await create_health_check_response(note_context)


if __name__ == "__main__":
    start_development_server()
