"""
FastAPI Media Catalog Application.

Main application entry point with all routers and middleware.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_catalog
from api.routers import ALL_ROUTERS
from core.constants import (
    API_TITLE,
    API_VERSION,
    API_DESCRIPTION,
    API_MESSAGE_ROOT,
    API_STATUS_HEALTHY,
    API_STATUS_RUNNING,
    CONTACT_NAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LOG_LEVEL,
    ENDPOINT_ROOT,
    ENDPOINT_HEALTH,
    ENDPOINT_DOCS,
    ENDPOINT_STATISTICS,
    ENV_DATA_DIR,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_PORT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    STARTUP_MESSAGE,
    SHUTDOWN_MESSAGE,
    LOADING_DATA_MESSAGE,
    SAVING_DATA_MESSAGE,
    SERVER_START_MESSAGE,
    CORS_ALLOW_ORIGINS,
    CORS_ALLOW_CREDENTIALS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_HEADERS,
)
from models.statistics import CatalogStatistics
from persistence import PersistenceManager
from services.catalog import Catalog

logger = logging.getLogger(__name__)


def get_log_level() -> str:
    """Get log level name from environment variables."""
    return os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)


def configure_logging() -> None:
    """Configure root logger with format and level from configuration."""
    logging.basicConfig(
        level=get_log_level().upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def get_persistence_manager() -> Optional[PersistenceManager]:
    """Create persistence manager when a data directory is configured."""
    data_dir = os.getenv(ENV_DATA_DIR)
    if not data_dir:
        return None
    return PersistenceManager(data_dir)


async def load_persisted_data_if_available(catalog: Catalog, persistence: Optional[PersistenceManager]) -> None:
    """Restore catalog from the latest snapshot if persistence is enabled."""
    if persistence is None:
        return

    logger.info(LOADING_DATA_MESSAGE)
    state = persistence.load_state()
    if state:
        await catalog.restore_state(state)


async def save_application_state(catalog: Catalog, persistence: Optional[PersistenceManager]) -> None:
    """Save current catalog state to disk if persistence is enabled."""
    if persistence is None:
        return

    logger.info(SAVING_DATA_MESSAGE)
    persistence.save_state(await catalog.export_state())


@asynccontextmanager
async def application_lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events cleanly.
    """
    # Startup phase
    logger.info(STARTUP_MESSAGE)
    catalog = get_catalog()
    persistence = get_persistence_manager()
    await load_persisted_data_if_available(catalog, persistence)

    yield

    # Shutdown phase
    await save_application_state(catalog, persistence)
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
    for router in ALL_ROUTERS:
        application.include_router(router)


def create_health_check_response() -> dict:
    """Create health check response."""
    return {"status": API_STATUS_HEALTHY}


def create_root_response() -> dict:
    """Create root endpoint response with API information."""
    return {
        "message": API_MESSAGE_ROOT,
        "version": API_VERSION,
        "docs": ENDPOINT_DOCS,
        "health": ENDPOINT_HEALTH,
        "status": API_STATUS_RUNNING
    }


def get_server_configuration() -> tuple[str, int]:
    """Get server host and port from environment variables."""
    host = os.getenv(ENV_HOST, DEFAULT_HOST)
    port = int(os.getenv(ENV_PORT, DEFAULT_PORT))
    return host, port


def start_development_server() -> None:
    """Start development server with configuration from environment."""
    import uvicorn

    host, port = get_server_configuration()
    logger.info(f"{SERVER_START_MESSAGE} on {host}:{port}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,  # Enable auto-reload in development
        log_level=get_log_level(),
    )


# Create FastAPI application using factory functions
configure_logging()
app = create_fastapi_application()
configure_cors_middleware(app)
register_api_routers(app)


@app.get(ENDPOINT_ROOT, summary="Root endpoint")
async def root_endpoint():
    """Root endpoint providing basic API information."""
    return create_root_response()


@app.get(ENDPOINT_HEALTH, summary="Health check")
async def health_check_endpoint():
    """Health check endpoint for monitoring."""
    return create_health_check_response()


@app.get(ENDPOINT_STATISTICS, response_model=CatalogStatistics, summary="Catalog statistics")
async def statistics_endpoint(catalog: Catalog = Depends(get_catalog)) -> CatalogStatistics:
    """Counts and total lengths of the whole catalog."""
    return await catalog.statistics.get_statistics()


if __name__ == "__main__":
    start_development_server()
