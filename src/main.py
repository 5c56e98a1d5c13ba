"""
FastAPI Books Application.

Main application entry point with routers, error handlers and the
in-memory book repository.
Following Clean Code principles: meaningful names, single responsibility, no hardcoding.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api.book_router import router as book_router
from api.system_router import router as system_router
from core.config import ServerSettings, load_environment_file
from core.constants import (
    API_TITLE,
    API_VERSION,
    API_DESCRIPTION,
    STARTUP_MESSAGE,
    SHUTDOWN_MESSAGE,
    SERVER_START_MESSAGE,
)
from core.error_handlers import register_exception_handlers
from core.logging_config import configure_logging
from repository import InMemoryBookRepository
from services import BookService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def application_lifespan(app: FastAPI):
    """
    Application lifespan manager following single responsibility principle.

    Handles startup and shutdown events cleanly. Books are not persisted,
    so shutdown only reports how many are dropped.
    """
    logger.info(STARTUP_MESSAGE)

    yield

    book_repository = app.state.book_repository
    if book_repository.is_poisoned:
        logger.info(SHUTDOWN_MESSAGE)
        return

    book_count = await book_repository.count()
    logger.info(f"{SHUTDOWN_MESSAGE} discarding {book_count} in-memory books")


def attach_book_service(
    application: FastAPI, book_repository: Optional[InMemoryBookRepository] = None
) -> None:
    """Create the single repository and service owned by this application."""
    repository = book_repository if book_repository is not None else InMemoryBookRepository()
    application.state.book_repository = repository
    application.state.book_service = BookService(repository)


def register_api_routers(application: FastAPI) -> None:
    """Register all API routers with the application."""
    application.include_router(system_router)
    application.include_router(book_router)


def create_fastapi_application(
    book_repository: Optional[InMemoryBookRepository] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Separates application creation from configuration for better testability.
    """
    application = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=application_lifespan,
    )
    attach_book_service(application, book_repository)
    register_exception_handlers(application)
    register_api_routers(application)
    return application


def start_server() -> None:
    """Start the server with configuration from environment."""
    import uvicorn

    load_environment_file()
    settings = ServerSettings.from_environment()
    configure_logging(settings.log_level)
    settings.report_fallbacks()

    logger.info(f"{SERVER_START_MESSAGE} on {settings.address}")

    # One worker only, each process would otherwise own a separate store
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


app = create_fastapi_application()


if __name__ == "__main__":
    start_server()
