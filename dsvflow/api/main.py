"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dsvflow import __version__
from dsvflow.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from dsvflow.api.middleware.error_handler import setup_exception_handlers
from dsvflow.api.routes import (
    clients_router,
    health_router,
    inventory_router,
    orders_router,
    reports_router,
)
from dsvflow.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the collections on startup and release storage on shutdown."""
    configure_logging()
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        storage_backend=settings.storage.backend,
    )

    from dsvflow.application.services import (
        get_client_repository,
        get_inventory_repository,
        get_order_repository,
    )

    try:
        orders = await get_order_repository()
        clients = await get_client_repository()
        inventory = await get_inventory_repository()
    except Exception as e:
        logger.error("storage_init_failed", error=str(e))
        raise

    logger.info(
        "application_started",
        orders=len(orders),
        clients=len(clients),
        inventory_items=len(inventory),
    )

    yield

    logger.info("application_stopping")

    from dsvflow.application.services import reset_repositories
    from dsvflow.infrastructure.storage import close_kv_store

    reset_repositories()
    await close_kv_store()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Orders, clients, inventory and sales reports for a print shop",
        version=__version__,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(clients_router)
    app.include_router(orders_router)
    app.include_router(inventory_router)
    app.include_router(reports_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "dsvflow.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
