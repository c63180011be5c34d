"""
FastAPI application factory.

Creates and configures the FastAPI application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .lifespan import lifespan
from .logging_config import setup_logging
from .logging_middleware import RequestLoggingMiddleware
from app.utils.exceptions import StorefrontException

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    # ── Initialize logging first ──
    from app.config.settings import get_settings
    settings = get_settings()
    setup_logging(
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        log_json=settings.log_json,
    )

    app = FastAPI(
        title="Storefront API",
        description="""
        Storefront catalog backend

        Features:
        - Category listing with search, sorting and product counts
        - Demo categories while the database is unreachable
        - Admin category creation and product editing
        """,
        version="1.0.0",
        lifespan=lifespan
    )

    # ── Request logging middleware (must be added before CORS) ──
    app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    _register_exception_handlers(app)

    # Include routers
    _include_routers(app)

    # Root and health endpoints
    _register_root_endpoints(app)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with logging."""

    @app.exception_handler(StorefrontException)
    async def storefront_exception_handler(request, exc):
        log_fn = logger.error if exc.status_code >= 500 else logger.warning
        log_fn(f"{type(exc).__name__}: {exc.message} — {request.method} {request.url.path}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _include_routers(app: FastAPI) -> None:
    """Include all API routers."""
    from app.routers import (
        category_router,
        product_router
    )

    app.include_router(category_router.router)
    app.include_router(product_router.router)


def _register_root_endpoints(app: FastAPI) -> None:
    """Register root and health endpoints."""
    from .dependencies import container

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Storefront API",
            "version": "1.0.0",
            "description": "Storefront catalog backend",
            "endpoints": {
                "categories": "/api/categories",
                "products": "/api/products",
                "docs": "/docs"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "services": {
                "mongodb": "connected" if container.base_repo.is_connected else "disconnected"
            }
        }
