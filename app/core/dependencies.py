"""
Dependency injection container.
"""
import logging

from app.config.settings import get_settings
from app.repositories import (
    BaseRepository,
    CategoryRepository,
    ProductRepository
)
from app.controllers import (
    CategoryController,
    ProductController
)

logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container.

    Everything is wired up front; the MongoDB connection itself is opened
    lazily so the API serves demo categories while the store is down.
    """

    def __init__(self):
        self.settings = get_settings()
        self.base_repo = BaseRepository(self.settings)

        # Repositories
        self.category_repo = CategoryRepository(self.base_repo)
        self.category_repo.set_settings(self.settings)

        self.product_repo = ProductRepository(self.base_repo)
        self.product_repo.set_settings(self.settings)

        # Controllers
        self.category_controller = CategoryController(
            store=self.base_repo,
            category_repo=self.category_repo,
            product_repo=self.product_repo
        )
        self.product_controller = ProductController(
            store=self.base_repo,
            product_repo=self.product_repo
        )

    async def initialize(self) -> None:
        """Try an initial connection (called at startup)."""
        logger.info("Initializing dependency container...")
        if await self.base_repo.get_database() is None:
            logger.warning("MongoDB unreachable at startup - will retry per request")
        logger.info("Dependency container initialized")

    async def shutdown(self) -> None:
        """Cleanup on shutdown."""
        logger.info("Shutting down dependency container...")
        await self.base_repo.disconnect()
        logger.info("Dependency container shutdown complete")


# Global container instance
container = Container()


# Dependency functions for FastAPI
def get_container() -> Container:
    """Get the DI container."""
    return container


def get_category_controller() -> CategoryController:
    """Dependency for category controller."""
    return container.category_controller


def get_product_controller() -> ProductController:
    """Dependency for product controller."""
    return container.product_controller
