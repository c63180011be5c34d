"""
Category controller with business logic.
"""
from typing import List, Optional
import asyncio
import logging

from pymongo.errors import PyMongoError

from app.repositories import BaseRepository, CategoryRepository, ProductRepository
from app.schemas import Category, CategoryCreate, CategoryListResponse, Session
from app.services import page_offset, total_pages, search_demo_categories
from app.utils.exceptions import (
    UnauthorizedError,
    MissingFieldsError,
    CategoryExistsError,
    StoreUnavailableError,
    OperationFailedError
)

logger = logging.getLogger(__name__)


class CategoryController:
    """Controller for category operations."""

    def __init__(
        self,
        store: BaseRepository,
        category_repo: CategoryRepository,
        product_repo: ProductRepository
    ):
        self.store = store
        self.category_repo = category_repo
        self.product_repo = product_repo

    async def list_categories(
        self,
        page: int = 1,
        limit: int = 12,
        search: str = "",
        sort_by: str = "createdAt",
        sort_order: str = "desc"
    ) -> CategoryListResponse:
        """
        List active categories with their product counts.

        Store failures never raise: an unreachable store yields the demo
        set with ``is_demo`` set, a failing query yields an empty page with
        ``error`` set.
        """
        try:
            return await self._list_categories(page, limit, search, sort_by, sort_order)
        except Exception as e:
            logger.error(f"Error fetching categories: {e}", exc_info=True)
            return CategoryListResponse(
                current_page=1,
                total_pages=0,
                total_categories=0,
                error="Failed to fetch categories"
            )

    async def _list_categories(
        self,
        page: int,
        limit: int,
        search: str,
        sort_by: str,
        sort_order: str
    ) -> CategoryListResponse:
        skip = page_offset(page, limit)

        try:
            db = await self.store.get_database()

            if db is None:
                logger.info("Database not connected - returning demo categories")
                matches = search_demo_categories(search)
                return CategoryListResponse(
                    categories=matches[skip:skip + limit],
                    current_page=page,
                    total_pages=total_pages(len(matches), limit),
                    total_categories=len(matches),
                    is_demo=True
                )

            categories = await self.category_repo.find_page(search, sort_by, sort_order, skip, limit)
            total = await self.category_repo.count(search)
        except Exception as e:
            logger.error(f"Database error: {e}")
            return CategoryListResponse(
                current_page=page,
                total_pages=0,
                total_categories=0,
                error="Database connection failed"
            )

        logger.info(f"Database query returned {len(categories)} categories out of {total} total")
        await self._attach_product_counts(categories)

        return CategoryListResponse(
            categories=categories,
            current_page=page,
            total_pages=total_pages(total, limit),
            total_categories=total
        )

    async def _attach_product_counts(self, categories: List[Category]) -> None:
        counts = await asyncio.gather(
            *(self._count_products(category.name) for category in categories)
        )
        for category, count in zip(categories, counts):
            category.product_count = count

    async def _count_products(self, category_name: str) -> int:
        try:
            return await self.product_repo.count_by_category(category_name)
        except Exception as e:
            logger.warning(f"Product count failed for category '{category_name}': {e}")
            return 0

    async def create_category(
        self,
        request: CategoryCreate,
        session: Optional[Session]
    ) -> Category:
        """Create a new category (admin only)."""
        if session is None or not session.is_admin:
            raise UnauthorizedError()

        name = (request.name or "").strip()
        description = (request.description or "").strip()
        missing = [field for field, value in (("name", name), ("description", description)) if not value]
        if missing:
            raise MissingFieldsError(missing)

        subcategories = request.subcategories
        if isinstance(subcategories, list):
            subcategories = [str(item) for item in subcategories if item is not None]
        else:
            subcategories = []

        try:
            db = await self.store.get_database()
            if db is None:
                raise StoreUnavailableError()

            # Not atomic: two concurrent requests can both pass this check.
            if await self.category_repo.find_active_by_name(name):
                raise CategoryExistsError(name)

            category = await self.category_repo.create(name, description, subcategories)
        except PyMongoError as e:
            logger.error(f"Error creating category: {e}", exc_info=True)
            raise OperationFailedError("Failed to create category") from e

        category.product_count = 0
        return category
