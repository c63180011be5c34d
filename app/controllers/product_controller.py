"""
Product controller with business logic.
"""
from typing import Any, Dict, Iterable, List, Optional
import logging

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from app.repositories import BaseRepository, ProductRepository
from app.repositories.product_repository import build_product_filter
from app.schemas import Product, ProductUpdate, ProductListResponse, Session
from app.services import page_offset, total_pages
from app.utils.exceptions import (
    UnauthorizedError,
    MissingFieldsError,
    StoreUnavailableError,
    ProductNotFoundError,
    OperationFailedError
)

logger = logging.getLogger(__name__)


def _unique(values: Iterable[str]) -> List[str]:
    """Strip, drop blanks and de-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(v.strip() for v in values if v and v.strip()))


class ProductController:
    """Controller for product operations."""

    def __init__(self, store: BaseRepository, product_repo: ProductRepository):
        self.store = store
        self.product_repo = product_repo

    async def _require_store(self) -> None:
        if await self.store.get_database() is None:
            raise StoreUnavailableError()

    async def list_products(
        self,
        page: int = 1,
        limit: int = 12,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
        search: str = "",
        sort_by: str = "createdAt",
        sort_order: str = "desc"
    ) -> ProductListResponse:
        """List products, e.g. the featured products on the landing page."""
        query = build_product_filter(category=category, featured=featured, search=search)
        try:
            await self._require_store()
            products = await self.product_repo.find_page(
                query, sort_by, sort_order, page_offset(page, limit), limit
            )
            total = await self.product_repo.count(query)
        except (PyMongoError, ValidationError) as e:
            logger.error(f"Error fetching products: {e}", exc_info=True)
            raise OperationFailedError("Failed to fetch products") from e

        return ProductListResponse(
            products=products,
            current_page=page,
            total_pages=total_pages(total, limit),
            total_products=total
        )

    async def get_product(self, product_id: str) -> Product:
        """Get a product by ID."""
        try:
            await self._require_store()
            product = await self.product_repo.get_by_id(product_id)
        except (PyMongoError, ValidationError) as e:
            logger.error(f"Error fetching product {product_id}: {e}", exc_info=True)
            raise OperationFailedError("Failed to fetch product") from e

        if not product:
            raise ProductNotFoundError(product_id)
        return product

    async def update_product(
        self,
        product_id: str,
        request: ProductUpdate,
        session: Optional[Session]
    ) -> Product:
        """Apply the admin edit form to a product."""
        if session is None or not session.is_admin:
            raise UnauthorizedError()

        fields = self._editable_fields(request)

        try:
            await self._require_store()
            product = await self.product_repo.update(product_id, fields)
        except (PyMongoError, ValidationError) as e:
            logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
            raise OperationFailedError("Failed to update product") from e

        if not product:
            raise ProductNotFoundError(product_id)
        return product

    @staticmethod
    def _editable_fields(request: ProductUpdate) -> Dict[str, Any]:
        """Validate the form and map it to stored fields (``None`` = unset)."""
        name = (request.name or "").strip()
        description = (request.description or "").strip()
        category = (request.category or "").strip()
        fabric = (request.fabric or "").strip()
        images = _unique(request.images)

        required = {
            "name": name,
            "description": description,
            "price": (request.price or 0) > 0,
            "category": category,
            "fabric": fabric,
            "images": images,
        }
        missing = [field for field, value in required.items() if not value]
        if missing:
            raise MissingFieldsError(missing)

        return {
            "name": name,
            "description": description,
            "price": request.price,
            "originalPrice": request.original_price or None,
            "category": category,
            "subcategory": (request.subcategory or "").strip() or None,
            "fabric": fabric,
            "sizes": _unique(request.sizes),
            "colors": _unique(request.colors),
            "images": images,
            "stock": request.stock or 0,
            "featured": request.featured,
            "tags": _unique(request.tags),
        }
