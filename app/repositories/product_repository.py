"""
Product repository for database operations.
"""
from typing import Any, Dict, List, Optional
import logging
import re
from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId

from app.schemas import Product
from .category_repository import build_sort

logger = logging.getLogger(__name__)


def build_product_filter(
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    search: str = ""
) -> Dict[str, Any]:
    """Filter for product listings."""
    query: Dict[str, Any] = {}
    if category:
        query["category"] = category
    if featured is not None:
        query["featured"] = featured
    if search:
        pattern = re.escape(search)
        query["$or"] = [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
            {"tags": {"$regex": pattern, "$options": "i"}},
        ]
    return query


def parse_object_id(product_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(product_id)
    except (InvalidId, TypeError):
        return None


def _whole(value: Any) -> Optional[int]:
    """Stored numbers may be missing, fractional or strings."""
    try:
        return int(round(float(value)))
    except (TypeError, ValueError):
        return None


def document_to_product(doc: Dict[str, Any]) -> Product:
    """Convert a stored document, filling gaps left by older records."""
    now = datetime.now(timezone.utc)
    return Product(
        product_id=str(doc["_id"]),
        name=doc.get("name") or "",
        description=doc.get("description") or "",
        price=_whole(doc.get("price")) or 0,
        original_price=_whole(doc.get("originalPrice")),
        category=doc.get("category") or "",
        subcategory=doc.get("subcategory") or None,
        fabric=doc.get("fabric") or "",
        sizes=doc.get("sizes") or [],
        colors=doc.get("colors") or [],
        images=doc.get("images") or [],
        stock=_whole(doc.get("stock")) or 0,
        featured=bool(doc.get("featured")),
        tags=doc.get("tags") or [],
        created_at=doc.get("createdAt") or now,
        updated_at=doc.get("updatedAt") or now,
    )


class ProductRepository:
    """Repository for product CRUD operations."""

    def __init__(self, store):
        self.store = store
        self.settings = None

    def set_settings(self, settings):
        self.settings = settings

    @property
    def collection(self):
        return self.store.db[self.settings.products_collection]

    async def count_by_category(self, category_name: str) -> int:
        """Count products whose ``category`` equals the given category name."""
        return await self.collection.count_documents({"category": category_name})

    async def find_page(
        self,
        query: Dict[str, Any],
        sort_by: str,
        sort_order: str,
        skip: int,
        limit: int
    ) -> List[Product]:
        """Get one page of products matching ``query``."""
        cursor = (
            self.collection.find(query)
            .sort(build_sort(sort_by, sort_order))
            .skip(skip)
            .limit(limit)
        )
        return [document_to_product(doc) async for doc in cursor]

    async def count(self, query: Dict[str, Any]) -> int:
        return await self.collection.count_documents(query)

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get a product by ID."""
        oid = parse_object_id(product_id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid})
        if doc:
            return document_to_product(doc)
        return None

    async def update(self, product_id: str, fields: Dict[str, Any]) -> Optional[Product]:
        """Replace editable fields; keys mapped to ``None`` are removed."""
        oid = parse_object_id(product_id)
        if oid is None:
            return None

        to_set = {k: v for k, v in fields.items() if v is not None}
        to_unset = {k: "" for k, v in fields.items() if v is None}
        to_set["updatedAt"] = datetime.now(timezone.utc)

        update: Dict[str, Any] = {"$set": to_set}
        if to_unset:
            update["$unset"] = to_unset

        result = await self.collection.update_one({"_id": oid}, update)
        if result.matched_count == 0:
            return None

        logger.info(f"Updated product: {product_id}")
        return await self.get_by_id(product_id)
