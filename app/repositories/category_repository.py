"""
Category repository for database operations.
"""
from typing import Any, Dict, List, Optional, Tuple
import logging
import re
from datetime import datetime, timezone

from app.schemas import Category, SortOrder

logger = logging.getLogger(__name__)

# API sort keys -> stored field names
SORTABLE_FIELDS = {
    "name": "name",
    "description": "description",
    "createdAt": "createdAt",
    "created_at": "createdAt",
    "updatedAt": "updatedAt",
    "updated_at": "updatedAt",
}
DEFAULT_SORT_FIELD = "createdAt"


def build_category_filter(search: str = "") -> Dict[str, Any]:
    """Active categories, optionally matching ``search`` in name or description."""
    query: Dict[str, Any] = {"isActive": True}
    if search:
        pattern = re.escape(search)
        query["$or"] = [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
        ]
    return query


def build_sort(sort_by: str, sort_order: str) -> List[Tuple[str, int]]:
    """Single caller-chosen key with ``_id`` as a stable tie-break."""
    field = SORTABLE_FIELDS.get(sort_by)
    if field is None:
        logger.warning(f"Unsupported sortBy '{sort_by}', using {DEFAULT_SORT_FIELD}")
        field = DEFAULT_SORT_FIELD
    direction = SortOrder.direction(sort_order)
    return [(field, direction), ("_id", direction)]


def document_to_category(doc: Dict[str, Any]) -> Category:
    """Convert a stored document, filling gaps left by older records."""
    now = datetime.now(timezone.utc)
    return Category(
        category_id=str(doc["_id"]),
        name=doc.get("name") or "",
        description=doc.get("description") or "",
        subcategories=doc.get("subcategories") or [],
        is_active=doc.get("isActive") is not False,
        created_at=doc.get("createdAt") or now,
        updated_at=doc.get("updatedAt") or now,
    )


class CategoryRepository:
    """Repository for category queries and inserts."""

    def __init__(self, store):
        self.store = store
        self.settings = None

    def set_settings(self, settings):
        self.settings = settings

    @property
    def collection(self):
        return self.store.db[self.settings.categories_collection]

    async def find_page(
        self,
        search: str,
        sort_by: str,
        sort_order: str,
        skip: int,
        limit: int
    ) -> List[Category]:
        """Get one page of active categories."""
        cursor = (
            self.collection.find(build_category_filter(search))
            .sort(build_sort(sort_by, sort_order))
            .skip(skip)
            .limit(limit)
        )
        return [document_to_category(doc) async for doc in cursor]

    async def count(self, search: str) -> int:
        """Count active categories matching ``search``."""
        return await self.collection.count_documents(build_category_filter(search))

    async def find_active_by_name(self, name: str) -> Optional[Category]:
        """Case-insensitive exact lookup among active categories."""
        doc = await self.collection.find_one({
            "name": {"$regex": f"^{re.escape(name)}$", "$options": "i"},
            "isActive": True,
        })
        if doc:
            return document_to_category(doc)
        return None

    async def create(
        self,
        name: str,
        description: str,
        subcategories: List[str]
    ) -> Category:
        """Insert a new active category."""
        now = datetime.now(timezone.utc)
        doc = {
            "name": name,
            "description": description,
            "subcategories": subcategories,
            "isActive": True,
            "createdAt": now,
            "updatedAt": now,
        }
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id

        logger.info(f"Created category: {result.inserted_id} - {name}")
        return document_to_category(doc)
