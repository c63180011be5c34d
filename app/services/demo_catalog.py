"""
Built-in demo categories served when MongoDB is unreachable.

The set is fixed at import time. Searches hand out copies so callers can
never alter the shared records.
"""
from datetime import datetime, timezone
from typing import List, Tuple

from app.schemas import Category

_LOADED_AT = datetime.now(timezone.utc)


def _demo(category_id: str, name: str, description: str, subcategories, count: int) -> Category:
    return Category(
        category_id=category_id,
        name=name,
        description=description,
        subcategories=list(subcategories),
        product_count=count,
        is_active=True,
        created_at=_LOADED_AT,
        updated_at=_LOADED_AT,
    )


DEMO_CATEGORIES: Tuple[Category, ...] = (
    _demo(
        "1", "Elektronik", "Perangkat elektronik dan gadget",
        ("Smartphone", "Laptop", "Tablet"), 15,
    ),
    _demo(
        "2", "Fashion", "Pakaian dan aksesoris fashion",
        ("Baju", "Celana", "Sepatu", "Tas"), 8,
    ),
    _demo(
        "3", "Rumah Tangga", "Peralatan dan perlengkapan rumah tangga",
        ("Dapur", "Kamar Mandi"), 12,
    ),
)


def search_demo_categories(search: str = "") -> List[Category]:
    """Case-insensitive substring match over name or description."""
    needle = search.lower()
    return [
        category.model_copy(deep=True) for category in DEMO_CATEGORIES
        if needle in category.name.lower() or needle in category.description.lower()
    ]
