"""
Services module for the Storefront API.
"""
from .pagination import page_offset, total_pages
from .demo_catalog import DEMO_CATEGORIES, search_demo_categories

__all__ = [
    "page_offset",
    "total_pages",
    "DEMO_CATEGORIES",
    "search_demo_categories",
]
