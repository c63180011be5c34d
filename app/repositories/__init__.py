"""
Repositories module for the Storefront API.
"""
from .base import BaseRepository
from .category_repository import CategoryRepository
from .product_repository import ProductRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "ProductRepository",
]
