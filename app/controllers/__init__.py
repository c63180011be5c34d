"""
Controllers module for the Storefront API.
"""
from .category_controller import CategoryController
from .product_controller import ProductController

__all__ = [
    "CategoryController",
    "ProductController",
]
