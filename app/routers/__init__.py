"""
Routers module for the Storefront API.
"""
from . import category_router
from . import product_router

__all__ = [
    "category_router",
    "product_router",
]
