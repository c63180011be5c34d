"""
Core module for Storefront API setup.
"""
from .app import create_app
from .dependencies import get_category_controller, get_product_controller
from .security import get_session

__all__ = [
    "create_app",
    "get_category_controller",
    "get_product_controller",
    "get_session",
]
