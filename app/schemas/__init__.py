"""
Schemas module for the Storefront API.
"""
from .common import SortOrder, CamelModel
from .category import Category, CategoryCreate, CategoryListResponse
from .product import Product, ProductUpdate, ProductListResponse
from .session import Session, SessionUser, ADMIN_ROLE

__all__ = [
    # Common
    "SortOrder",
    "CamelModel",
    # Category
    "Category",
    "CategoryCreate",
    "CategoryListResponse",
    # Product
    "Product",
    "ProductUpdate",
    "ProductListResponse",
    # Session
    "Session",
    "SessionUser",
    "ADMIN_ROLE",
]
