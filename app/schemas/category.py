"""
Category schemas.
"""
from pydantic import Field
from typing import Any, List, Optional
from datetime import datetime

from .common import CamelModel


class Category(CamelModel):
    """Category for organizing products."""
    category_id: str = Field(alias="_id")
    name: str
    description: str = ""
    subcategories: List[str] = Field(default_factory=list)
    product_count: int = 0
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class CategoryCreate(CamelModel):
    """Request to create a category.

    Fields are optional so missing values reach the controller and are
    reported as ``Missing required fields`` instead of a schema error.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    subcategories: Optional[Any] = None


class CategoryListResponse(CamelModel):
    """Paginated category listing."""
    categories: List[Category] = Field(default_factory=list)
    current_page: int
    total_pages: int
    total_categories: int
    is_demo: bool = False
    error: Optional[str] = None
