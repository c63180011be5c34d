"""
Product schemas.
"""
from pydantic import Field
from typing import List, Optional
from datetime import datetime

from .common import CamelModel


class Product(CamelModel):
    """Catalog product. ``category`` holds the category name, not its id."""
    product_id: str = Field(alias="_id")
    name: str
    description: str = ""
    price: int = 0
    original_price: Optional[int] = None
    category: str = ""
    subcategory: Optional[str] = None
    fabric: str = ""
    sizes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    stock: int = 0
    featured: bool = False
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProductUpdate(CamelModel):
    """Request to update a product from the admin edit form."""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = None
    original_price: Optional[int] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    fabric: Optional[str] = None
    sizes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    stock: Optional[int] = None
    featured: bool = False
    tags: List[str] = Field(default_factory=list)


class ProductListResponse(CamelModel):
    """Paginated product listing."""
    products: List[Product] = Field(default_factory=list)
    current_page: int
    total_pages: int
    total_products: int
