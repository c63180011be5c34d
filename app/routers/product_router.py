"""
Product API router.

Thin router that delegates to ProductController.
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.core.dependencies import get_product_controller
from app.config.settings import get_settings
from app.core.security import get_session
from app.controllers import ProductController
from app.schemas import Product, ProductUpdate, ProductListResponse, Session

settings = get_settings()

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1),
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    search: str = "",
    sort_by: str = Query(default="createdAt", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
    controller: ProductController = Depends(get_product_controller)
):
    """List products."""
    return await controller.list_products(
        page=page,
        limit=limit,
        category=category,
        featured=featured,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    controller: ProductController = Depends(get_product_controller)
):
    """Get a specific product."""
    return await controller.get_product(product_id)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    request: ProductUpdate,
    session: Optional[Session] = Depends(get_session),
    controller: ProductController = Depends(get_product_controller)
):
    """Update a product from the admin edit form."""
    return await controller.update_product(product_id, request, session)
