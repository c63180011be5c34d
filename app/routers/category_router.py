"""
Category API router.

Thin router that delegates to CategoryController.
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.core.dependencies import get_category_controller
from app.config.settings import get_settings
from app.core.security import get_session
from app.controllers import CategoryController
from app.schemas import Category, CategoryCreate, CategoryListResponse, Session

settings = get_settings()

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=CategoryListResponse, response_model_exclude_none=True)
async def list_categories(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1),
    search: str = "",
    sort_by: str = Query(default="createdAt", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder"),
    controller: CategoryController = Depends(get_category_controller)
):
    """List active categories. Store failures are reported in the payload."""
    return await controller.list_categories(
        page=page,
        limit=limit,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order
    )


@router.post("", response_model=Category, status_code=201)
async def create_category(
    request: CategoryCreate,
    session: Optional[Session] = Depends(get_session),
    controller: CategoryController = Depends(get_category_controller)
):
    """Create a new category (admin only)."""
    return await controller.create_category(request, session)
