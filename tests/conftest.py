"""
Shared fixtures: in-memory stand-ins for the MongoDB-backed repositories.
"""
import os
import tempfile
from datetime import datetime, timedelta, timezone

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="storefront-logs-"))
os.environ.setdefault("AUTH_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import OperationFailure

from app.controllers import CategoryController, ProductController
from app.core import create_app, get_category_controller, get_product_controller
from app.core.security import create_access_token
from app.schemas import Category, Product

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

_SORT_ATTRS = {
    "name": "name",
    "description": "description",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


class FakeStore:
    """Mimics BaseRepository.get_database()."""

    def __init__(self, available=True, error=None):
        self.available = available
        self.error = error

    async def get_database(self):
        if self.error is not None:
            raise self.error
        return "db" if self.available else None


class FakeCategoryRepository:
    def __init__(self, categories=None):
        self.categories = list(categories or [])
        self.fail_queries = False
        self.created = []

    def _matching(self, search):
        needle = search.lower()
        return [
            c for c in self.categories
            if c.is_active and (needle in c.name.lower() or needle in c.description.lower())
        ]

    async def find_page(self, search, sort_by, sort_order, skip, limit):
        if self.fail_queries:
            raise OperationFailure("query failed")
        attr = _SORT_ATTRS.get(sort_by, "created_at")
        rows = sorted(
            self._matching(search),
            key=lambda c: getattr(c, attr),
            reverse=sort_order != "asc",
        )
        return [c.model_copy() for c in rows[skip:skip + limit]]

    async def count(self, search):
        return len(self._matching(search))

    async def find_active_by_name(self, name):
        for c in self.categories:
            if c.is_active and c.name.lower() == name.lower():
                return c
        return None

    async def create(self, name, description, subcategories):
        now = datetime.now(timezone.utc)
        category = Category(
            category_id=f"cat{len(self.categories) + 1}",
            name=name,
            description=description,
            subcategories=subcategories,
            created_at=now,
            updated_at=now,
        )
        self.categories.append(category)
        self.created.append(category)
        return category


class FakeProductRepository:
    def __init__(self, products=None):
        self.products = {p.product_id: p for p in (products or [])}
        self.failing_categories = set()
        self.updates = []

    async def count_by_category(self, category_name):
        if category_name in self.failing_categories:
            raise OperationFailure(f"count failed for {category_name}")
        return sum(1 for p in self.products.values() if p.category == category_name)

    def _matching(self, query):
        rows = list(self.products.values())
        if "category" in query:
            rows = [p for p in rows if p.category == query["category"]]
        if "featured" in query:
            rows = [p for p in rows if p.featured == query["featured"]]
        return rows

    async def find_page(self, query, sort_by, sort_order, skip, limit):
        return self._matching(query)[skip:skip + limit]

    async def count(self, query):
        return len(self._matching(query))

    async def get_by_id(self, product_id):
        return self.products.get(product_id)

    async def update(self, product_id, fields):
        self.updates.append((product_id, fields))
        product = self.products.get(product_id)
        if product is None:
            return None
        data = product.model_dump()
        renamed = {"originalPrice": "original_price"}
        for key, value in fields.items():
            data[renamed.get(key, key)] = value
        updated = Product(**data)
        self.products[product_id] = updated
        return updated


def make_category(index, name, description="", active=True, subcategories=()):
    stamp = BASE_TIME + timedelta(days=index)
    return Category(
        category_id=f"c{index}",
        name=name,
        description=description,
        subcategories=list(subcategories),
        is_active=active,
        created_at=stamp,
        updated_at=stamp,
    )


def make_product(product_id, category, name="Item", featured=False, **extra):
    return Product(
        product_id=product_id,
        name=name,
        description=f"{name} description",
        price=100000,
        category=category,
        fabric="Cotton",
        images=["/img/a.jpg"],
        featured=featured,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
        **extra,
    )


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def category_repo():
    return FakeCategoryRepository([
        make_category(1, "Shirts", "Casual and formal shirts"),
        make_category(2, "Shoes", "Sneakers, boots and sandals"),
        make_category(3, "Bags", "Backpacks and totes"),
        make_category(4, "Archived", "No longer sold", active=False),
    ])


@pytest.fixture
def empty_category_repo():
    return FakeCategoryRepository()


@pytest.fixture
def product_repo():
    return FakeProductRepository([
        make_product("p1", "Shirts", "Oxford Shirt", featured=True),
        make_product("p2", "Shirts", "Linen Shirt"),
        make_product("p3", "Shoes", "Canvas Sneaker", featured=True),
    ])


@pytest.fixture
def category_controller(store, category_repo, product_repo):
    return CategoryController(store=store, category_repo=category_repo, product_repo=product_repo)


@pytest.fixture
def product_controller(store, product_repo):
    return ProductController(store=store, product_repo=product_repo)


@pytest.fixture
def app(category_controller, product_controller):
    application = create_app()
    application.dependency_overrides[get_category_controller] = lambda: category_controller
    application.dependency_overrides[get_product_controller] = lambda: product_controller
    return application


@pytest.fixture
def client(app):
    # No context manager: the lifespan would try to reach MongoDB.
    return TestClient(app)


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin-1', 'admin')}"}


@pytest.fixture
def customer_headers():
    return {"Authorization": f"Bearer {create_access_token('user-1', 'customer')}"}
