"""
Tests for ProductController.
"""
import pytest

from app.schemas import Product, ProductUpdate, Session, SessionUser
from app.utils.exceptions import (
    MissingFieldsError,
    OperationFailedError,
    ProductNotFoundError,
    StoreUnavailableError,
    UnauthorizedError,
)

ADMIN = Session(user=SessionUser(id="admin-1", role="admin"))


def edit_form(**overrides):
    data = {
        "name": "Oxford Shirt",
        "description": "Long sleeve",
        "price": 150000,
        "category": "Shirts",
        "fabric": "Cotton",
        "images": ["/img/oxford.jpg"],
    }
    data.update(overrides)
    return ProductUpdate(**data)


async def test_list_featured_products(product_controller):
    result = await product_controller.list_products(featured=True)

    assert {p.product_id for p in result.products} == {"p1", "p3"}
    assert result.total_products == 2
    assert result.total_pages == 1


async def test_list_requires_store(product_controller, store):
    store.available = False

    with pytest.raises(StoreUnavailableError):
        await product_controller.list_products()


async def test_get_product(product_controller):
    product = await product_controller.get_product("p1")
    assert product.name == "Oxford Shirt"


async def test_get_missing_product(product_controller):
    with pytest.raises(ProductNotFoundError):
        await product_controller.get_product("nope")


async def test_update_applies_form(product_controller, product_repo):
    request = edit_form(
        sizes=["M", "L", "M", " "],
        colors=["Navy"],
        tags=["office", "office"],
        subcategory="",
        stock=None,
        featured=True,
    )

    product = await product_controller.update_product("p2", request, ADMIN)

    assert product.name == "Oxford Shirt"
    assert product.price == 150000
    assert product.sizes == ["M", "L"]
    assert product.tags == ["office"]
    assert product.stock == 0
    assert product.subcategory is None
    assert product.featured is True
    _, fields = product_repo.updates[-1]
    assert fields["subcategory"] is None
    assert fields["originalPrice"] is None


async def test_update_requires_admin(product_controller, product_repo):
    with pytest.raises(UnauthorizedError):
        await product_controller.update_product("p1", edit_form(), None)
    assert product_repo.updates == []


@pytest.mark.parametrize("overrides,field", [
    ({"images": []}, "images"),
    ({"price": None}, "price"),
    ({"fabric": "  "}, "fabric"),
    ({"category": None}, "category"),
])
async def test_update_validates_required_fields(product_controller, product_repo, overrides, field):
    with pytest.raises(MissingFieldsError) as exc_info:
        await product_controller.update_product("p1", edit_form(**overrides), ADMIN)

    assert field in exc_info.value.fields
    assert product_repo.updates == []


async def test_update_missing_product(product_controller):
    with pytest.raises(ProductNotFoundError):
        await product_controller.update_product("nope", edit_form(), ADMIN)


async def test_update_rejects_zero_price(product_controller, product_repo):
    with pytest.raises(MissingFieldsError) as exc_info:
        await product_controller.update_product("p1", edit_form(price=0), ADMIN)

    assert exc_info.value.fields == ["price"]
    assert product_repo.updates == []


async def test_unreadable_document_is_reported(product_controller, product_repo):
    async def unreadable(product_id):
        return Product.model_validate({"_id": product_id})

    product_repo.get_by_id = unreadable

    with pytest.raises(OperationFailedError) as exc_info:
        await product_controller.get_product("p1")
    assert exc_info.value.message == "Failed to fetch product"
