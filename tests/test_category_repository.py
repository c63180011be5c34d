"""
Tests for category query construction and document conversion.
"""
from datetime import datetime, timezone

from bson import ObjectId

from app.repositories.category_repository import (
    build_category_filter,
    build_sort,
    document_to_category,
)


def test_filter_without_search_only_requires_active():
    assert build_category_filter("") == {"isActive": True}


def test_filter_with_search_matches_name_or_description():
    query = build_category_filter("shoe")
    assert query["isActive"] is True
    assert query["$or"] == [
        {"name": {"$regex": "shoe", "$options": "i"}},
        {"description": {"$regex": "shoe", "$options": "i"}},
    ]


def test_filter_escapes_regex_metacharacters():
    query = build_category_filter("a+b(c)")
    assert query["$or"][0]["name"]["$regex"] == r"a\+b\(c\)"


def test_sort_directions():
    assert build_sort("name", "asc") == [("name", 1), ("_id", 1)]
    assert build_sort("name", "desc") == [("name", -1), ("_id", -1)]
    assert build_sort("name", "sideways") == [("name", -1), ("_id", -1)]


def test_sort_accepts_snake_case_and_falls_back_on_unknown_fields():
    assert build_sort("created_at", "asc")[0] == ("createdAt", 1)
    assert build_sort("$where", "asc")[0] == ("createdAt", 1)


def test_document_conversion_fills_defaults():
    oid = ObjectId()
    category = document_to_category({"_id": oid, "name": "Hats"})

    assert category.category_id == str(oid)
    assert category.description == ""
    assert category.subcategories == []
    assert category.is_active is True
    assert category.product_count == 0


def test_document_conversion_keeps_stored_values():
    created = datetime(2023, 5, 1, tzinfo=timezone.utc)
    category = document_to_category({
        "_id": "abc",
        "name": "Hats",
        "description": "Caps",
        "subcategories": ["Beanie"],
        "isActive": False,
        "createdAt": created,
        "updatedAt": created,
    })

    assert category.is_active is False
    assert category.subcategories == ["Beanie"]
    assert category.created_at == created


def test_category_serializes_with_camel_case_keys():
    category = document_to_category({"_id": "abc", "name": "Hats"})
    data = category.model_dump(by_alias=True)

    assert {"_id", "name", "description", "subcategories", "productCount",
            "isActive", "createdAt", "updatedAt"} == set(data)
