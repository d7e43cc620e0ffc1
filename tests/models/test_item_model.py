"""Tests for the grocery item model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from grocer.models import GroceryItem, ItemCategory


def _item(**overrides) -> GroceryItem:
    fields = dict(name="Rice", quantity=3, weight_amount=2, unit="kg", price_per_kg=10)
    fields.update(overrides)
    return GroceryItem(**fields)


def test_defaults():
    item = _item()
    assert item.is_bought is False
    assert item.category is ItemCategory.GROCERY
    assert item.cart_quantity == 1
    assert item.id != _item().id


def test_total_price():
    assert _item().total_price == pytest.approx(60.0)


def test_total_price_for_unconverted_unit_treats_amount_as_grams():
    item = _item(weight_amount=500, unit="ml", price_per_kg=20, quantity=1)
    assert item.weight_in_grams == 500
    assert item.total_price == pytest.approx(10.0)


def test_weight_label():
    assert _item().weight_label == "2 kg"
    assert _item(weight_amount=1.25, unit="L").weight_label == "1.25 L"


def test_in_cart_view_requires_cart_category_and_positive_quantity():
    assert not _item().in_cart_view
    assert _item(category=ItemCategory.CART).in_cart_view
    assert not _item(category=ItemCategory.CART, cart_quantity=0).in_cart_view


def test_id_is_frozen():
    item = _item()
    with pytest.raises(ValidationError):
        item.id = _item().id


def test_serializes_with_camel_case_fields_and_no_derived_values():
    payload = _item(category=ItemCategory.WISHLIST).model_dump(mode="json", by_alias=True)
    assert set(payload) == {
        "id",
        "name",
        "quantity",
        "weightAmount",
        "unit",
        "pricePerKg",
        "isBought",
        "category",
        "cartQuantity",
    }
    assert payload["category"] == "wishlist"


def test_accepts_camel_case_payload():
    item = GroceryItem.model_validate(
        {
            "id": "6f1c2f4e-8d7a-4a1f-9d57-2d0b6f3c8a11",
            "name": "Milk",
            "quantity": 1,
            "weightAmount": 1,
            "unit": "L",
            "pricePerKg": 50,
            "isBought": True,
            "category": "cart",
            "cartQuantity": 4,
        }
    )
    assert item.is_bought is True
    assert item.category is ItemCategory.CART
    assert item.cart_quantity == 4
