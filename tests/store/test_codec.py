"""Tests for decoding persisted blobs, including corrupt ones."""

from __future__ import annotations

import json
import logging

from sqlalchemy import text

from grocer.app import GroceryApp
from grocer.db.kv import ITEMS_KEY, ORDERS_KEY, UNITS_KEY
from grocer.db.repository import session_scope
from grocer.models import ItemCategory
from grocer.store import CatalogStore, OrderLog, UnitRegistry
from grocer.store.codec import decode_items, encode_items
from grocer.units import DEFAULT_UNITS


def test_missing_blob_decodes_to_none():
    assert decode_items(ITEMS_KEY, None) is None


def test_corrupt_items_start_empty_and_are_overwritten(kv, caplog):
    kv.write(ITEMS_KEY, "{not json")

    with caplog.at_level(logging.WARNING, logger="grocer.store.codec"):
        catalog = CatalogStore(kv, OrderLog(kv))

    assert catalog.items() == []
    assert any("Discarding undecodable value" in record.getMessage() for record in caplog.records)

    catalog.add_item("Rice", 1, 1, "kg", 10)
    assert [item["name"] for item in json.loads(kv.read(ITEMS_KEY))] == ["Rice"]


def test_invalid_utf8_text_starts_empty(kv, caplog):
    kv.write(ITEMS_KEY, "[]")
    kv.write(ORDERS_KEY, "[]")
    with session_scope() as session:
        session.execute(
            text("UPDATE kv_records SET value = CAST(X'5B7B22FF' AS TEXT) WHERE key = :key"),
            {"key": ITEMS_KEY},
        )
        session.execute(
            text("UPDATE kv_records SET value = X'FFFE00' WHERE key = :key"),
            {"key": ORDERS_KEY},
        )

    with caplog.at_level(logging.WARNING, logger="grocer.store.codec"):
        app = GroceryApp(kv)

    assert app.catalog.items() == []
    assert app.orders.all() == ()
    assert [r.store_key for r in caplog.records if r.name == "grocer.store.codec"] == [
        ORDERS_KEY,
        ITEMS_KEY,
    ]

    app.catalog.add_item("Rice", 1, 1, "kg", 10)
    assert json.loads(kv.read(ITEMS_KEY))[0]["name"] == "Rice"


def test_schema_mismatch_is_treated_as_no_state(kv):
    kv.write(ITEMS_KEY, json.dumps([{"name": "Rice"}]))
    kv.write(ORDERS_KEY, json.dumps({"orders": []}))
    kv.write(UNITS_KEY, json.dumps([1, {"unit": "g"}]))

    assert CatalogStore(kv, OrderLog(kv)).items() == []
    assert OrderLog(kv).all() == ()
    assert UnitRegistry(kv).known_units() == DEFAULT_UNITS


def test_encoded_items_use_persisted_field_names(catalog):
    item = catalog.add_item("Milk", 2, 1, "L", 50, category=ItemCategory.CART)
    payload = json.loads(encode_items([item]))

    assert payload == [
        {
            "id": str(item.id),
            "name": "Milk",
            "quantity": 2,
            "weightAmount": 1.0,
            "unit": "L",
            "pricePerKg": 50.0,
            "isBought": False,
            "category": "cart",
            "cartQuantity": 1,
        }
    ]
