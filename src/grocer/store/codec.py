"""JSON encoding of persisted collections."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from grocer.models import GroceryItem, Order

logger = logging.getLogger(__name__)

_ITEMS = TypeAdapter(list[GroceryItem])
_ORDERS = TypeAdapter(list[Order])
_UNITS = TypeAdapter(list[str])


def _decode(adapter: TypeAdapter, key: str, blob: Optional[bytes]) -> Optional[list]:
    if blob is None:
        return None
    try:
        return adapter.validate_json(blob)
    except ValidationError as exc:
        logger.warning(
            "Discarding undecodable value (%d error(s)): %s",
            exc.error_count(),
            exc.errors(include_url=False)[0]["msg"],
            extra={"store_key": key},
        )
        return None


def encode_items(items: Sequence[GroceryItem]) -> str:
    return _ITEMS.dump_json(list(items), by_alias=True).decode("utf-8")


def decode_items(key: str, blob: Optional[bytes]) -> Optional[list[GroceryItem]]:
    """Return the stored items, or ``None`` when nothing usable is stored."""

    return _decode(_ITEMS, key, blob)


def encode_orders(orders: Sequence[Order]) -> str:
    return _ORDERS.dump_json(list(orders), by_alias=True).decode("utf-8")


def decode_orders(key: str, blob: Optional[bytes]) -> Optional[list[Order]]:
    return _decode(_ORDERS, key, blob)


def encode_units(units: Sequence[str]) -> str:
    return _UNITS.dump_json(list(units)).decode("utf-8")


def decode_units(key: str, blob: Optional[bytes]) -> Optional[list[str]]:
    return _decode(_UNITS, key, blob)


__all__ = [
    "encode_items",
    "decode_items",
    "encode_orders",
    "decode_orders",
    "encode_units",
    "decode_units",
]
