"""Order history storage."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from grocer.db.kv import ORDERS_KEY, KeyValueStore
from grocer.models import Order

from .codec import decode_orders, encode_orders

logger = logging.getLogger(__name__)


class OrderLog:
    """Ordered history of placed orders, oldest first.

    Orders are only ever appended; the sole removal is ``clear_all``.
    """

    def __init__(self, kv: KeyValueStore, key: str = ORDERS_KEY):
        self._kv = kv
        self._key = key
        self._orders: list[Order] = decode_orders(key, kv.read(key)) or []

    def all(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def newest_first(self) -> tuple[Order, ...]:
        return tuple(reversed(self._orders))

    def get(self, order_id: UUID) -> Optional[Order]:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def __len__(self) -> int:
        return len(self._orders)

    def append(self, order: Order) -> None:
        self._orders.append(order)
        self.save()

    def clear_all(self) -> None:
        """Drop every order and erase the persisted history."""

        self._orders = []
        self._kv.delete(self._key)
        logger.info("Cleared order history")

    def save(self) -> None:
        self._kv.write(self._key, encode_orders(self._orders))


__all__ = ["OrderLog"]
