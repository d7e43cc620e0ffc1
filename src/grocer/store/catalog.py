"""In-memory item catalog with write-through persistence."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from grocer.db.kv import ITEMS_KEY, KeyValueStore
from grocer.models import GroceryItem, ItemCategory, Order, OrderItem

from .codec import decode_items, encode_items
from .orders import OrderLog

logger = logging.getLogger(__name__)


class CatalogStore:
    """Owns every grocery, wishlist and cart item.

    Each mutating method updates the in-memory list and then calls
    ``save()`` itself. Operations on an unknown id change nothing and
    write nothing.
    """

    def __init__(self, kv: KeyValueStore, order_log: OrderLog, key: str = ITEMS_KEY):
        self._kv = kv
        self._key = key
        self._order_log = order_log
        self._items: list[GroceryItem] = decode_items(key, kv.read(key)) or []

    @property
    def order_log(self) -> OrderLog:
        return self._order_log

    def save(self) -> None:
        self._kv.write(self._key, encode_items(self._items))

    # Views ---------------------------------------------------------------

    def items(self) -> List[GroceryItem]:
        return list(self._items)

    def get(self, item_id: UUID) -> Optional[GroceryItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def in_category(self, category: ItemCategory) -> List[GroceryItem]:
        if category == ItemCategory.CART:
            return self.cart_items()
        return [item for item in self._items if item.category == category]

    def grocery_items(self) -> List[GroceryItem]:
        return self.in_category(ItemCategory.GROCERY)

    def wishlist_items(self) -> List[GroceryItem]:
        return self.in_category(ItemCategory.WISHLIST)

    def cart_items(self) -> List[GroceryItem]:
        return [item for item in self._items if item.in_cart_view]

    # Mutations -----------------------------------------------------------

    def add_item(
        self,
        name: str,
        quantity: int,
        weight_amount: float,
        unit: str,
        price_per_kg: float,
        category: ItemCategory = ItemCategory.GROCERY,
    ) -> GroceryItem:
        """Append a new item. Inputs are trusted; callers validate them."""

        item = GroceryItem(
            name=name,
            quantity=quantity,
            weight_amount=weight_amount,
            unit=unit,
            price_per_kg=price_per_kg,
            is_bought=False,
            category=category,
            cart_quantity=1,
        )
        self._items.append(item)
        self.save()
        logger.debug("Added item %s to %s", item.id, category.value)
        return item

    def toggle_bought(self, item_id: UUID) -> None:
        item = self.get(item_id)
        if item is None:
            return
        item.is_bought = not item.is_bought
        self.save()

    def delete_items(self, category: ItemCategory, positions: Iterable[int]) -> int:
        """Delete items by their position in the ``category`` view.

        Positions outside the view are ignored. Returns how many items were
        removed.
        """

        # Category filter here is the raw one; zeroed cart items keep their slot.
        absolute = [
            index for index, item in enumerate(self._items) if item.category == category
        ]
        targets = {absolute[pos] for pos in set(positions) if 0 <= pos < len(absolute)}
        if not targets:
            return 0
        for index in sorted(targets, reverse=True):
            del self._items[index]
        self.save()
        return len(targets)

    def move_to_cart(self, item_id: UUID) -> None:
        item = self.get(item_id)
        if item is None:
            return
        item.category = ItemCategory.CART
        item.cart_quantity = max(1, item.cart_quantity)
        self.save()

    def move_to_wishlist(self, item_id: UUID) -> None:
        item = self.get(item_id)
        if item is None:
            return
        item.category = ItemCategory.WISHLIST
        self.save()

    def increment_cart_quantity(self, item_id: UUID) -> None:
        item = self.get(item_id)
        if item is None:
            return
        item.cart_quantity += 1
        self.save()

    def decrement_cart_quantity(self, item_id: UUID) -> None:
        """Lower the cart quantity, bottoming out at 0 (hidden, not deleted)."""

        item = self.get(item_id)
        if item is None:
            return
        if item.cart_quantity > 1:
            item.cart_quantity -= 1
        else:
            item.cart_quantity = 0
        self.save()

    def set_cart_quantity(self, item_id: UUID, quantity: int) -> None:
        item = self.get(item_id)
        if item is None:
            return
        item.cart_quantity = quantity
        self.save()

    def place_order(self) -> Optional[Order]:
        """Turn the visible cart into an order and empty the cart.

        Returns ``None`` without touching anything when the cart view is
        empty. Otherwise every cart-category item is removed, including
        ones whose quantity was lowered to zero.
        """

        snapshots = tuple(OrderItem.snapshot(item) for item in self.cart_items())
        if not snapshots:
            return None

        order = Order(items=snapshots)
        self._order_log.append(order)

        self._items = [item for item in self._items if item.category is not ItemCategory.CART]
        self.save()
        logger.info(
            "Placed order %s with %d line(s), total %.2f",
            order.id,
            len(order.items),
            order.total,
        )
        return order


__all__ = ["CatalogStore"]
