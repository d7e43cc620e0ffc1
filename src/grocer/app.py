"""Process-wide application state shared by every front end."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from grocer.db.kv import KeyValueStore
from grocer.models import GroceryItem, ItemCategory, Order
from grocer.store import CatalogStore, OrderLog, UnitRegistry
from grocer.validation import NewItemInput, ensure_cart_quantities


class GroceryApp:
    """Single owner of the catalog, order log and unit registry."""

    def __init__(self, kv: Optional[KeyValueStore] = None):
        self.kv = kv or KeyValueStore()
        self.orders = OrderLog(self.kv)
        self.catalog = CatalogStore(self.kv, self.orders)
        self.units = UnitRegistry(self.kv)

    def add_item_from_input(
        self,
        data: NewItemInput,
        category: ItemCategory = ItemCategory.GROCERY,
    ) -> GroceryItem:
        """Add a validated item, remembering its unit if it is new."""

        if not self.units.recognizes(data.unit):
            self.units.add_custom_unit(data.unit)
        return self.catalog.add_item(
            name=data.name,
            quantity=data.quantity,
            weight_amount=data.weight_amount,
            unit=data.unit,
            price_per_kg=data.price_per_kg,
            category=category,
        )

    def checkout(self) -> Optional[Order]:
        ensure_cart_quantities(self.catalog.cart_items())
        return self.catalog.place_order()


@lru_cache
def get_app() -> GroceryApp:
    """Return the shared application instance."""

    return GroceryApp()


def reset_app() -> None:
    """Forget the shared instance (intended for testing)."""

    get_app.cache_clear()


__all__ = ["GroceryApp", "get_app", "reset_app"]
