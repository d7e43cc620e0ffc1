"""Stateful stores for items, orders and units."""

from grocer.store.catalog import CatalogStore
from grocer.store.orders import OrderLog
from grocer.store.units import UnitRegistry

__all__ = ["CatalogStore", "OrderLog", "UnitRegistry"]
