"""Pydantic models defining the grocery data contracts."""

from grocer.models.item import GroceryItem, ItemCategory
from grocer.models.order import Order, OrderItem

__all__ = [
    "GroceryItem",
    "ItemCategory",
    "Order",
    "OrderItem",
]
