"""Grocery item models."""

from __future__ import annotations

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from grocer.units import clean_number, grams_of


class ItemCategory(str, Enum):
    """Mutually exclusive list an item currently belongs to."""

    GROCERY = "grocery"
    WISHLIST = "wishlist"
    CART = "cart"


class GroceryItem(BaseModel):
    """Single grocery, wishlist or cart entry.

    Mutated in place by the catalog store; ``id`` never changes after
    creation. ``cart_quantity`` only matters while the item is in the cart.
    """

    id: UUID = Field(default_factory=uuid4, frozen=True)
    name: str
    quantity: int
    weight_amount: float
    unit: str
    price_per_kg: float
    is_bought: bool = Field(default=False)
    category: ItemCategory = Field(default=ItemCategory.GROCERY)
    cart_quantity: int = Field(default=1)

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    @property
    def weight_in_grams(self) -> float:
        return grams_of(self.weight_amount, self.unit)

    @property
    def total_price(self) -> float:
        return self.weight_in_grams / 1000 * self.price_per_kg * self.quantity

    @property
    def weight_label(self) -> str:
        return f"{clean_number(self.weight_amount)} {self.unit}"

    @property
    def in_cart_view(self) -> bool:
        return self.category is ItemCategory.CART and self.cart_quantity > 0


__all__ = ["ItemCategory", "GroceryItem"]
