"""Order snapshot models."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from grocer.units import clean_number, grams_of

from .item import GroceryItem


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderItem(BaseModel):
    """Copy of an item's fields taken when the order was placed."""

    name: str
    quantity: int
    weight_amount: float
    unit: str
    price_per_kg: float

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    @classmethod
    def snapshot(cls, item: GroceryItem) -> "OrderItem":
        """Snapshot a cart item, using its cart quantity as the ordered quantity."""

        return cls(
            name=item.name,
            quantity=item.cart_quantity,
            weight_amount=item.weight_amount,
            unit=item.unit,
            price_per_kg=item.price_per_kg,
        )

    @property
    def weight_in_grams(self) -> float:
        return grams_of(self.weight_amount, self.unit)

    @property
    def total_price(self) -> float:
        return self.weight_in_grams / 1000 * self.price_per_kg * self.quantity

    @property
    def weight_label(self) -> str:
        return f"{clean_number(self.weight_amount)}{self.unit}"


class Order(BaseModel):
    """Immutable record of a placed order."""

    id: UUID = Field(default_factory=uuid4)
    date: datetime = Field(default_factory=_utcnow)
    items: tuple[OrderItem, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    @property
    def total_weight(self) -> float:
        """Total weight in grams across every ordered unit."""

        return sum(item.weight_in_grams * item.quantity for item in self.items)

    @property
    def total(self) -> float:
        return sum(item.total_price for item in self.items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


__all__ = ["OrderItem", "Order"]
