"""Cart bill summaries and plain-text receipts."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict

from grocer.models import GroceryItem, Order
from grocer.units import clean_number, format_currency

RULE = "-" * 20


class BillSummary(BaseModel):
    """Totals shown before checkout."""

    total_items: int
    total_weight_grams: float
    total_cost: float

    model_config = ConfigDict(frozen=True)

    @property
    def total_weight_kg(self) -> float:
        return self.total_weight_grams / 1000


def summarize_cart(items: Sequence[GroceryItem]) -> BillSummary:
    """Summarize cart items; negative cart quantities count as zero."""

    return BillSummary(
        total_items=sum(max(0, item.cart_quantity) for item in items),
        total_weight_grams=sum(item.weight_in_grams * max(0, item.cart_quantity) for item in items),
        total_cost=sum(item.total_price for item in items),
    )


def render_receipt(items: Sequence[GroceryItem], currency: str) -> str:
    summary = summarize_cart(items)
    lines = ["Grocery Receipt", RULE]
    for item in items:
        lines.append(
            f"{item.name} x{max(0, item.cart_quantity)} - {item.weight_label}"
            f" @ {format_currency(item.price_per_kg, currency)}/kg"
        )
        lines.append(f"Total: {format_currency(item.total_price, currency)}")
    lines.append(RULE)
    lines.append(f"Total Weight: {summary.total_weight_kg:.2f} kg")
    lines.append(f"Grand Total: {format_currency(summary.total_cost, currency)}")
    return "\n".join(lines)


def render_order(order: Order, currency: str) -> str:
    """Describe a placed order the way the order history lists it."""

    lines = [
        f"Order {order.id} ({order.date:%Y-%m-%d %H:%M})",
    ]
    for item in order.items:
        lines.append(
            f"  {item.name} x{item.quantity} {item.weight_label}"
            f" {format_currency(item.total_price, currency)}"
        )
    lines.append(f"  Weight: {clean_number(order.total_weight / 1000)} kg")
    lines.append(f"  Total: {format_currency(order.total, currency)}")
    return "\n".join(lines)


__all__ = ["BillSummary", "summarize_cart", "render_receipt", "render_order"]
