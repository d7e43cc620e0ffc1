"""Command-line interface for Grocer."""

from __future__ import annotations

import json
from typing import List, NoReturn, Optional
from uuid import UUID

import typer

from grocer.app import GroceryApp, get_app
from grocer.billing import render_order, render_receipt, summarize_cart
from grocer.config import get_settings
from grocer.logging_utils import configure_logging
from grocer.models import GroceryItem, ItemCategory
from grocer.units import clean_number, format_currency
from grocer.validation import InvalidInputError, validate_cart_quantity, validate_new_item
from grocer.views import BoughtFilter, ItemQuery, SortOption, query_items

app = typer.Typer(help="Grocery list, cart and order history commands.")

SHORT_ID = 8


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _resolve_item(state: GroceryApp, token: str) -> GroceryItem:
    """Find the item whose id starts with ``token``."""

    prefix = token.strip().lower()
    matches = [item for item in state.catalog.items() if str(item.id).startswith(prefix)]
    if not prefix or not matches:
        _fail(f"No item matches id '{token}'.")
    if len(matches) > 1:
        _fail(f"Id '{token}' is ambiguous ({len(matches)} items match).")
    return matches[0]


def _positions(state: GroceryApp, category: ItemCategory) -> dict[UUID, int]:
    """Map item ids to the positions accepted by ``delete``."""

    in_category = [item for item in state.catalog.items() if item.category == category]
    return {item.id: position for position, item in enumerate(in_category)}


def _format_row(item: GroceryItem, position: int, currency: str) -> str:
    mark = "x" if item.is_bought else " "
    row = (
        f"{position:>3} [{mark}] {str(item.id)[:SHORT_ID]}  {item.name}"
        f"  qty {item.quantity}  {item.weight_label}"
        f"  {format_currency(item.price_per_kg, currency)}/kg"
        f"  = {format_currency(item.total_price, currency)}"
    )
    if item.category == ItemCategory.CART:
        row += f"  in cart: {item.cart_quantity}"
    return row


@app.command()
def add(
    name: str = typer.Argument(..., help="Item name."),
    quantity: int = typer.Option(1, "--quantity", "-q", help="Number of packs/pieces."),
    weight: float = typer.Option(..., "--weight", "-w", help="Weight per piece."),
    unit: str = typer.Option("kg", "--unit", "-u", help="Weight unit (custom units are remembered)."),
    price: float = typer.Option(..., "--price", "-p", help="Price per kg."),
    category: ItemCategory = typer.Option(ItemCategory.GROCERY, "--category", "-c"),
) -> None:
    """Add an item to the grocery list (or another category)."""

    try:
        data = validate_new_item(
            name=name,
            quantity=quantity,
            weight_amount=weight,
            unit=unit,
            price_per_kg=price,
        )
    except InvalidInputError as exc:
        _fail(f"Invalid input: {exc}")

    item = get_app().add_item_from_input(data, category=category)
    typer.echo(f"Added {item.name} ({str(item.id)[:SHORT_ID]}) to {item.category.value}.")


@app.command("list")
def list_items(
    category: ItemCategory = typer.Argument(ItemCategory.GROCERY, help="Which list to show."),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by name."),
    unit: Optional[str] = typer.Option(None, "--unit", help="Filter by unit."),
    bought: BoughtFilter = typer.Option(BoughtFilter.ALL, "--bought"),
    sort: SortOption = typer.Option(SortOption.NONE, "--sort"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of text."),
) -> None:
    """Show one category, optionally filtered and sorted."""

    state = get_app()
    query = ItemQuery(search=search, unit_search=unit, bought=bought, sort=sort)
    items = query_items(state.catalog.in_category(category), query)

    if as_json:
        payload = [item.model_dump(mode="json", by_alias=True) for item in items]
        typer.echo(json.dumps(payload, indent=2))
        return

    if not items:
        typer.echo(f"No {category.value} items.")
        return

    currency = get_settings().currency_symbol
    positions = _positions(state, category)
    for item in items:
        typer.echo(_format_row(item, positions[item.id], currency))


@app.command()
def toggle(item_id: str = typer.Argument(..., help="Item id or unique prefix.")) -> None:
    """Flip the bought mark on an item."""

    state = get_app()
    item = _resolve_item(state, item_id)
    state.catalog.toggle_bought(item.id)
    status = "bought" if item.is_bought else "not bought"
    typer.echo(f"{item.name} marked {status}.")


@app.command()
def delete(
    category: ItemCategory = typer.Argument(..., help="Category the positions refer to."),
    positions: List[int] = typer.Argument(..., help="Positions as printed by `list`."),
) -> None:
    """Delete items by their position within a category."""

    removed = get_app().catalog.delete_items(category, positions)
    typer.echo(f"Deleted {removed} item(s).")


@app.command("to-cart")
def to_cart(item_id: str = typer.Argument(..., help="Item id or unique prefix.")) -> None:
    """Move an item into the cart."""

    state = get_app()
    item = _resolve_item(state, item_id)
    state.catalog.move_to_cart(item.id)
    typer.echo(f"{item.name} moved to cart (quantity {item.cart_quantity}).")


@app.command("to-wishlist")
def to_wishlist(item_id: str = typer.Argument(..., help="Item id or unique prefix.")) -> None:
    """Move an item onto the wishlist."""

    state = get_app()
    item = _resolve_item(state, item_id)
    state.catalog.move_to_wishlist(item.id)
    typer.echo(f"{item.name} moved to wishlist.")


@app.command()
def inc(item_id: str = typer.Argument(..., help="Item id or unique prefix.")) -> None:
    """Increase an item's cart quantity by one."""

    state = get_app()
    item = _resolve_item(state, item_id)
    try:
        validate_cart_quantity(item.cart_quantity + 1)
    except InvalidInputError as exc:
        _fail(str(exc))
    state.catalog.increment_cart_quantity(item.id)
    typer.echo(f"{item.name}: {item.cart_quantity} in cart.")


@app.command()
def dec(item_id: str = typer.Argument(..., help="Item id or unique prefix.")) -> None:
    """Decrease an item's cart quantity by one (zero hides it from the cart)."""

    state = get_app()
    item = _resolve_item(state, item_id)
    state.catalog.decrement_cart_quantity(item.id)
    typer.echo(f"{item.name}: {item.cart_quantity} in cart.")


@app.command("set-qty")
def set_qty(
    item_id: str = typer.Argument(..., help="Item id or unique prefix."),
    quantity: int = typer.Argument(..., help="New cart quantity (1-100)."),
) -> None:
    """Set an item's cart quantity."""

    state = get_app()
    item = _resolve_item(state, item_id)
    try:
        validate_cart_quantity(quantity)
    except InvalidInputError as exc:
        _fail(str(exc))
    state.catalog.set_cart_quantity(item.id, quantity)
    typer.echo(f"{item.name}: {item.cart_quantity} in cart.")


@app.command()
def bill() -> None:
    """Show cart totals."""

    cart = get_app().catalog.cart_items()
    if not cart:
        typer.echo("No items in cart.")
        return

    currency = get_settings().currency_symbol
    summary = summarize_cart(cart)
    typer.echo(f"Total Items: {summary.total_items}")
    typer.echo(f"Total Weight: {summary.total_weight_kg:.2f} kg")
    typer.echo(f"Grand Total: {format_currency(summary.total_cost, currency)}")


@app.command()
def receipt() -> None:
    """Print a plain-text receipt for the cart."""

    cart = get_app().catalog.cart_items()
    if not cart:
        typer.echo("No items in cart.")
        return
    typer.echo(render_receipt(cart, get_settings().currency_symbol))


@app.command()
def checkout() -> None:
    """Place an order for everything in the cart."""

    try:
        order = get_app().checkout()
    except InvalidInputError as exc:
        _fail(str(exc))

    if order is None:
        typer.echo("Cart is empty; nothing ordered.")
        return
    currency = get_settings().currency_symbol
    typer.echo("Order placed.")
    typer.echo(render_order(order, currency))


@app.command()
def orders(
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of text."),
) -> None:
    """List past orders, newest first."""

    history = get_app().orders.newest_first()
    if as_json:
        payload = [order.model_dump(mode="json", by_alias=True) for order in history]
        typer.echo(json.dumps(payload, indent=2))
        return

    if not history:
        typer.echo("No orders yet.")
        return
    currency = get_settings().currency_symbol
    for order in history:
        typer.echo(render_order(order, currency))
    total_weight = sum(order.total_weight for order in history)
    typer.echo(f"{len(history)} order(s), {clean_number(total_weight / 1000)} kg overall.")


@app.command("clear-orders")
def clear_orders(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Erase the whole order history."""

    if not yes:
        typer.confirm("Clear all order history?", abort=True)
    get_app().orders.clear_all()
    typer.echo("Order history cleared.")


@app.command()
def units() -> None:
    """List known units, most recently added first."""

    for unit in get_app().units.known_units():
        typer.echo(unit)


@app.command("add-unit")
def add_unit(unit: str = typer.Argument(..., help="Unit name to remember.")) -> None:
    """Remember a custom unit."""

    if get_app().units.add_custom_unit(unit):
        typer.echo(f"Added unit '{unit.strip()}'.")
    else:
        typer.echo(f"Unit '{unit.strip()}' is already known.")


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m grocer`."""
    app(prog_name="grocer", args=argv)


if __name__ == "__main__":
    main()
