"""Tests for the order history log."""

from __future__ import annotations

from grocer.db.kv import ORDERS_KEY
from grocer.models import Order, OrderItem
from grocer.store import OrderLog


def _order(name: str) -> Order:
    return Order(items=(OrderItem(name=name, quantity=1, weight_amount=1, unit="kg", price_per_kg=10),))


def test_append_keeps_oldest_first(order_log):
    first, second = _order("a"), _order("b")
    order_log.append(first)
    order_log.append(second)

    assert order_log.all() == (first, second)
    assert order_log.newest_first() == (second, first)
    assert len(order_log) == 2
    assert order_log.get(second.id) == second


def test_history_survives_reload(kv, order_log):
    order = _order("rice")
    order_log.append(order)

    reloaded = OrderLog(kv)
    assert reloaded.all() == (order,)
    restored = reloaded.all()[0]
    assert restored.date == order.date
    assert restored.items[0].total_price == order.items[0].total_price


def test_clear_all_erases_persisted_history(kv, order_log):
    order_log.append(_order("rice"))

    order_log.clear_all()

    assert order_log.all() == ()
    assert kv.read(ORDERS_KEY) is None
    assert OrderLog(kv).all() == ()


def test_clear_all_on_empty_log(order_log):
    order_log.clear_all()
    assert order_log.all() == ()
