"""Persistence layer backed by SQLite."""

from grocer.db.kv import ITEMS_KEY, ORDERS_KEY, UNITS_KEY, KeyValueStore
from grocer.db.repository import reset_repository_state, session_scope

__all__ = [
    "ITEMS_KEY",
    "ORDERS_KEY",
    "UNITS_KEY",
    "KeyValueStore",
    "reset_repository_state",
    "session_scope",
]
