"""Shared pytest fixtures for the Grocer test suite."""

from __future__ import annotations

import logging

import pytest

from grocer.app import GroceryApp, reset_app
from grocer.config import get_settings
from grocer.db.kv import KeyValueStore
from grocer.db.repository import reset_repository_state
from grocer.store import CatalogStore, OrderLog, UnitRegistry


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Ensure each test uses an isolated SQLite database location."""

    db_path = tmp_path / "test_grocer.db"
    monkeypatch.setenv("GROCER_DATABASE_PATH", str(db_path))
    get_settings.cache_clear()
    reset_repository_state()
    reset_app()
    yield
    reset_app()
    reset_repository_state()
    monkeypatch.delenv("GROCER_DATABASE_PATH", raising=False)
    get_settings.cache_clear()


@pytest.fixture()
def kv() -> KeyValueStore:
    return KeyValueStore()


@pytest.fixture()
def order_log(kv) -> OrderLog:
    return OrderLog(kv)


@pytest.fixture()
def catalog(kv, order_log) -> CatalogStore:
    return CatalogStore(kv, order_log)


@pytest.fixture()
def registry(kv) -> UnitRegistry:
    return UnitRegistry(kv)


@pytest.fixture()
def grocery_app(kv) -> GroceryApp:
    return GroceryApp(kv)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by configure_logging during a test."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
