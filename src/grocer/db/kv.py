"""Key-value access to serialized blobs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import LargeBinary, cast, delete, select

from .models import KeyValueRecordORM
from .repository import session_scope

logger = logging.getLogger(__name__)

ITEMS_KEY = "grocery_items"
ORDERS_KEY = "order_history"
UNITS_KEY = "customUnits"


class KeyValueStore:
    """Read, overwrite and remove JSON text stored under fixed keys.

    Without a ``database_path`` the configured database file is used.
    """

    def __init__(self, database_path: Optional[Path] = None):
        self.database_path = database_path

    def read(self, key: str) -> Optional[bytes]:
        """Return the raw stored bytes; text decoding is left to the caller."""

        # sqlite3 decodes TEXT columns itself and fails on invalid UTF-8.
        stmt = select(cast(KeyValueRecordORM.value, LargeBinary)).where(
            KeyValueRecordORM.key == key
        )
        with session_scope(self.database_path) as session:
            return session.execute(stmt).scalar_one_or_none()

    def write(self, key: str, value: str) -> None:
        with session_scope(self.database_path) as session:
            session.merge(KeyValueRecordORM(key=key, value=value))
        logger.debug("Persisted %d bytes", len(value), extra={"store_key": key})

    def delete(self, key: str) -> None:
        with session_scope(self.database_path) as session:
            session.execute(delete(KeyValueRecordORM).where(KeyValueRecordORM.key == key))
        logger.debug("Removed persisted value", extra={"store_key": key})


__all__ = ["ITEMS_KEY", "ORDERS_KEY", "UNITS_KEY", "KeyValueStore"]
