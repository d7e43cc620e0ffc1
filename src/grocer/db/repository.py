"""SQLite engine and session management for the key-value store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from grocer.config import get_settings
from grocer.db.models import Base

_engines: dict[Path, Engine] = {}
_session_factories: dict[Path, sessionmaker[Session]] = {}
logger = logging.getLogger(__name__)


def _resolve_path(database_path: Path | None) -> Path:
    return (database_path or get_settings().database_path).expanduser().resolve()


def _set_sqlite_pragmas(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA busy_timeout = 5000")
        cursor.execute("PRAGMA synchronous = NORMAL")
    finally:
        cursor.close()


def get_engine(database_path: Path | None = None) -> Engine:
    """Return the engine for ``database_path`` (the configured file by default).

    The schema is created the first time a given file is opened.
    """

    path = _resolve_path(database_path)
    engine = _engines.get(path)
    if engine is not None:
        return engine

    path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{path}", future=True, echo=False)
    event.listen(engine, "connect", _set_sqlite_pragmas)
    Base.metadata.create_all(engine)

    _engines[path] = engine
    _session_factories[path] = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True
    )
    logger.debug("Opened key-value database at %s", path)
    return engine


def get_session(database_path: Path | None = None) -> Session:
    """Return a new session bound to the engine for ``database_path``."""

    path = _resolve_path(database_path)
    if path not in _session_factories:
        get_engine(path)
    return _session_factories[path]()


@contextmanager
def session_scope(database_path: Path | None = None) -> Generator[Session, None, None]:
    """Yield a session that commits on success and rolls back on error."""

    session = get_session(database_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def reset_repository_state() -> None:
    """Dispose every cached engine (intended for testing)."""

    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
    _session_factories.clear()


__all__ = ["get_engine", "get_session", "session_scope", "reset_repository_state"]
