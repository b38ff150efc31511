"""
NoteFlow Backend — Embedded Database Plumbing
===============================================

What:  Async SQLAlchemy declarative base, engine and session factory helpers.
Why:   The embedded-database store (services/sql_store.py) needs an engine and
       a session factory; keeping their construction here mirrors how the
       ORM model (models/note.py) registers against a shared Base.
How:   Engines are created on demand from a URL rather than at import time,
       so the default JSON-file deployment never opens a database.
Who:   Used by SQLStore; Base is imported by models/note.py.

Engine Configuration:
    SQLite is file-based and single-writer, so no pool sizing is needed.
    Parent directories of the database file are created on demand so that
    the default URL (./data/notes.db) works on a fresh checkout.
"""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from noteflow.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def create_engine(database_url: str) -> AsyncEngine:
    """
    Build an async engine for the given URL.

    Echoes SQL only in DEBUG mode; SQL logging is noisy otherwise.
    """
    _ensure_sqlite_directory(database_url)
    return create_async_engine(
        database_url,
        echo=settings.log_level == "DEBUG",
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Session factory with expire_on_commit=False.

    Rows are turned into plain dicts before the session closes, but keeping
    attributes loaded after commit avoids surprise lazy loads.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return
    database = url.database
    if not database or database == ":memory:":
        return
    parent = Path(database).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # The engine will report the real failure on first connect
        logger.warning("Could not create database directory %s: %s", parent, e)
