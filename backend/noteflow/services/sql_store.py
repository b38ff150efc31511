"""
NoteFlow Backend — Embedded Database Note Store
=================================================

What:  Persists the note collection in a SQLite table through SQLAlchemy's
       async engine (aiosqlite driver).
Why:   Same whole-collection contract as the JSON file, but every save runs
       inside one transaction, so a crash mid-write leaves the previous
       collection intact instead of a truncated file.
How:   One row per note (position, note_id, JSON text). save_all() deletes
       every row and inserts the new collection in a single transaction;
       load_all() reads rows ordered by position.
Who:   Built by noteflow.storage.build_store when STORAGE_BACKEND=sqlite.

Failure Policy:
    Identical to the JSON file store: read failures log and return [],
    write failures log and return False. The transaction is rolled back by
    the session context manager on any error.
"""

import json
import logging
from typing import List, Optional

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError

from noteflow.config import settings
from noteflow.database import Base, create_engine, create_session_factory
from noteflow.models.note import NoteRecord, NoteRow, note_id_of
from noteflow.services.store_base import NoteStore

logger = logging.getLogger(__name__)


class SQLStore(NoteStore):
    """Whole-table persistence in an embedded database."""

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or settings.database_url
        self.engine = create_engine(self.database_url)
        self._session_factory = create_session_factory(self.engine)
        self._initialized = False

    async def initialize(self) -> None:
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error("Failed to initialize notes table: %s", e)
            return
        self._initialized = True

    async def load_all(self) -> List[NoteRecord]:
        if not self._initialized:
            await self.initialize()

        try:
            async with self._session_factory() as session:
                result = await session.execute(select(NoteRow).order_by(NoteRow.position))
                rows = result.scalars().all()
                return [json.loads(row.data) for row in rows]
        except (SQLAlchemyError, ValueError) as e:
            logger.error("Error reading notes from database: %s", e)
            return []

    async def save_all(self, notes: List[NoteRecord]) -> bool:
        if not self._initialized:
            await self.initialize()

        try:
            rows = [
                NoteRow(
                    position=position,
                    note_id=note_id_of(note),
                    data=json.dumps(note, ensure_ascii=False),
                )
                for position, note in enumerate(notes)
            ]
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(delete(NoteRow))
                    session.add_all(rows)
        except (SQLAlchemyError, TypeError, ValueError) as e:
            logger.error("Error writing notes to database: %s", e)
            return False

        logger.debug("Wrote %d notes to database", len(notes))
        return True

    async def health_check(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Database health check failed: %s", e)
            return False
        return True

    async def close(self) -> None:
        await self.engine.dispose()
