"""
NoteFlow Backend — Note Service (Business Logic)
==================================================

What:  List, create, update and delete notes over a whole-collection store.
Why:   Keeps validation, lookup and merge rules independent of HTTP concerns.
How:   Each mutation reads the full collection, changes it in memory, and
       writes the full collection back through the injected NoteStore.
Who:   Called by route handlers in routes/notes.py.

Request Flow (mutations):
    ┌──────────┐    ┌──────────┐    ┌──────────────┐    ┌──────────┐
    │  Route   │───▶│ load_all │───▶│ scan / merge │───▶│ save_all │
    └──────────┘    └──────────┘    └──────────────┘    └──────────┘

    save_all() returning False → StorageError (500); nothing is reported
    as changed to the client.

Concurrency:
    The event loop interleaves requests. Without coordination two mutations
    can both load the same collection and the second save silently drops
    the first change. Every read-modify-write therefore runs under one
    asyncio.Lock owned by the service, so a single process never loses an
    update. Separate worker processes sharing one data file are still
    uncoordinated.
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import Request

from noteflow.config import settings
from noteflow.exceptions import NotFoundError, StorageError, ValidationError
from noteflow.models.note import (
    EDITABLE_FIELDS,
    NoteRecord,
    new_note_id,
    note_id_of,
    utc_timestamp,
)
from noteflow.schemas.note import NoteCreate, NoteUpdate
from noteflow.services.store_base import NoteStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): full collection, verbatim
        - create_note(): validate, default, stamp, append
        - update_note(): linear lookup, merge supplied fields, stamp
        - delete_note(): filter out by identifier

    Lookups are linear scans; collections are small and there is no index.
    """

    def __init__(self) -> None:
        self._write_lock = asyncio.Lock()

    async def list_notes(self, store: NoteStore) -> List[NoteRecord]:
        """Return every stored note in stored order, unfiltered."""
        return await store.load_all()

    async def create_note(self, store: NoteStore, payload: NoteCreate) -> NoteRecord:
        """
        Create a note and append it to the collection.

        Rules:
            - title and content both empty (or missing) → ValidationError
            - empty title → settings.default_title
            - empty content → ""
            - empty color → settings.default_color

        Raises:
            ValidationError: Neither title nor content supplied (→ 400)
            StorageError: The store failed to persist (→ 500)
        """
        if not payload.title and not payload.content:
            raise ValidationError(message="Title or content required", field="title")

        note: NoteRecord = {
            "id": new_note_id(),
            "title": payload.title or settings.default_title,
            "content": payload.content or "",
            "color": payload.color or settings.default_color,
            "createdAt": utc_timestamp(),
        }

        async with self._write_lock:
            notes = await store.load_all()
            notes.append(note)
            await self._persist(store, notes, "Failed to save note")

        logger.info("Note created: %s", note["id"])
        return note

    async def update_note(
        self, store: NoteStore, note_id: str, payload: NoteUpdate
    ) -> NoteRecord:
        """
        Merge the supplied fields over an existing note.

        Only title, content and color can change; fields left out of the
        body (or sent as null) keep their stored values. updatedAt is
        stamped on every successful update.

        Raises:
            NotFoundError: No note with this identifier (→ 404, no write)
            StorageError: The store failed to persist (→ 500)
        """
        changes = payload.model_dump(include=set(EDITABLE_FIELDS), exclude_none=True)

        async with self._write_lock:
            notes = await store.load_all()
            index = self._find_index(notes, note_id)
            if index is None:
                raise NotFoundError(resource="note", resource_id=note_id)

            updated = {**notes[index], **changes, "updatedAt": utc_timestamp()}
            notes[index] = updated
            await self._persist(store, notes, "Failed to update note")

        logger.info("Note updated: %s (%s)", note_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    async def delete_note(self, store: NoteStore, note_id: str) -> None:
        """
        Remove the note with this identifier.

        Raises:
            NotFoundError: Collection length unchanged after filtering (→ 404)
            StorageError: The store failed to persist (→ 500)
        """
        async with self._write_lock:
            notes = await store.load_all()
            remaining = [note for note in notes if note_id_of(note) != note_id]
            if len(remaining) == len(notes):
                raise NotFoundError(resource="note", resource_id=note_id)
            await self._persist(store, remaining, "Failed to delete note")

        logger.info("Note deleted: %s", note_id)

    @staticmethod
    def _find_index(notes: List[NoteRecord], note_id: str) -> Optional[int]:
        for index, note in enumerate(notes):
            if note_id_of(note) == note_id:
                return index
        return None

    @staticmethod
    async def _persist(store: NoteStore, notes: List[NoteRecord], message: str) -> None:
        if not await store.save_all(notes):
            raise StorageError(
                message=message,
                context={"store": type(store).__name__, "note_count": len(notes)},
            )


def get_note_service(request: Request) -> NoteService:
    """FastAPI dependency returning the service create_app() attached to the app."""
    return request.app.state.note_service
