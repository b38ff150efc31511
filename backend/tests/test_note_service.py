"""
NoteFlow Backend — Note Service Unit Tests
============================================

What:  Tests for NoteService business logic (list, create, update, delete).
Why:   Validation, lookup and merge rules live here, independent of HTTP.
How:   InMemoryStore as the backing store (no disk, no HTTP).

What we test:
    ✅ Create: defaults, unique identifiers, title-or-content rule
    ✅ Update: only the target record changes, updatedAt stamped, 404 path
    ✅ Delete: exactly one removed, 404 path
    ✅ Persist failures surface as StorageError with the store unchanged
    ✅ Concurrent creates do not lose updates
"""

import asyncio
import re

import pytest

from noteflow.exceptions import NotFoundError, StorageError, ValidationError
from noteflow.schemas.note import NoteCreate, NoteUpdate
from noteflow.services.memory_store import InMemoryStore
from noteflow.services.note_service import NoteService

TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestNoteServiceCreate:
    """Tests for create_note."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_note_success(self, memory_store):
        note = await self.service.create_note(
            memory_store,
            NoteCreate(title="Test Note", content="Body", color="#ff0000"),
        )

        assert note["title"] == "Test Note"
        assert note["content"] == "Body"
        assert note["color"] == "#ff0000"
        assert TIMESTAMP.match(note["createdAt"])
        assert "updatedAt" not in note
        assert await memory_store.load_all() == [note]

    @pytest.mark.asyncio
    async def test_create_applies_defaults(self, memory_store):
        note = await self.service.create_note(memory_store, NoteCreate(content="only content"))

        assert note["title"] == "Untitled"
        assert note["color"] == "#ffffff"

        note = await self.service.create_note(memory_store, NoteCreate(title="only title"))
        assert note["content"] == ""

    @pytest.mark.asyncio
    async def test_create_assigns_unique_ids(self, memory_store):
        ids = set()
        for i in range(20):
            note = await self.service.create_note(memory_store, NoteCreate(title=f"Note {i}"))
            ids.add(note["id"])

        assert len(ids) == 20

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            NoteCreate(),
            NoteCreate(title="", content=""),
            NoteCreate(title=None, content="", color="#000000"),
        ],
    )
    async def test_create_rejects_empty_note(self, memory_store, sample_notes, payload):
        await memory_store.save_all(sample_notes)

        with pytest.raises(ValidationError, match="Title or content required"):
            await self.service.create_note(memory_store, payload)

        assert await memory_store.load_all() == sample_notes

    @pytest.mark.asyncio
    async def test_create_persist_failure(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        memory_store.fail_writes = True

        with pytest.raises(StorageError, match="Failed to save note"):
            await self.service.create_note(memory_store, NoteCreate(title="Lost"))

        assert await memory_store.load_all() == sample_notes

    @pytest.mark.asyncio
    async def test_concurrent_creates_are_all_kept(self, memory_store):
        """The write lock serializes read-modify-write sequences."""
        await asyncio.gather(*[
            self.service.create_note(memory_store, NoteCreate(title=f"Note {i}"))
            for i in range(10)
        ])

        assert len(await memory_store.load_all()) == 10


class TestNoteServiceUpdate:
    """Tests for update_note."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_update_changes_only_target(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        target_id = sample_notes[0]["id"]

        updated = await self.service.update_note(
            memory_store,
            target_id,
            NoteUpdate(title="Groceries (done)", content="nothing left", color="#00ff00"),
        )

        assert updated["id"] == target_id
        assert updated["title"] == "Groceries (done)"
        assert updated["content"] == "nothing left"
        assert updated["color"] == "#00ff00"
        assert updated["createdAt"] == sample_notes[0]["createdAt"]
        assert TIMESTAMP.match(updated["updatedAt"])

        stored = await memory_store.load_all()
        assert stored[0] == updated
        assert stored[1] == sample_notes[1]

    @pytest.mark.asyncio
    async def test_update_merges_only_supplied_fields(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)

        updated = await self.service.update_note(
            memory_store, sample_notes[1]["id"], NoteUpdate(content="Ship it")
        )

        assert updated["title"] == sample_notes[1]["title"]
        assert updated["color"] == sample_notes[1]["color"]
        assert updated["content"] == "Ship it"
        assert updated["updatedAt"] != sample_notes[1]["updatedAt"]

    @pytest.mark.asyncio
    async def test_update_keeps_unknown_fields(self, memory_store, sample_notes):
        sample_notes[0]["pinned"] = True
        await memory_store.save_all(sample_notes)

        updated = await self.service.update_note(
            memory_store, sample_notes[0]["id"], NoteUpdate(title="Pinned")
        )

        assert updated["pinned"] is True

    @pytest.mark.asyncio
    async def test_update_not_found(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)

        with pytest.raises(NotFoundError):
            await self.service.update_note(memory_store, "missing", NoteUpdate(title="x"))

        assert await memory_store.load_all() == sample_notes

    @pytest.mark.asyncio
    async def test_update_persist_failure(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        memory_store.fail_writes = True

        with pytest.raises(StorageError, match="Failed to update note"):
            await self.service.update_note(
                memory_store, sample_notes[0]["id"], NoteUpdate(title="x")
            )

        assert await memory_store.load_all() == sample_notes


class TestNoteServiceDelete:
    """Tests for delete_note and list_notes."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_list_returns_collection_verbatim(self, sample_notes):
        store = InMemoryStore(sample_notes)
        assert await self.service.list_notes(store) == sample_notes

    @pytest.mark.asyncio
    async def test_delete_removes_exactly_one(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)

        await self.service.delete_note(memory_store, sample_notes[0]["id"])

        assert await memory_store.load_all() == [sample_notes[1]]

    @pytest.mark.asyncio
    async def test_delete_not_found(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)

        with pytest.raises(NotFoundError, match="missing"):
            await self.service.delete_note(memory_store, "missing")

        assert await memory_store.load_all() == sample_notes

    @pytest.mark.asyncio
    async def test_delete_skips_malformed_entries(self, memory_store, sample_notes):
        """Entries that are not objects never match and are kept."""
        await memory_store.save_all([*sample_notes, "stray"])

        await self.service.delete_note(memory_store, sample_notes[1]["id"])

        assert await memory_store.load_all() == [sample_notes[0], "stray"]

    @pytest.mark.asyncio
    async def test_delete_persist_failure(self, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        memory_store.fail_writes = True

        with pytest.raises(StorageError, match="Failed to delete note"):
            await self.service.delete_note(memory_store, sample_notes[0]["id"])

        assert await memory_store.load_all() == sample_notes
