"""
NoteFlow Client — Board State Tests
=====================================

What:  Tests for NoteBoard: load, search, tabs, shared form, save, delete,
       and the log-and-swallow failure policy.
How:   NotesAPIClient wired to the real app through ASGITransport for the
       happy paths; AsyncMock APIs for failures.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio

from noteflow.client import NoteBoard, NotesAPIClient


@pytest_asyncio.fixture
async def board(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield NoteBoard(NotesAPIClient(client=http))


def failing_api(exc: Exception) -> MagicMock:
    api = MagicMock(spec=NotesAPIClient)
    for name in ("list_notes", "create_note", "update_note", "delete_note"):
        setattr(api, name, AsyncMock(side_effect=exc))
    return api


class TestLoadAndSearch:

    @pytest.mark.asyncio
    async def test_load_mirrors_server(self, board, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)

        await board.load()

        assert board.notes == sample_notes

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_over_title_and_content(self, board, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        await board.load()

        board.search("EGGS")
        assert [n["title"] for n in board.filtered_notes] == ["Groceries"]

        board.search("ideas")
        assert [n["title"] for n in board.filtered_notes] == ["Ideas"]

        board.search("")
        assert board.filtered_notes == sample_notes

        board.search("nothing matches")
        assert board.filtered_notes == []

    @pytest.mark.asyncio
    async def test_tabs_do_not_filter(self, board, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        await board.load()

        board.select_tab("archive")

        assert board.active_tab == "archive"
        assert board.filtered_notes == sample_notes

    def test_unknown_tab_rejected(self):
        board = NoteBoard(MagicMock(spec=NotesAPIClient))
        with pytest.raises(ValueError):
            board.select_tab("trash")


class TestStrayEntries:
    """The server keeps non-object entries verbatim; the board tolerates them."""

    @pytest.mark.asyncio
    async def test_search_skips_non_object_entries(self, board, memory_store, sample_notes):
        await memory_store.save_all([*sample_notes, "stray"])
        await board.load()

        board.search("eggs")
        assert [n["title"] for n in board.filtered_notes] == ["Groceries"]

        board.search("")
        assert board.filtered_notes == sample_notes

    @pytest.mark.asyncio
    async def test_update_and_delete_keep_non_object_entries(self, board, memory_store, sample_notes):
        await memory_store.save_all([*sample_notes, "stray"])
        await board.load()

        board.open_form(board.notes[0])
        board.edit_draft(title="Groceries (done)")
        assert await board.save() is True
        assert board.notes[0]["title"] == "Groceries (done)"
        assert board.notes[2] == "stray"

        assert await board.delete(sample_notes[1]["id"], confirm=lambda prompt: True) is True
        assert board.notes[1:] == ["stray"]


class TestForm:

    def test_open_form_create_mode(self):
        board = NoteBoard(MagicMock(spec=NotesAPIClient))

        board.open_form()

        assert board.is_form_open is True
        assert board.is_editing is False
        assert board.current_note == {"title": "", "content": ""}

    def test_open_form_edit_mode_copies_note(self, sample_notes):
        board = NoteBoard(MagicMock(spec=NotesAPIClient))

        board.open_form(sample_notes[0])
        board.edit_draft(title="Changed")

        assert board.is_editing is True
        assert board.current_note["title"] == "Changed"
        assert sample_notes[0]["title"] == "Groceries"

    def test_close_form_resets(self, sample_notes):
        board = NoteBoard(MagicMock(spec=NotesAPIClient))
        board.open_form(sample_notes[0])

        board.close_form()

        assert board.is_form_open is False
        assert board.is_editing is False
        assert board.current_note == {"title": "", "content": ""}


class TestMutations:

    @pytest.mark.asyncio
    async def test_save_creates_and_appends_server_record(self, board, memory_store):
        await board.load()
        board.open_form()
        board.edit_draft(title="New idea", content="Write it down")

        assert await board.save() is True

        assert len(board.notes) == 1
        assert board.notes[0]["id"]
        assert board.notes[0]["createdAt"]
        assert board.is_form_open is False
        assert await memory_store.load_all() == board.notes

    @pytest.mark.asyncio
    async def test_save_updates_and_replaces_with_server_record(self, board, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        await board.load()
        board.open_form(board.notes[1])
        board.edit_draft(content="Shipped")

        assert await board.save() is True

        assert board.notes[0] == sample_notes[0]
        assert board.notes[1]["content"] == "Shipped"
        assert board.notes[1]["updatedAt"] != sample_notes[1]["updatedAt"]

    @pytest.mark.asyncio
    async def test_save_rejected_by_server_keeps_form_open(self, board):
        board.open_form()

        assert await board.save() is False

        assert board.is_form_open is True
        assert board.notes == []

    @pytest.mark.asyncio
    async def test_delete_confirmed(self, board, memory_store, sample_notes):
        await memory_store.save_all(sample_notes)
        await board.load()

        assert await board.delete(sample_notes[0]["id"], confirm=lambda prompt: True) is True

        assert [n["id"] for n in board.notes] == [sample_notes[1]["id"]]
        assert len(await memory_store.load_all()) == 1

    @pytest.mark.asyncio
    async def test_delete_declined_does_nothing(self, sample_notes):
        api = failing_api(AssertionError("should not be called"))
        board = NoteBoard(api)
        board.notes = list(sample_notes)

        assert await board.delete(sample_notes[0]["id"], confirm=lambda prompt: False) is False

        assert board.notes == sample_notes
        api.delete_note.assert_not_called()


class TestFailuresAreSwallowed:

    @pytest.mark.asyncio
    async def test_load_network_error_keeps_state(self, sample_notes, caplog):
        board = NoteBoard(failing_api(httpx.ConnectError("refused")))
        board.notes = list(sample_notes)

        await board.load()

        assert board.notes == sample_notes
        assert "Error fetching notes" in caplog.text

    @pytest.mark.asyncio
    async def test_load_bad_json_keeps_state(self):
        board = NoteBoard(failing_api(ValueError("Expecting value")))

        await board.load()

        assert board.notes == []

    @pytest.mark.asyncio
    async def test_save_network_error_keeps_draft(self):
        board = NoteBoard(failing_api(httpx.ReadTimeout("slow")))
        board.open_form()
        board.edit_draft(title="Unsaved")

        assert await board.save() is False

        assert board.is_form_open is True
        assert board.current_note["title"] == "Unsaved"

    @pytest.mark.asyncio
    async def test_editing_note_without_id_is_not_sent(self, caplog):
        api = failing_api(AssertionError("should not be called"))
        board = NoteBoard(api)
        board.open_form({"title": "Legacy", "content": "no id here"})

        assert await board.save() is False

        assert board.is_form_open is True
        assert board.current_note["title"] == "Legacy"
        api.update_note.assert_not_called()
        assert "Error saving note" in caplog.text

    @pytest.mark.asyncio
    async def test_delete_error_keeps_note(self, sample_notes):
        board = NoteBoard(failing_api(httpx.ConnectError("refused")))
        board.notes = list(sample_notes)

        assert await board.delete(sample_notes[0]["id"], confirm=lambda prompt: True) is False

        assert board.notes == sample_notes
