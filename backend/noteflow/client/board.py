"""
NoteFlow Client — Note Board State
====================================

What:  The client-side state of the notes UI: the local mirror of the
       collection, the search box, the navigation tab, and the shared
       create/edit form.
Why:   Keeps the UI's behavior (what is shown, what a save or delete does
       to local state) testable without a browser.
How:   Holds plain dicts as returned by the API and re-synchronizes from each
       mutation's response. The server remains the only authority.

Failure Handling:
    Network errors, error statuses and undecodable bodies are logged and
    swallowed. Local state is left as it was, and a failed save keeps the
    form open with the draft intact. Nothing is retried or queued.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from noteflow.client.api import NotesAPIClient

logger = logging.getLogger(__name__)

# Presentational only: no note field or server filter backs these tabs
TABS = ("dashboard", "favorites", "archive")

NoteDict = Dict[str, Any]

# httpx.HTTPError covers transport failures and raise_for_status();
# ValueError covers a body that is not JSON
CLIENT_ERRORS = (httpx.HTTPError, ValueError)


def _empty_draft() -> NoteDict:
    return {"title": "", "content": ""}


def _note_id(note: Any) -> Optional[str]:
    return note.get("id") if isinstance(note, dict) else None


class NoteBoard:
    """
    Local state holder for the notes UI.

    State:
        notes          local mirror of the server collection
        search_query   text in the search box
        is_form_open   whether the create/edit form is showing
        is_editing     True when the form edits an existing note
        active_tab     one of TABS
        current_note   the draft being composed or edited
    """

    def __init__(self, api: NotesAPIClient):
        self.api = api
        self.notes: List[NoteDict] = []
        self.search_query = ""
        self.is_form_open = False
        self.is_editing = False
        self.active_tab = TABS[0]
        self.current_note: NoteDict = _empty_draft()

    # ── Loading & Filtering ───────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch the full collection once and replace the local mirror."""
        try:
            self.notes = await self.api.list_notes()
        except CLIENT_ERRORS as e:
            logger.error("Error fetching notes: %s", e)

    @property
    def filtered_notes(self) -> List[NoteDict]:
        """
        Notes whose title or content contains the search query,
        case-insensitively. An empty query matches everything.
        """
        query = self.search_query.lower()
        return [
            note for note in self.notes
            if isinstance(note, dict)
            and (query in str(note.get("title") or "").lower()
            or query in str(note.get("content") or "").lower())
        ]

    def search(self, query: str) -> None:
        self.search_query = query

    def select_tab(self, tab: str) -> None:
        """Switch the highlighted navigation tab; the list is not filtered."""
        if tab not in TABS:
            raise ValueError(f"Unknown tab '{tab}'. Must be one of: {', '.join(TABS)}")
        self.active_tab = tab

    # ── Form ──────────────────────────────────────────────────────────────

    def open_form(self, note: Optional[NoteDict] = None) -> None:
        """
        Open the shared form.

        No note → empty draft, create mode.
        A note → a copy of it as the draft, edit mode.
        """
        if note is not None:
            self.current_note = dict(note)
            self.is_editing = True
        else:
            self.current_note = _empty_draft()
            self.is_editing = False
        self.is_form_open = True

    def edit_draft(self, **fields: Any) -> None:
        self.current_note.update(fields)

    def close_form(self) -> None:
        self.is_form_open = False
        self.current_note = _empty_draft()
        self.is_editing = False

    # ── Mutations ─────────────────────────────────────────────────────────

    async def save(self) -> bool:
        """
        Create or update from the draft depending on the form mode, merge
        the server's response into local state, and close the form.

        Returns True when the server accepted the change.
        """
        fields = {
            key: self.current_note[key]
            for key in ("title", "content", "color")
            if key in self.current_note
        }
        note_id = self.current_note.get("id")
        if self.is_editing and not note_id:
            logger.error("Error saving note: the note being edited has no id")
            return False

        try:
            if self.is_editing:
                saved = await self.api.update_note(note_id, fields)
                self.notes = [
                    saved if _note_id(note) == saved.get("id") else note
                    for note in self.notes
                ]
            else:
                saved = await self.api.create_note(fields)
                self.notes = [*self.notes, saved]
        except CLIENT_ERRORS as e:
            logger.error("Error saving note: %s", e)
            return False

        self.close_form()
        return True

    async def delete(self, note_id: str, confirm: Callable[[str], bool]) -> bool:
        """
        Delete a note after confirmation.

        Args:
            note_id: Identifier of the note to remove.
            confirm: Called with a prompt; returning False cancels the delete.

        Returns True when the note was removed on the server and locally.
        """
        if not confirm("Delete this note?"):
            return False
        try:
            await self.api.delete_note(note_id)
        except CLIENT_ERRORS as e:
            logger.error("Error deleting note: %s", e)
            return False

        self.notes = [note for note in self.notes if _note_id(note) != note_id]
        return True
