# Client package init
"""
NoteFlow Client
================

What:  Python counterpart of the browser UI's data layer.

    - NotesAPIClient: async HTTP calls to /api/notes
    - NoteBoard: local mirror of the collection, search, tabs, and the
      shared create/edit form

Rendering and styling are left to whatever front end embeds these.
"""

from noteflow.client.api import NotesAPIClient
from noteflow.client.board import NoteBoard, TABS

__all__ = ["NotesAPIClient", "NoteBoard", "TABS"]
