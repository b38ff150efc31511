"""
NoteFlow Client — HTTP API Client
===================================

What:  Thin async wrapper around the four /api/notes endpoints.
Why:   Gives NoteBoard (and scripts) one place that knows URLs and verbs.
How:   httpx.AsyncClient; every call raises httpx.HTTPStatusError on a
       non-2xx response and returns the decoded JSON body otherwise.

Example:
    async with NotesAPIClient("http://localhost:5000") as api:
        note = await api.create_note({"title": "Groceries", "content": "milk"})
        await api.delete_note(note["id"])
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

API_PATH = "/api/notes"


class NotesAPIClient:
    """
    Async client for the notes REST API.

    Args:
        base_url: Server root, e.g. http://localhost:5000
        client:   Pre-built httpx.AsyncClient (tests pass one wired to an
                  ASGITransport). The caller keeps ownership of it.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url)

    async def list_notes(self) -> List[Dict[str, Any]]:
        response = await self._client.get(API_PATH)
        response.raise_for_status()
        return response.json()

    async def create_note(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._client.post(API_PATH, json=fields)
        response.raise_for_status()
        return response.json()

    async def update_note(self, note_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._client.put(f"{API_PATH}/{note_id}", json=fields)
        response.raise_for_status()
        return response.json()

    async def delete_note(self, note_id: str) -> Dict[str, Any]:
        response = await self._client.delete(f"{API_PATH}/{note_id}")
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "NotesAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
