"""
NoteFlow Backend — Notes Route Handlers
=========================================

What:  REST endpoints for the note collection under /api/notes.
Why:   Translates HTTP requests into NoteService calls.
How:   Each handler pulls the store and service from app state via Depends(),
       delegates, and returns the record. Errors propagate as application
       exceptions and are turned into JSON by the global handlers in main.py.
Who:   Called by the browser client and by noteflow.client.NotesAPIClient.

Endpoints:
    GET    /api/notes        → 200, array of notes
    POST   /api/notes        → 201, created note   | 400, 500
    PUT    /api/notes/{id}   → 200, updated note   | 404, 500
    DELETE /api/notes/{id}   → 200, confirmation   | 404, 500
    Any of them → 429 when RATE_LIMIT_ENABLED=true

Stored records are returned as-is (response_model=None) so that fields the
server does not model are never dropped from the response.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from noteflow.schemas.note import (
    DeleteResponse,
    ErrorResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from noteflow.services.note_service import NoteService, get_note_service
from noteflow.services.store_base import NoteStore
from noteflow.storage import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

# Only reachable when RATE_LIMIT_ENABLED=true
RATE_LIMITED = {
    429: {"description": "Too many requests from this client", "model": ErrorResponse},
}


@router.get(
    "/notes",
    response_model=None,
    responses={
        200: {"description": "Every stored note", "model": List[NoteResponse]},
        **RATE_LIMITED,
    },
    summary="List all notes",
    description=(
        "Returns the full note collection in stored order. There is no "
        "filtering or pagination; searching happens in the client."
    ),
)
async def list_notes(
    store: NoteStore = Depends(get_store),
    service: NoteService = Depends(get_note_service),
) -> List[Dict[str, Any]]:
    return await service.list_notes(store)


@router.post(
    "/notes",
    status_code=201,
    response_model=None,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Title and content both empty", "model": ErrorResponse},
        500: {"description": "Note could not be saved", "model": ErrorResponse},
        **RATE_LIMITED,
    },
    summary="Create a note",
)
async def create_note(
    payload: Optional[NoteCreate] = None,
    store: NoteStore = Depends(get_store),
    service: NoteService = Depends(get_note_service),
) -> Dict[str, Any]:
    """
    Create a note from {title?, content?, color?}.

    A missing body behaves like an empty one and is rejected with 400 by
    the title-or-content rule.
    """
    return await service.create_note(store, payload or NoteCreate())


@router.put(
    "/notes/{note_id}",
    response_model=None,
    responses={
        200: {"description": "Note updated", "model": NoteResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Note could not be saved", "model": ErrorResponse},
        **RATE_LIMITED,
    },
    summary="Update a note",
)
async def update_note(
    note_id: str,
    payload: Optional[NoteUpdate] = None,
    store: NoteStore = Depends(get_store),
    service: NoteService = Depends(get_note_service),
) -> Dict[str, Any]:
    return await service.update_note(store, note_id, payload or NoteUpdate())


@router.delete(
    "/notes/{note_id}",
    response_model=DeleteResponse,
    responses={
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Collection could not be saved", "model": ErrorResponse},
        **RATE_LIMITED,
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_store),
    service: NoteService = Depends(get_note_service),
) -> DeleteResponse:
    await service.delete_note(store, note_id)
    return DeleteResponse(message="Note deleted")
