"""
NoteFlow Backend — Store Selection and Injection
==================================================

What:  Builds the configured NoteStore and exposes it to route handlers.
Why:   Handlers depend on the store through FastAPI's Depends() so tests (or a
       different deployment) can hand create_app() any NoteStore instance.
How:   build_store() maps settings.storage_backend to a concrete class;
       get_store() reads the instance create_app() put on app.state.
"""

from typing import Optional

from fastapi import Request

from noteflow.config import Settings, settings as default_settings
from noteflow.services.json_store import JsonFileStore
from noteflow.services.memory_store import InMemoryStore
from noteflow.services.sql_store import SQLStore
from noteflow.services.store_base import NoteStore


def build_store(config: Optional[Settings] = None) -> NoteStore:
    """Instantiate the store named by STORAGE_BACKEND."""
    config = config or default_settings
    if config.storage_backend == "sqlite":
        return SQLStore(config.database_url)
    if config.storage_backend == "memory":
        return InMemoryStore()
    return JsonFileStore(config.data_file)


def get_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the application's store.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_store)):
            return await store.load_all()
    """
    return request.app.state.store
