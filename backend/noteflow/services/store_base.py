"""
NoteFlow Backend — Abstract Note Store Interface
==================================================

What:  Defines the contract that every persistence mechanism must implement.
Why:   Handlers and NoteService talk to this interface only, so the backing
       medium (JSON file, embedded database, in-memory list) can be swapped
       via configuration without touching request logic.
How:   Python ABC; concrete stores subclass and implement each method.
Who:   Implemented by JsonFileStore, SQLStore, InMemoryStore.

Failure Policy:
    Stores never raise for I/O problems. A failed read yields an empty
    collection (callers cannot tell "empty" from "corrupt"), and a failed
    write returns False. Both are logged by the store. NoteService converts
    a False write into StorageError.
"""

from abc import ABC, abstractmethod
from typing import List

from noteflow.models.note import NoteRecord


class NoteStore(ABC):
    """
    Whole-collection persistence for notes.

    Contract:
        - load_all() returns the full collection in stored order
        - save_all() replaces the full collection
        - Records are plain JSON objects; stores must not reshape them
    """

    @abstractmethod
    async def initialize(self) -> None:
        """
        Make the backing medium ready (directory, empty file, table).

        Idempotent; called at application startup and lazily on first use.
        """
        ...

    @abstractmethod
    async def load_all(self) -> List[NoteRecord]:
        """Read the whole collection; [] on any failure."""
        ...

    @abstractmethod
    async def save_all(self, notes: List[NoteRecord]) -> bool:
        """Overwrite the whole collection. Returns True on success."""
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Lightweight check that the backing medium is reachable."""
        ...

    async def close(self) -> None:
        """Release held resources. Nothing to do for most stores."""
        return None
