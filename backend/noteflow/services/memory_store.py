"""
NoteFlow Backend — In-Memory Note Store
=========================================

What:  Keeps the note collection in a Python list; nothing touches disk.
Why:   Fast, isolated storage for tests and throwaway demo runs
       (STORAGE_BACKEND=memory).
How:   Deep copies on the way in and out, so callers mutating what they
       loaded cannot change the "stored" collection behind the store's back.
"""

import copy
import logging
from typing import List, Optional

from noteflow.models.note import NoteRecord
from noteflow.services.store_base import NoteStore

logger = logging.getLogger(__name__)


class InMemoryStore(NoteStore):
    """
    List-backed store.

    Set `fail_writes = True` to make every save_all() report failure, which
    exercises the persist-failure path without breaking a real disk.
    """

    def __init__(self, notes: Optional[List[NoteRecord]] = None):
        self._notes: List[NoteRecord] = copy.deepcopy(notes or [])
        self.fail_writes = False

    async def initialize(self) -> None:
        return None

    async def load_all(self) -> List[NoteRecord]:
        return copy.deepcopy(self._notes)

    async def save_all(self, notes: List[NoteRecord]) -> bool:
        if self.fail_writes:
            logger.error("In-memory store is set to fail writes; dropping %d notes", len(notes))
            return False
        self._notes = copy.deepcopy(notes)
        return True

    async def health_check(self) -> bool:
        return True
