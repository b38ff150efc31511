"""
NoteFlow Backend — JSON File Note Store
=========================================

What:  Persists the note collection as a single JSON array on disk.
Why:   The default store: no database to run, human-readable data file.
How:   Reads the whole file into memory on every load and rewrites the whole
       file on every save, using async file I/O so a slow disk does not block
       the event loop.
Who:   Built by noteflow.storage.build_store when STORAGE_BACKEND=json.

File Format:
    [
      {
        "id": "3f0c…",
        "title": "Groceries",
        "content": "milk, eggs",
        "color": "#ffffff",
        "createdAt": "2024-01-15T12:00:00.000Z"
      }
    ]

    Two-space indentation, UTF-8, non-ASCII kept as-is.
    No schema version field.

Known Gaps:
    - The file is overwritten in place; a crash mid-write can truncate it,
      after which it loads as an empty collection.
    - Nothing coordinates two processes writing the same file.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

import aiofiles

from noteflow.config import settings
from noteflow.models.note import NoteRecord
from noteflow.services.store_base import NoteStore

logger = logging.getLogger(__name__)


class JsonFileStore(NoteStore):
    """
    Whole-file JSON persistence.

    Lifecycle:
        1. initialize() creates the parent directory and writes "[]" if the
           file is missing (also run lazily before the first load/save)
        2. load_all() parses the file; any I/O or parse error → []
        3. save_all() serializes and overwrites; any error → False
    """

    def __init__(self, data_file: Optional[str] = None):
        """
        Args:
            data_file: Override the default path (used in tests).
                       If None, uses settings.data_file.
        """
        self.path = Path(data_file or settings.data_file).resolve()
        self._initialized = False

    async def initialize(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                    await f.write(json.dumps([], indent=2))
                logger.info("Created empty notes file at %s", self.path)
        except OSError as e:
            # Reads will come back empty and writes will fail with 500;
            # the process itself keeps serving
            logger.error("Failed to initialize notes file %s: %s", self.path, e)
            return
        self._initialized = True

    async def load_all(self) -> List[NoteRecord]:
        if not self._initialized:
            await self.initialize()

        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = await f.read()
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            logger.error("Error reading notes from %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.error(
                "Notes file %s does not contain a JSON array (found %s)",
                self.path,
                type(data).__name__,
            )
            return []

        return data

    async def save_all(self, notes: List[NoteRecord]) -> bool:
        if not self._initialized:
            await self.initialize()

        # Encode fully before opening: "wb" truncates the existing file
        try:
            data = json.dumps(notes, indent=2, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.error("Error serializing %d notes for %s: %s", len(notes), self.path, e)
            return False

        try:
            async with aiofiles.open(self.path, "wb") as f:
                await f.write(data)
        except OSError as e:
            logger.error("Error writing notes to %s: %s", self.path, e)
            return False

        logger.debug("Wrote %d notes to %s", len(notes), self.path)
        return True

    async def health_check(self) -> bool:
        directory = self.path.parent
        if not directory.is_dir() or not os.access(directory, os.W_OK):
            return False
        return not self.path.exists() or os.access(self.path, os.R_OK | os.W_OK)
