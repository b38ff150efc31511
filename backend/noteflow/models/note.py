"""
NoteFlow Backend — Note Record Helpers and SQL Row Model
==========================================================

What:  Field names, identifier/timestamp generation, and the ORM row used by
       the embedded-database store.
Why:   Notes travel through the system as plain JSON objects (dicts). Keeping
       them as raw objects means fields this server does not know about
       survive a rewrite, and untouched records serialize back identically.
Who:   NoteService builds and stamps records with these helpers; SQLStore
       maps records onto NoteRow.

Record Shape (JSON keys):
    id         opaque string, server-issued, immutable
    title      free text ("Untitled" when created empty)
    content    free text
    color      free text ("#ffffff" by default)
    createdAt  ISO 8601 UTC, millisecond precision, "Z" suffix
    updatedAt  same format; present only after the first update
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteflow.database import Base

NoteRecord = Dict[str, Any]

# Fields a client may set; everything else is server-owned
EDITABLE_FIELDS = ("title", "content", "color")


def new_note_id() -> str:
    """
    Issue a fresh note identifier.

    UUID4 rather than a clock reading: two creates in the same millisecond
    would otherwise share an identifier.
    """
    return str(uuid.uuid4())


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format a UTC instant as e.g. 2024-01-15T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def note_id_of(record: Any) -> Optional[str]:
    """Identifier of a stored record, or None for malformed entries."""
    if isinstance(record, dict):
        return record.get("id")
    return None


class NoteRow(Base):
    """
    One note in the embedded database.

    The whole record is stored as JSON text in `data`; `position` keeps the
    list order of the collection and `note_id` is indexed for inspection
    with plain SQL tooling. The table is rewritten wholesale on every save,
    exactly like the JSON file.
    """

    __tablename__ = "notes"

    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    note_id: Mapped[Optional[str]] = mapped_column(String(64), index=True, nullable=True)
    data: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<NoteRow position={self.position} id={self.note_id}>"
