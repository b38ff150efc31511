"""
NoteFlow Backend — Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract between client and backend.
Why:   Input validation, and OpenAPI documentation of every endpoint.
How:   Request bodies are parsed into NoteCreate/NoteUpdate. Note records are
       returned as stored (plain JSON objects), so NoteResponse documents
       their shape without re-serializing them.

JSON keys use camelCase (createdAt, updatedAt) because that is what the data
file and the browser client use; Python attributes stay snake_case via aliases.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    Every field is optional at the schema level; the "title or content"
    rule is a business rule enforced by NoteService (→ 400, not 422).
    """
    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note body text")
    color: Optional[str] = Field(default=None, description="Card color, e.g. #ff0000")


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    Only fields present and non-null in the body replace the stored values.
    Unknown keys (including id and createdAt) are ignored.
    """
    title: Optional[str] = Field(default=None, description="New title")
    content: Optional[str] = Field(default=None, description="New body text")
    color: Optional[str] = Field(default=None, description="New card color")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """A stored note as returned by list, create and update."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(description="Unique note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body text")
    color: str = Field(description="Card color")
    created_at: str = Field(alias="createdAt", description="Creation time (UTC ISO 8601)")
    updated_at: Optional[str] = Field(
        default=None,
        alias="updatedAt",
        description="Last update time (UTC ISO 8601); absent until first update",
    )


class DeleteResponse(BaseModel):
    """Confirmation returned by DELETE /api/notes/{id}."""
    message: str = Field(default="Note deleted", description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Title or content required",
            "details": {"field": "title"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and storage status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Store reachability: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
