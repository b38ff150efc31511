"""
NoteFlow Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions let the service layer stay free of HTTP details while
       global handlers (registered in main.py) pick the right status code.
How:   Each exception class carries a message and optional context dict.
       The message is safe to return to clients; the context is logged only.
Who:   Raised by NoteService and middleware; caught by global handlers.

Exception Hierarchy:
    NoteFlowError (base)         → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── StorageError             → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests
"""

from typing import Any, Dict, Optional


class NoteFlowError(Exception):
    """
    Base exception for all NoteFlow application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteFlowError):
    """
    Raised when client input fails a business rule.

    When:    Creating a note with neither title nor content.
    HTTP:    400 Bad Request

    Schema-level problems (wrong JSON types) never reach this class;
    FastAPI answers those with its own 422.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteFlowError):
    """
    Raised when a requested resource does not exist.

    When:    PUT or DELETE /api/notes/{id} with an identifier not in the store.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StorageError(NoteFlowError):
    """
    Raised when the note collection could not be persisted.

    When:    The store's save_all() reported failure (disk full, permission
             denied, unserializable record, database unavailable).
    HTTP:    500 Internal Server Error

    The store itself never raises; it logs and returns False. The service
    turns that False into this exception so the request fails cleanly.
    """

    def __init__(
        self,
        message: str = "Failed to save notes",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(NoteFlowError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
