"""
NoteFlow Backend — Application Package Initializer
===================================================

What: Marks the `noteflow` directory as a Python package.
Why:  Enables module imports like `from noteflow.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, lookup, merge
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note record + Pydantic contracts
    ├─────────────────────────────────────┤
    │        Store (Persistence)          │  ← JSON file / SQLite / memory
    └─────────────────────────────────────┘

    The `client` subpackage talks to the routes over HTTP and mirrors the
    note collection locally; it never touches the store directly.
"""

__version__ = "1.0.0"
