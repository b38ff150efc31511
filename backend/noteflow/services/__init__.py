# Services package init
"""
NoteFlow Backend — Services Layer
===================================

What:  Business logic and persistence sitting between routes (HTTP) and disk.

Service Inventory:
    - NoteStore (abstract): Whole-collection load/save interface
    - JsonFileStore: Single JSON file on disk (default)
    - SQLStore: Embedded SQLite database via async SQLAlchemy
    - InMemoryStore: Python list, for tests and throwaway runs
    - NoteService: Validation, lookup and merge rules for the four operations

Why stores are separate from NoteService:
    The service never knows which medium holds the notes, so the backend can
    switch from a file to a database (or a test double) through configuration.
"""
