# Routes package init
"""
NoteFlow Backend — API Routes Package
=======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET    /api/notes          (list every note)
                  POST   /api/notes          (create)
                  PUT    /api/notes/{id}     (update)
                  DELETE /api/notes/{id}     (delete)
    - health.py:  GET    /health             (service health check)

Routes are thin: they pull the store and service from app state, call the
service, and let application exceptions reach the global handlers.
"""
