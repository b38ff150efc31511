# Middleware package init
"""
NoteFlow Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Rate Limit first: reject abusive clients before any file I/O
    2. Request ID: correlation ID for logs and error bodies
    3. Logging: method, path, status and duration with the request ID
    4. CORS: FastAPI's CORSMiddleware (handles browser preflight)

    Responses travel back through the same chain in reverse, which is how
    X-Request-ID ends up on every response.
"""
