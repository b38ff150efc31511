"""
NoteFlow Backend — Health Check Route
=======================================

What:  Health check endpoint for monitoring and container probes.
Why:   A process that cannot reach its data file is effectively down even
       though it still answers HTTP.
How:   Asks the configured store for a lightweight reachability check.

Status levels:
    - healthy:   store reachable
    - unhealthy: store unreachable (writes will fail with 500)
"""

import logging
import time

from fastapi import APIRouter, Depends

from noteflow import __version__
from noteflow.schemas.note import HealthResponse
from noteflow.services.store_base import NoteStore
from noteflow.storage import get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_store)) -> HealthResponse:
    """
    Check that the note store is reachable.

    JSON store: data directory writable, file readable.
    SQL store: SELECT 1 on the engine.
    """
    storage_status = "available"
    overall = "healthy"

    if not await store.health_check():
        storage_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: %s unreachable", type(store).__name__)

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
