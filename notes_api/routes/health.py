"""
Notes API — Health Check Route
================================

What:  Liveness endpoint for container health checks and load balancer probes.
How:   Reports version, uptime, and the number of stored notes. The service
       has no external dependencies, so a responding process is healthy.
"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from notes_api import __version__
from notes_api.dependencies import get_note_store
from notes_api.schemas.note import HealthResponse
from notes_api.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    # Set by create_app() and reset when the lifespan starts
    started_at: float = request.app.state.started_at
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - started_at, 2),
    )
