"""
Notes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract of the notes service.
How:   Route handlers validate request bodies into these models and FastAPI
       serializes responses from them (and builds the OpenAPI docs).
Who:   Used by the note store (as its record type) and by route handlers.
When:  Validated on every create request; serialized on every response.

Wire format:
    Note:           {"id": 1, "text": "Welcome to Codespace demo!"}
    Error:          {"error": "text required"}
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain / Response Models
# ══════════════════════════════════════════════════════════════════════════


class Note(BaseModel):
    """
    A single stored note.

    Notes are immutable once created; the store only ever appends or removes
    whole records, so the model is frozen.
    """
    id: int = Field(description="Identifier assigned by the store")
    text: str = Field(description="Note text, stored verbatim")

    model_config = {"frozen": True}


class HealthResponse(BaseModel):
    """Returned by GET /health for liveness probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    `text` is optional at the schema level so that a missing field reaches
    the route handler, which answers 400 "text required" instead of
    FastAPI's default 422. Unknown fields are ignored.
    """
    text: Optional[str] = Field(default=None, description="Text of the new note")

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"error": "not found"}
    """
    error: str = Field(description="Human-readable error description")
