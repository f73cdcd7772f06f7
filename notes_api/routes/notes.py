"""
Notes API — Notes Route Handlers
==================================

What:  Handles GET/POST /api/notes and DELETE /api/notes/{id}.
How:   Parses and minimally validates the request, delegates to the injected
       NoteStore, and returns the result as JSON.
Who:   Called by the bundled frontend (public/app.js) and any HTTP client.

Error mapping (performed by the global handlers in main.py):
    ValidationError → 400 {"error": "text required"}
    NotFoundError   → 404 {"error": "not found"}
"""

import json
import logging
import re
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as SchemaValidationError

from notes_api.dependencies import get_note_store
from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.schemas.note import ErrorResponse, Note, NoteCreate
from notes_api.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
JSON_CONTENT_TYPE = "application/json"

# Leading base-10 integer, optionally signed and preceded by whitespace
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_note_id(raw: str) -> Optional[int]:
    """
    Parse a path segment the way a lenient integer parser would.

    "42" → 42, " 7" → 7, "12abc" → 12, "-3" → -3, "abc" → None, "" → None
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


async def read_note_create(request: Request) -> NoteCreate:
    """
    Build a NoteCreate from a JSON or form-encoded request body.

    JSON is read only for `application/json` or a missing content type;
    other content types are ignored. A body that is empty, not valid JSON,
    nested too deeply to decode, or not a JSON object yields an empty
    payload, so it ends up on the "text required" path.

    Raises:
        ValidationError: `text` is present but not a string.
    """
    content_type = request.headers.get("content-type", "").lower()
    payload: Any = {}
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        payload = dict(form)
    elif not content_type or content_type.startswith(JSON_CONTENT_TYPE):
        raw = await request.body()
        try:
            payload = json.loads(raw) if raw else {}
        except (ValueError, RecursionError):
            payload = {}

    if not isinstance(payload, dict):
        payload = {}

    try:
        return NoteCreate.model_validate(payload)
    except SchemaValidationError as e:
        raise ValidationError(field="text", context={"errors": e.error_count()})


@router.get(
    "/notes",
    response_model=List[Note],
    summary="List all notes",
    description="Returns every stored note in creation order.",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[Note]:
    return store.list()


@router.post(
    "/notes",
    response_model=Note,
    responses={
        200: {"description": "The created note", "model": Note},
        400: {"description": "Missing or empty text", "model": ErrorResponse},
    },
    summary="Create a note",
    description=(
        "Creates a note from the `text` field of a JSON or form-encoded body. "
        "The new id is one greater than the last note's id, or 1 when empty."
    ),
)
async def create_note(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    """
    Create a note.

    Empty text counts as missing; whitespace-only text is accepted verbatim.
    The store is not touched when validation fails.
    """
    body = await read_note_create(request)
    if not body.text:
        raise ValidationError(field="text")
    return store.create(body.text)


@router.delete(
    "/notes/{note_id}",
    response_model=Note,
    responses={
        200: {"description": "The removed note", "model": Note},
        404: {"description": "No note with this id", "model": ErrorResponse},
    },
    summary="Delete a note",
    description=(
        "Removes the note with the given id and returns it. Ids that do not "
        "parse as integers simply match nothing."
    ),
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    parsed_id = parse_note_id(note_id)
    if parsed_id is None:
        raise NotFoundError(resource="note", resource_id=note_id)
    return store.delete(parsed_id)


@router.delete("/notes", include_in_schema=False)
@router.delete("/notes/", include_in_schema=False)
async def delete_without_id() -> Note:
    """DELETE with an empty id segment matches no note."""
    raise NotFoundError(resource="note")
