"""
Notes API — FastAPI Dependencies
==================================

What:  Dependency providers injected into route handlers via Depends().
How:   Reads the store the application factory attached to `app.state`.
Who:   Used by the notes and health routers; overridable in tests through
       `app.dependency_overrides`.
"""

from fastapi import Request

from notes_api.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """
    Provide the application's note store.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            return store.list()
    """
    return request.app.state.note_store
