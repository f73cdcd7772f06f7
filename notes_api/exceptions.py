"""
Notes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the two failure modes of the service.
How:   Each exception carries a client-safe message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error bodies with the matching HTTP status code.
Who:   Raised by the note store and the notes router; caught by global handlers.
When:  During request processing; neither error is fatal to the process.

Exception Hierarchy:
    NotesError (base)
    ├── ValidationError   → 400 Bad Request  {"error": "text required"}
    └── NotFoundError     → 404 Not Found    {"error": "not found"}
"""

from typing import Any, Dict, Optional


class NotesError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  Client-facing error description (returned as the "error" field)
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


class ValidationError(NotesError):
    """
    Raised when a create request does not carry usable note text.

    When:    `text` is absent, empty, or not a string.
    HTTP:    400 Bad Request

    Example response:
        {"error": "text required"}
    """

    def __init__(
        self,
        message: str = "text required",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesError):
    """
    Raised when a requested note does not exist.

    When:    DELETE /api/notes/{id} with an id that matches no live note,
             including segments that do not parse as an integer.
    HTTP:    404 Not Found

    The client-facing message is always "not found"; the resource and id
    travel in `context` for the server-side log line.
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id
