"""
Notes API — Application Package Initializer
=============================================

What: Marks the `notes_api` directory as a Python package.
Who:  Used by uvicorn (`notes_api.main:app`), the `notes-api` entry point, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │    Routes (API Layer) + Static      │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Note Store)         │  ← Ordered in-memory notes
    ├─────────────────────────────────────┤
    │        Schemas (Pydantic)           │  ← Request/response contracts
    └─────────────────────────────────────┘

    The store lives on `app.state` for the lifetime of the process and is
    handed to route handlers through FastAPI dependency injection.
"""

__version__ = "1.0.0"
