"""
Main entry point: `python -m notes_api` or the `notes-api` console script.
"""

import uvicorn

from notes_api.config import settings


def main() -> None:
    """Start the server on the configured host and port (PORT, default 3000)."""
    uvicorn.run(
        "notes_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
