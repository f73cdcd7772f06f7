# Middleware package init
"""
Notes API — Middleware Package
================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log method, path, status and duration with the request ID
    3. GZip / CORS: Applied by Starlette's stock middleware

    Responses travel back through the chain in reverse, so the request ID
    header and the access log line see the final status code.
"""
