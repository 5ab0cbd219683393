# Middleware package init
"""
Project Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error bodies
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: FastAPI's stock middleware

    Responses travel back through the chain in reverse, so the request ID
    header is set and the access log line carries the final status code.
"""
