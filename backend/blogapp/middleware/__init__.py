# Middleware package init
"""
Blog Backend - Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate (or accept) a correlation ID for logging
    2. Logging: Log method, path, status and duration with that ID, and
       whether the call came from a browser or from the HTML pages
    3. GZip / CORS: Starlette built-ins

    Responses pass back through the chain in reverse, so the request ID
    header is set and the duration covers the whole handler.
"""
