# Middleware package init
"""
Bookshelf — Middleware Package
================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so the access log line carries the ID
    - Logging measures duration including all inner middleware
"""
