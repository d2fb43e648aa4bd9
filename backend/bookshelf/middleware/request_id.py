"""
Bookshelf — Request ID Middleware
===================================

What:  Assigns an ID to each incoming request and returns it in X-Request-ID.
Why:   Lets every log line and error body from one request be correlated.
How:   Reuses a client-sent X-Request-ID or generates a short UUID, stores it
       in a ContextVar for loggers and exception handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header if present
        2. Otherwise generate the first 8 chars of a UUID4
        3. Store in request_id_var and request.state
        4. Echo in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
