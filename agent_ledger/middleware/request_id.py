"""
Request ID Middleware
=====================

Tags every request with an ID so its log lines can be correlated.
"""

import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request.

    The request ID is:
    - Taken from X-Trace-ID / X-Request-ID, or generated
    - Stored in request.state for access in handlers
    - Echoed in the response headers, including on unhandled errors
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        request_id = request.headers.get("X-Trace-ID") or request.headers.get("X-Request-ID")
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            # Already logged as request_completed by the inner logger middleware
            response = PlainTextResponse("Internal Server Error", status_code=500)

        response.headers["X-Request-ID"] = request_id
        return response
