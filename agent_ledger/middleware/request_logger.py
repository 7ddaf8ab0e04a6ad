"""
Request Logger Middleware
=========================

Emits one structured log line per request with its outcome and latency.
"""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


logger = structlog.get_logger("request")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Middleware for structured logging of all requests.

    Captures:
    - Request ID for correlation
    - Request method and path
    - Response status and latency
    """

    # Paths to exclude from logging (e.g., health checks)
    EXCLUDED_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """
        Log request and response metadata.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from handler
        """
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start_time, exc_info=True)
            raise

        self._log(request, response.status_code, start_time)

        return response

    def _log(self, request: Request, status_code: int, start_time: float, exc_info: bool = False) -> None:
        latency_ms = (time.perf_counter() - start_time) * 1000

        log_context = {
            "request_id": getattr(request.state, "request_id", "unknown"),
            "method": request.method,
            "path": request.url.path,
            "query": str(request.query_params),
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
        }

        if status_code >= 500:
            logger.error("request_completed", exc_info=exc_info, **log_context)
        elif status_code >= 400:
            logger.warning("request_completed", **log_context)
        else:
            logger.info("request_completed", **log_context)
