"""
Request logging middleware.
Tags every request with an id and logs method, path, status and duration.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("app.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Adds X-Request-ID and X-Process-Time headers and writes one log line per request.
    """

    def __init__(self, app, enabled: bool = True, exclude_paths=None):
        super().__init__(app)
        self.enabled = enabled
        self.exclude_paths = set(exclude_paths or [])

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        if self.enabled and request.url.path not in self.exclude_paths:
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "%s %s -> %s (%.1fms)",
                request.method,
                request.url.path,
                response.status_code,
                process_time * 1000,
                extra={
                    "request_id": request_id,
                    "user_id": getattr(request.state, "user_id", None),
                    "client_host": request.client.host if request.client else None,
                },
            )

        return response
