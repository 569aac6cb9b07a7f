from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log request lines and response statuses of the development server."""

    def __init__(
        self,
        app,
        log_requests: bool = False,
        log_responses: bool = False,
    ):
        super().__init__(app)
        self.log_requests = log_requests
        self.log_responses = log_responses

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self.log_requests:
            logger.info(
                "Request: %s %s (platform header: %s)",
                request.method,
                request.url,
                request.headers.get("expo-platform", "-"),
            )

        started = time.perf_counter()
        response = await call_next(request)

        if self.log_responses:
            logger.info(
                "Response: %s %s -> %s in %.1fms",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
            )

        return response
