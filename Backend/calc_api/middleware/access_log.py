"""Per-request access logging."""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..utils.logging import ACCESS_LOGGER

logger = logging.getLogger(ACCESS_LOGGER)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs ``METHOD url status duration`` for every request, failed ones included."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = int((time.perf_counter() - start) * 1000)
            target = request.url.path
            if request.url.query:
                target = f"{target}?{request.url.query}"
            logger.info("%s %s %s %d ms", request.method, target, status_code, duration)
