"""Request timing middleware: logs tool webhook latency."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

TOOL_PATH_PREFIX = "/tool/"


class RequestTimerMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and elapsed time for /tool/* requests."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not request.url.path.startswith(TOOL_PATH_PREFIX):
            response: Response = await call_next(request)
            return response

        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start

        logger.info(
            "%s %s -> %d in %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response
