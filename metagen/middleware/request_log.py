"""
Request Logging Middleware for metagen

Tags each request with an id and logs one line when the handler returns.
"""
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("metagen.http")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches a request id and logs method, path, status and latency."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)

        # For streamed bodies this is time to first byte, not total duration.
        logger.info(
            "%s %s -> %s (%dms) [%s]",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
            request_id,
        )
        response.headers["X-Request-ID"] = request_id
        return response
