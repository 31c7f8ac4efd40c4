"""Request logging middleware.

Logs one line per request and one per response, tagged with a short request
id that is also returned in the X-Request-ID header.
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses."""

    def __init__(
        self,
        app,
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or ["/health", "/api/v1/health"]

    async def dispatch(self, request: Request, call_next) -> Response:
        """Log request and response details."""
        if any(request.url.path.startswith(p) for p in self.exclude_paths):
            return await call_next(request)

        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())[:8]
        extra = {"request_id": request_id}

        start_time = time.time()
        logger.info(f"{request.method} {request.url.path}", extra=extra)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"ERROR {type(e).__name__}: {str(e)[:100]} duration={duration_ms:.1f}ms",
                extra=extra,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(f"{response.status_code} duration={duration_ms:.1f}ms", extra=extra)
        response.headers["X-Request-ID"] = request_id
        return response
