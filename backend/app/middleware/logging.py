"""
Blog Post API — Access Log Middleware
=======================================

What:  One access log line per request to the posts API.
How:   Times the downstream call, then logs the method, the matched route
       template (`/posts/{post_id}` rather than the raw path), the post id when
       the route carries one, status, duration and request ID.

Example line:
    PUT /posts/{post_id} post=6f1c... 204 3.2ms [a1b2c3d4]

Log level by status:
    5xx, or an error escaping the app → ERROR
    4xx → WARNING
    2xx/3xx → INFO

Health probes are not logged. Request bodies are never logged.
"""

import logging
import time
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import current_request_id

logger = logging.getLogger("blogposts.access")

UNLOGGED_PATHS = frozenset({"/health"})


def _route_of(request: Request) -> Tuple[str, Optional[str]]:
    """Route template and post id, both filled in by the router after matching."""
    route = request.scope.get("route")
    template = getattr(route, "path", None) or request.url.path
    post_id = request.scope.get("path_params", {}).get("post_id")
    return template, post_id


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes the access line for every posts API request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            self._log(request, status, (time.perf_counter() - start) * 1000)

    def _log(self, request: Request, status: int, duration_ms: float) -> None:
        template, post_id = _route_of(request)
        rid = current_request_id(request)
        logger.log(
            _level_for(status),
            "%s %s%s %d %.1fms [%s]",
            request.method,
            template,
            f" post={post_id}" if post_id else "",
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "route": template,
                "post_id": post_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
