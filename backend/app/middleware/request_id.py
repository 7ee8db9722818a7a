"""
Blog Post API — Request ID Middleware
=======================================

What:  Gives every request a correlation ID and echoes it back as X-Request-ID.
How:   A client-supplied X-Request-ID is reused when it is a short token of
       safe characters; anything else is replaced by a fresh 8-char hex ID so
       that client input never lands raw in the access log.
When:  Outermost middleware; runs before logging and routing.

Readers:
    - RequestLoggingMiddleware and the exception handlers, via current_request_id()
    - Clients, via the X-Request-ID response header
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def current_request_id(request: Optional[Request] = None) -> str:
    """
    The ID of the request being served.

    The ContextVar covers code running under the middleware. Handlers that
    run outside it (the catch-all 500 handler) fall back to request.state.
    """
    rid = request_id_var.get("")
    if not rid and request is not None:
        rid = getattr(request.state, "request_id", "")
    return rid


def _resolve_request_id(request: Request) -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "")
    if _CLIENT_ID_PATTERN.match(supplied):
        return supplied
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Stores the request ID for the duration of the request and sets the response header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = _resolve_request_id(request)
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
