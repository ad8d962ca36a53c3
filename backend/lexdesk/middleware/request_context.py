"""
Request context middleware.

Generates or propagates X-Request-ID headers and keeps the id in a
ContextVar so log lines from the route guard and confirm arbiter can be
tied back to the request that produced them.
"""

import time
import logging
from contextvars import ContextVar
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

_request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Polled constantly; logged at DEBUG only
QUIET_PATHS = frozenset({"/api/health", "/metrics", "/api/confirm/pending"})


def get_request_id() -> str:
    """Get the current request ID from context."""
    return _request_id_var.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        token = _request_id_var.set(request_id)

        start_time = time.time()
        try:
            response = await call_next(request)
            duration_ms = round((time.time() - start_time) * 1000, 2)
            level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
            logger.log(
                level,
                "%s %s %s %.0fms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra={"duration_ms": duration_ms},
            )
        finally:
            _request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        return response
