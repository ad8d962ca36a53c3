"""
Prometheus metrics middleware.

Collects HTTP request metrics (counter + histogram) and exposes application-level
counters/gauges for route authorization and confirmation dialogs.
"""

import time

from prometheus_client import Counter, Histogram, Gauge
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# ── HTTP metrics ─────────────────────────────────────────────────────────────

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# ── Route guard metrics ──────────────────────────────────────────────────────

route_authorizations_total = Counter(
    "route_authorizations_total",
    "Dashboard route authorization decisions",
    ["outcome"],
)

# ── Confirmation metrics ─────────────────────────────────────────────────────

confirmations_total = Counter(
    "confirmations_total",
    "Settled confirmation dialogs",
    ["variant", "outcome"],
)

confirmations_pending = Gauge(
    "confirmations_pending",
    "Confirmation dialogs currently awaiting an answer",
)

confirm_sessions_active = Gauge(
    "confirm_sessions_active",
    "Sessions holding a confirm arbiter",
)


def _normalize_path(path: str) -> str:
    """Collapse path parameters to reduce cardinality.

    e.g. /dashboard/cases/42/payments → /dashboard/cases/{id}/payments
    """
    parts = path.strip("/").split("/")
    normalized = []
    for part in parts:
        if part.isdigit() or len(part) > 20:
            normalized.append("{id}")
        else:
            normalized.append(part)
    return "/" + "/".join(normalized)


class PrometheusMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Skip metrics endpoint itself to avoid recursion
        if request.url.path == "/metrics":
            return await call_next(request)

        method = request.method
        path = _normalize_path(request.url.path)

        start = time.time()
        response = await call_next(request)
        duration = time.time() - start

        http_requests_total.labels(
            method=method,
            path=path,
            status_code=response.status_code,
        ).inc()

        http_request_duration_seconds.labels(
            method=method,
            path=path,
        ).observe(duration)

        return response
