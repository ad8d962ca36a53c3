"""
Prometheus metrics endpoint.

Exposes GET /metrics in Prometheus text exposition format. The session
gauge is sampled at scrape time; everything else is updated in place.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from lexdesk.middleware.metrics import confirm_sessions_active

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def prometheus_metrics(request: Request):
    """Expose Prometheus metrics in text format."""
    sessions = getattr(request.app.state, "confirm_sessions", None)
    confirm_sessions_active.set(len(sessions) if sessions is not None else 0)
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
