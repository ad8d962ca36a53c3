"""
API Dependencies — auth context, route guard, confirm sessions.

`get_request_context`:
  1. Extracts the Bearer token from the Authorization header
  2. Decodes and validates the JWT
  3. Lifts the permission profile out of the `perms` claim
  4. Returns a RequestContext (capabilities + office-admin flag)

Auth-exempt paths (no token required):
  /api/health, /metrics
"""

import logging

from fastapi import Depends, Request, HTTPException
from jose import JWTError
from pydantic import ValidationError

from lexdesk.auth.context import RequestContext
from lexdesk.auth.jwt import decode_access_token
from lexdesk.auth.permissions import PermissionProfile
from lexdesk.auth.route_guard import UnauthorizedRouteError, default_authorizer
from lexdesk.confirm.arbiter import ConfirmArbiter
from lexdesk.confirm.sessions import ConfirmSessions
from lexdesk.middleware.metrics import route_authorizations_total

logger = logging.getLogger(__name__)

# Paths that do not require authentication
AUTH_EXEMPT_PATHS = {
    "/api/health",
    "/metrics",
}


# ── Request context (JWT authentication) ──────────────────────────────────────

async def get_request_context(request: Request) -> RequestContext:
    path = request.url.path.rstrip("/")
    if path in AUTH_EXEMPT_PATHS:
        return RequestContext()

    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header")

    token = auth_header[7:]  # strip "Bearer "
    try:
        claims = decode_access_token(token)
    except JWTError as e:
        logger.debug("JWT decode failed: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    try:
        profile = PermissionProfile.model_validate(claims.get("perms") or {})
    except ValidationError as e:
        logger.warning("Malformed permission claim for %s: %s", claims.get("sub"), e)
        raise HTTPException(status_code=401, detail="Invalid permission claim")

    return RequestContext(
        user_id=str(claims.get("sub", "anonymous")),
        role=claims.get("role", ""),
        profile=profile,
    )


# ── Route guard ──────────────────────────────────────────────────────────────

def check_route(path: str, ctx: RequestContext) -> bool:
    """Run the route guard for `path` and record the decision."""
    allowed = default_authorizer.authorize(path, ctx.capabilities, ctx.is_office_admin)
    route_authorizations_total.labels(outcome="allowed" if allowed else "denied").inc()
    if not allowed:
        logger.info("Route %s denied for %s", path, ctx.actor)
    return allowed


async def guard_route(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """
    Dependency for page-shell endpoints: raise UnauthorizedRouteError before the
    endpoint produces anything if the guard denies the requested path.
    """
    # The decoded path the router dispatched on. request.url.path is rebuilt
    # from it and re-parsed, so an encoded "?" or "#" would shorten it.
    path = request.scope["path"]
    if "?" in path or "#" in path or not check_route(path, ctx):
        raise UnauthorizedRouteError(path)
    return ctx


# ── Confirm sessions ─────────────────────────────────────────────────────────

def get_confirm_sessions(request: Request) -> ConfirmSessions:
    return request.app.state.confirm_sessions


async def get_session_arbiter(
    ctx: RequestContext = Depends(get_request_context),
    sessions: ConfirmSessions = Depends(get_confirm_sessions),
) -> ConfirmArbiter:
    """The caller's confirm arbiter, created on first use."""
    return sessions.get(ctx.user_id)


async def find_session_arbiter(
    ctx: RequestContext = Depends(get_request_context),
    sessions: ConfirmSessions = Depends(get_confirm_sessions),
) -> ConfirmArbiter | None:
    """The caller's confirm arbiter if one exists; never creates one."""
    return sessions.peek(ctx.user_id)
