"""
Dashboard shell API — route checks, navigation, and the guarded page shell.

The shell asks here before it renders any dashboard page. Page content
itself is served by the feature services; this router only decides
whether it may appear.
"""

from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, Query

from lexdesk.api.deps import check_route, get_request_context, guard_route
from lexdesk.auth.context import RequestContext
from lexdesk.auth.navigation import navigation_tree, visible_navigation
from lexdesk.schemas.schemas import (
    NavEntry,
    NavigationResponse,
    PageShell,
    RouteCheckRequest,
    RouteCheckResponse,
)

router = APIRouter(tags=["dashboard"])


def _nav_for(ctx: RequestContext, current: str) -> list[NavEntry]:
    items = visible_navigation(ctx.capabilities, ctx.is_office_admin)
    return [NavEntry.model_validate(entry) for entry in navigation_tree(items, current)]


@router.post("/api/routes/authorize", response_model=RouteCheckResponse)
async def authorize_route(
    body: RouteCheckRequest,
    ctx: RequestContext = Depends(get_request_context),
):
    """Would the page at `path` render for the caller? Query strings are ignored."""
    path = urlsplit(body.path).path
    return RouteCheckResponse(path=path, allowed=check_route(path, ctx))


@router.get("/api/navigation", response_model=NavigationResponse)
async def navigation(
    current: str = Query("", description="Current route, used to flag the active entry"),
    ctx: RequestContext = Depends(get_request_context),
):
    return NavigationResponse(items=_nav_for(ctx, current))


@router.get("/dashboard", response_model=PageShell)
@router.get("/dashboard/{page:path}", response_model=PageShell)
async def page_shell(page: str = "", ctx: RequestContext = Depends(guard_route)):
    """Shell for an authorized dashboard page. Denied paths never get here."""
    path = "/dashboard" + (f"/{page}" if page else "")
    return PageShell(
        path=path,
        user_id=ctx.user_id,
        is_office_admin=ctx.is_office_admin,
        capabilities=ctx.capabilities.as_dict(),
        navigation=_nav_for(ctx, path),
    )
