"""
Confirm API — the dialog renderer's side of the caller's confirm arbiter.

The shell polls /pending, draws the dialog, and answers with exactly one of
/accept or /cancel (closing the dialog, clicking the overlay or pressing
Escape all count as cancel). POST /api/confirm opens a confirmation and
waits for that answer.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from lexdesk.api.deps import (
    find_session_arbiter,
    get_confirm_sessions,
    get_request_context,
    get_session_arbiter,
)
from lexdesk.auth.context import RequestContext
from lexdesk.confirm.arbiter import (
    ConfirmArbiter,
    ConfirmRequest,
    ConfirmScopeError,
    confirm,
    confirm_scope,
)
from lexdesk.confirm.dialog import render_pending
from lexdesk.confirm.sessions import ConfirmSessions
from lexdesk.schemas.schemas import ConfirmResult, PendingResponse, ResolveResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/confirm", tags=["confirm"])


@router.get("/pending", response_model=PendingResponse)
async def pending(arbiter: ConfirmArbiter | None = Depends(find_session_arbiter)):
    if arbiter is None:
        return PendingResponse(dialog=None)
    return PendingResponse(dialog=render_pending(arbiter.pending))


@router.post("/accept", response_model=ResolveResponse)
async def accept(arbiter: ConfirmArbiter | None = Depends(find_session_arbiter)):
    return ResolveResponse(resolved=arbiter is not None and arbiter.accept())


@router.post("/cancel", response_model=ResolveResponse)
async def cancel(arbiter: ConfirmArbiter | None = Depends(find_session_arbiter)):
    return ResolveResponse(resolved=arbiter is not None and arbiter.cancel())


@router.post("", response_model=ConfirmResult)
async def request_confirmation(
    body: ConfirmRequest,
    ctx: RequestContext = Depends(get_request_context),
    arbiter: ConfirmArbiter = Depends(get_session_arbiter),
):
    """Open a confirmation in the caller's session and wait for the answer."""
    try:
        with confirm_scope(arbiter):
            answer = confirm(body)
    except ConfirmScopeError:
        # The session ended between resolving the arbiter and asking.
        logger.info("Confirmation '%s' refused for %s: session ended", body.title, ctx.actor)
        raise HTTPException(status_code=409, detail="Confirm session has ended")
    confirmed = await answer
    logger.info("Confirmation '%s' answered %s by %s", body.title, confirmed, ctx.actor)
    return ConfirmResult(confirmed=confirmed)


@router.delete("/session", response_model=ResolveResponse)
async def end_session(
    ctx: RequestContext = Depends(get_request_context),
    sessions: ConfirmSessions = Depends(get_confirm_sessions),
):
    """Sign-out hook: cancels anything pending and drops the arbiter."""
    return ResolveResponse(resolved=sessions.end(ctx.user_id))
