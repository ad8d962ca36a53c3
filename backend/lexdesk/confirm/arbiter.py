"""
Confirm arbiter — ask the user a yes/no question and await the answer.

One arbiter holds at most one pending confirmation. `confirm()` records
the request, tells subscribers (the dialog renderer) about it, and hands
back a future. The renderer calls exactly one of `accept()` / `cancel()`;
that settles the future with True / False and empties the slot in the same
step.

    idle → pending → resolved(True | False) → idle

A second `confirm()` while one is pending settles the earlier future with
False before the new request takes the slot, so no caller waits forever.

Code reaches the arbiter through `confirm_scope()`. Calling `confirm()` with
no scope active raises ConfirmScopeError immediately.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator
from uuid import uuid4

from pydantic import BaseModel, Field

from lexdesk.middleware.metrics import confirmations_pending, confirmations_total

logger = logging.getLogger(__name__)

DEFAULT_CONFIRM_TEXT = "تأكيد"
DEFAULT_CANCEL_TEXT = "إلغاء"


class Variant(str, Enum):
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"


class ConfirmRequest(BaseModel):
    title: str = Field(..., min_length=1)
    description: str | None = None
    confirm_text: str = DEFAULT_CONFIRM_TEXT
    cancel_text: str = DEFAULT_CANCEL_TEXT
    variant: Variant = Variant.INFO


@dataclass
class PendingConfirmation:
    request: ConfirmRequest
    future: asyncio.Future
    id: str = field(default_factory=lambda: uuid4().hex)
    open: bool = True


class ConfirmScopeError(RuntimeError):
    """confirm() was called with no arbiter in scope, or after teardown."""


Listener = Callable[[PendingConfirmation | None], Any]


class ConfirmArbiter:
    def __init__(self, name: str = "default"):
        self.name = name
        self._pending: PendingConfirmation | None = None
        self._listeners: list[Listener] = []
        self._closed = False

    @property
    def pending(self) -> PendingConfirmation | None:
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register for slot changes. Returns the unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def confirm(self, request: ConfirmRequest | dict) -> asyncio.Future:
        """Open a confirmation. The returned future resolves to True or False."""
        if self._closed:
            raise ConfirmScopeError(f"Confirm arbiter '{self.name}' is closed")
        if not isinstance(request, ConfirmRequest):
            request = ConfirmRequest.model_validate(request)

        future = asyncio.get_running_loop().create_future()

        if self._pending is not None:
            logger.warning(
                "Confirm '%s' superseded by '%s' (arbiter %s)",
                self._pending.request.title, request.title, self.name,
            )
            self._settle(False, outcome="superseded")

        pending = PendingConfirmation(request=request, future=future)
        future.add_done_callback(lambda f: self._on_done(pending, f))
        self._pending = pending
        confirmations_pending.inc()
        logger.debug("Confirm %s opened: %s", pending.id, request.title)
        self._notify()
        return future

    def accept(self) -> bool:
        """User confirmed. Returns False when nothing was pending."""
        return self._settle(True, outcome="confirmed")

    def cancel(self) -> bool:
        """User cancelled or dismissed. Returns False when nothing was pending."""
        return self._settle(False, outcome="cancelled")

    def close(self) -> None:
        """Session teardown: cancel whatever is pending and refuse new requests."""
        self._settle(False, outcome="closed")
        self._closed = True
        self._listeners.clear()

    def _settle(self, value: bool, *, outcome: str) -> bool:
        pending = self._pending
        if pending is None:
            return False
        self._pending = None
        pending.open = False
        confirmations_pending.dec()
        if not pending.future.done():
            pending.future.set_result(value)
        confirmations_total.labels(variant=pending.request.variant.value, outcome=outcome).inc()
        logger.debug("Confirm %s %s", pending.id, outcome)
        self._notify()
        return True

    def _on_done(self, pending: PendingConfirmation, future: asyncio.Future) -> None:
        # The caller gave up on the future; treat it as a dismiss.
        if future.cancelled() and self._pending is pending:
            self._settle(False, outcome="abandoned")

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._pending)


# ── Scope ────────────────────────────────────────────────────────────────────

_current_arbiter: ContextVar[ConfirmArbiter | None] = ContextVar("confirm_arbiter", default=None)


@contextmanager
def confirm_scope(arbiter: ConfirmArbiter) -> Iterator[ConfirmArbiter]:
    """Make `arbiter` the one `confirm()` talks to within this block."""
    token = _current_arbiter.set(arbiter)
    try:
        yield arbiter
    finally:
        _current_arbiter.reset(token)


def current_arbiter() -> ConfirmArbiter:
    arbiter = _current_arbiter.get()
    if arbiter is None:
        raise ConfirmScopeError("confirm must be used within a confirm scope")
    return arbiter


def use_confirm() -> Callable[[ConfirmRequest | dict], asyncio.Future]:
    return current_arbiter().confirm


def confirm(request: ConfirmRequest | dict) -> asyncio.Future:
    return current_arbiter().confirm(request)
