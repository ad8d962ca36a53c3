from lexdesk.confirm.arbiter import (
    ConfirmArbiter, ConfirmRequest, ConfirmScopeError, PendingConfirmation, Variant,
    confirm, confirm_scope, current_arbiter, use_confirm,
)
from lexdesk.confirm.dialog import ConfirmDialogView, render_pending
from lexdesk.confirm.sessions import ConfirmSessions

__all__ = [
    "ConfirmArbiter", "ConfirmRequest", "ConfirmScopeError", "PendingConfirmation", "Variant",
    "confirm", "confirm_scope", "current_arbiter", "use_confirm",
    "ConfirmDialogView", "render_pending", "ConfirmSessions",
]
