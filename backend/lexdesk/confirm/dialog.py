"""
Dialog view model: what the shell needs to draw the pending confirmation.
"""

from __future__ import annotations

from pydantic import BaseModel

from lexdesk.confirm.arbiter import PendingConfirmation, Variant

CLOSE_LABEL = "إغلاق"

VARIANT_STYLES: dict[Variant, dict[str, str]] = {
    Variant.DANGER: {
        "icon": "bg-red-100 text-red-600",
        "button": "bg-red-600 hover:bg-red-700 focus:ring-red-500",
    },
    Variant.WARNING: {
        "icon": "bg-yellow-100 text-yellow-600",
        "button": "bg-yellow-600 hover:bg-yellow-700 focus:ring-yellow-500",
    },
    Variant.INFO: {
        "icon": "bg-blue-100 text-blue-600",
        "button": "bg-blue-600 hover:bg-blue-700 focus:ring-blue-500",
    },
}


class ConfirmDialogView(BaseModel):
    id: str
    open: bool
    title: str
    description: str | None = None
    confirm_text: str
    cancel_text: str
    variant: Variant
    styles: dict[str, str]
    aria_label_close: str = CLOSE_LABEL

    @classmethod
    def from_pending(cls, pending: PendingConfirmation) -> "ConfirmDialogView":
        req = pending.request
        return cls(
            id=pending.id,
            open=pending.open,
            title=req.title,
            description=req.description,
            confirm_text=req.confirm_text,
            cancel_text=req.cancel_text,
            variant=req.variant,
            styles=VARIANT_STYLES[req.variant],
        )


def render_pending(pending: PendingConfirmation | None) -> ConfirmDialogView | None:
    if pending is None:
        return None
    return ConfirmDialogView.from_pending(pending)
