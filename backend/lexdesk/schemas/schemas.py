"""
Pydantic schemas for API request/response models.
"""

from pydantic import BaseModel, Field

from lexdesk.confirm.dialog import ConfirmDialogView


# ── Route guard ──

class RouteCheckRequest(BaseModel):
    path: str = Field(..., min_length=1)


class RouteCheckResponse(BaseModel):
    path: str
    allowed: bool


UNAUTHORIZED_TITLE = "غير مصرح لك بالوصول"
UNAUTHORIZED_MESSAGE = (
    "ليس لديك الصلاحية اللازمة لعرض هذه الصفحة. "
    "يرجى التواصل مع المسؤول إذا كنت تعتقد أن هذا خطأ."
)


class UnauthorizedView(BaseModel):
    unauthorized: bool = True
    path: str
    title: str = UNAUTHORIZED_TITLE
    message: str = UNAUTHORIZED_MESSAGE
    home: str = "/dashboard"
    home_label: str = "العودة للوحة التحكم"


# ── Navigation / page shell ──

class NavEntry(BaseModel):
    label: str
    href: str
    active: bool = False
    children: list["NavEntry"] = []


class NavigationResponse(BaseModel):
    items: list[NavEntry]


class PageShell(BaseModel):
    path: str
    user_id: str
    is_office_admin: bool
    capabilities: dict[str, bool]
    navigation: list[NavEntry]


# ── Confirm ──

class PendingResponse(BaseModel):
    dialog: ConfirmDialogView | None = None


class ResolveResponse(BaseModel):
    resolved: bool


class ConfirmResult(BaseModel):
    confirmed: bool
