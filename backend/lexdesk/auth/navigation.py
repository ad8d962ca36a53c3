"""
The dashboard side menu, trimmed to what the route guard allows.

A menu entry is shown only if its href would pass the route guard. A group
entry (href "#") has no page of its own and is shown while at least one of
its children is.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lexdesk.auth.route_guard import CapabilitySet, RouteAuthorizer, default_authorizer

GROUP_HREF = "#"


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    children: tuple["NavItem", ...] = field(default_factory=tuple)


NAV_ITEMS: tuple[NavItem, ...] = (
    NavItem("لوحة التحكم", "/dashboard"),
    NavItem("القضايا", "/dashboard/cases"),
    NavItem("العملاء", "/dashboard/clients"),
    NavItem("المحاكم", "/dashboard/courts"),
    NavItem("الجلسات", "/dashboard/sessions"),
    NavItem("المهام", "/dashboard/tasks"),
    NavItem("التقويم", "/dashboard/calendar"),
    NavItem(
        "الإعدادات",
        GROUP_HREF,
        children=(
            NavItem("المكتب", "/dashboard/settings/office"),
            NavItem("المستخدمون", "/dashboard/settings/users"),
            NavItem("الصلاحيات", "/dashboard/settings/permissions"),
            NavItem("الملف الشخصي", "/dashboard/settings/userprofile"),
        ),
    ),
)


def is_active_route(current: str, href: str) -> bool:
    if href == GROUP_HREF:
        return False
    return current == href or current.startswith(href + "/")


def visible_navigation(
    capabilities: CapabilitySet,
    is_office_admin: bool,
    authorizer: RouteAuthorizer = default_authorizer,
    items: tuple[NavItem, ...] = NAV_ITEMS,
) -> list[NavItem]:
    visible: list[NavItem] = []
    for item in items:
        if item.href == GROUP_HREF:
            children = visible_navigation(capabilities, is_office_admin, authorizer, item.children)
            if children:
                visible.append(NavItem(item.label, item.href, tuple(children)))
        elif authorizer.authorize(item.href, capabilities, is_office_admin):
            visible.append(item)
    return visible


def navigation_tree(items: list[NavItem], current: str = "") -> list[dict]:
    """Serialize for the shell, flagging the entry that matches `current`."""
    return [
        {
            "label": item.label,
            "href": item.href,
            "active": is_active_route(current, item.href),
            "children": navigation_tree(list(item.children), current),
        }
        for item in items
    ]
