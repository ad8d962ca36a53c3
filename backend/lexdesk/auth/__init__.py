from lexdesk.auth.permissions import PermissionProfile
from lexdesk.auth.capabilities import Capabilities
from lexdesk.auth.context import RequestContext
from lexdesk.auth.route_guard import (
    ROUTE_PERMISSION_MAP, PatternRule, PrefixRule, RouteAuthorizer, RouteRule, authorize,
)

__all__ = [
    "PermissionProfile", "Capabilities", "RequestContext",
    "ROUTE_PERMISSION_MAP", "PatternRule", "PrefixRule", "RouteAuthorizer", "RouteRule",
    "authorize",
]
