"""
RequestContext — the "who is asking and what may they see" abstraction.

Every authenticated API request gets a RequestContext. It carries:
- user_id: who is making the request (also the confirm-session key)
- role: the office role string from the token
- profile: the PermissionProfile assigned to the user

`capabilities` and `is_office_admin` are derived from those, so the route
guard only ever sees the predicate surface and the admin flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from lexdesk.auth.capabilities import Capabilities
from lexdesk.auth.permissions import PermissionProfile
from lexdesk.config import settings


@dataclass
class RequestContext:
    user_id: str = "anonymous"
    role: str = ""
    profile: PermissionProfile = field(default_factory=PermissionProfile)

    @property
    def is_office_admin(self) -> bool:
        return self.role == settings.office_admin_role

    @cached_property
    def capabilities(self) -> Capabilities:
        return Capabilities(self.profile, is_office_admin=self.is_office_admin)

    @property
    def actor(self) -> str:
        """Identity string for log lines."""
        return f"{self.role or 'none'}:{self.user_id}"
