"""
Capability predicates consulted by the route guard and page code.

Each predicate answers one "may the current user do X" question, derived
from the user's PermissionProfile. Office administrators bypass every
check.
"""

from __future__ import annotations

from lexdesk.auth.permission_flags import get_dml_permission, get_permission
from lexdesk.auth.permissions import PermissionProfile


class Capabilities:
    def __init__(self, profile: PermissionProfile, is_office_admin: bool = False):
        self.profile = profile
        self.is_office_admin = is_office_admin

        self._doc = get_permission(profile.document_permissions)
        self._client = get_permission(profile.client_permissions)
        self._session = get_permission(profile.session_permission)
        self._finance = get_permission(profile.finance_permission)
        self._case_dml = get_dml_permission(profile.dml_case_permissions)
        self._task_dml = get_dml_permission(profile.dml_task_permissions)

    def _allow(self, granted: bool) -> bool:
        return self.is_office_admin or granted

    # ── Cases ──
    def can_view_cases(self) -> bool:
        return self._allow(self.profile.view_case_permissions > 0)

    def can_create_case(self) -> bool:
        return self._allow(self._case_dml.create)

    def can_update_case(self) -> bool:
        return self._allow(self._case_dml.update)

    def can_delete_case(self) -> bool:
        return self._allow(self._case_dml.delete)

    # ── Clients ──
    def can_view_clients(self) -> bool:
        return self._allow(self._client.view)

    def can_create_client(self) -> bool:
        return self._allow(self._client.create)

    def can_update_client(self) -> bool:
        return self._allow(self._client.update)

    def can_delete_client(self) -> bool:
        return self._allow(self._client.delete)

    # ── Sessions ──
    def can_view_sessions(self) -> bool:
        return self._allow(self._session.view)

    def can_create_session(self) -> bool:
        return self._allow(self._session.create)

    def can_update_session(self) -> bool:
        return self._allow(self._session.update)

    def can_delete_session(self) -> bool:
        return self._allow(self._session.delete)

    # ── Tasks ──
    def can_view_tasks(self) -> bool:
        return self._allow(self.profile.view_task_permissions > 0)

    def can_create_task(self) -> bool:
        return self._allow(self._task_dml.create)

    def can_update_task(self) -> bool:
        return self._allow(self._task_dml.update)

    def can_delete_task(self) -> bool:
        return self._allow(self._task_dml.delete)

    # ── Documents ──
    def can_view_documents(self) -> bool:
        return self._allow(self._doc.view)

    def can_create_document(self) -> bool:
        return self._allow(self._doc.create)

    def can_update_document(self) -> bool:
        return self._allow(self._doc.update)

    def can_delete_document(self) -> bool:
        return self._allow(self._doc.delete)

    # ── Finance ──
    def can_view_finance(self) -> bool:
        return self._allow(self._finance.view)

    def can_create_finance(self) -> bool:
        return self._allow(self._finance.create)

    def can_update_finance(self) -> bool:
        return self._allow(self._finance.update)

    def can_delete_finance(self) -> bool:
        return self._allow(self._finance.delete)

    def as_dict(self) -> dict[str, bool]:
        """Every predicate evaluated, keyed by name."""
        return {
            name: getattr(self, name)()
            for name in sorted(dir(self))
            if name.startswith("can_")
        }
