"""Tests for capability predicates derived from a permission profile."""

from lexdesk.auth.capabilities import Capabilities
from lexdesk.auth.context import RequestContext
from lexdesk.auth.permissions import PermissionProfile


def test_empty_profile_denies_everything():
    caps = Capabilities(PermissionProfile())
    assert not any(caps.as_dict().values())
    assert len(caps.as_dict()) == 24


def test_office_admin_passes_every_predicate():
    caps = Capabilities(PermissionProfile(), is_office_admin=True)
    assert all(caps.as_dict().values())


def test_case_view_uses_view_level():
    assert Capabilities(PermissionProfile(view_case_permissions=1)).can_view_cases()
    assert not Capabilities(PermissionProfile(view_case_permissions=0)).can_view_cases()


def test_case_changes_use_dml_bits():
    caps = Capabilities(PermissionProfile(dml_case_permissions=5))
    assert caps.can_create_case()
    assert not caps.can_update_case()
    assert caps.can_delete_case()


def test_tasks_follow_their_own_fields():
    caps = Capabilities(PermissionProfile(view_task_permissions=2, dml_task_permissions=2))
    assert caps.can_view_tasks()
    assert caps.can_update_task()
    assert not caps.can_create_task()
    assert not caps.can_view_cases()


def test_bitwise_sections():
    caps = Capabilities(PermissionProfile(
        client_permissions=9,
        session_permission=8,
        document_permissions=2,
        finance_permission=12,
    ))
    assert caps.can_view_clients() and caps.can_create_client()
    assert caps.can_view_sessions() and not caps.can_delete_session()
    assert caps.can_update_document() and not caps.can_view_documents()
    assert caps.can_view_finance() and caps.can_delete_finance()
    assert not caps.can_create_finance()


def test_profile_accepts_camel_case_keys():
    profile = PermissionProfile.model_validate({
        "documentPermissions": 8,
        "sessionPermission": 8,
        "viewCasePermissions": 1,
    })
    assert profile.document_permissions == 8
    assert profile.session_permission == 8
    assert profile.view_case_permissions == 1
    assert profile.model_dump(by_alias=True)["financePermission"] == 0


def test_request_context_office_admin_flag():
    admin = RequestContext(user_id="1", role="OfficeAdmin")
    lawyer = RequestContext(user_id="2", role="Lawyer")
    assert admin.is_office_admin and admin.capabilities.can_view_finance()
    assert not lawyer.is_office_admin and not lawyer.capabilities.can_view_finance()
    assert lawyer.actor == "Lawyer:2"
