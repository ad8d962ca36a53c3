"""Tests for the ordered route permission table."""

import pytest

from lexdesk.auth.capabilities import Capabilities
from lexdesk.auth.permissions import PermissionProfile
from lexdesk.auth.route_guard import (
    ROUTE_PERMISSION_MAP,
    PatternRule,
    PrefixRule,
    RouteAuthorizer,
    RouteRule,
    always,
    authorize,
    pattern,
    prefix,
)


class FakeCaps:
    """Capability set where only the named predicates return True."""

    PREDICATES = (
        "can_view_cases", "can_view_clients", "can_view_sessions",
        "can_view_tasks", "can_view_documents", "can_view_finance",
    )

    def __init__(self, *granted: str):
        for name in self.PREDICATES:
            setattr(self, name, (lambda value: lambda: value)(name in granted))


ALL = FakeCaps(*FakeCaps.PREDICATES)
NONE = FakeCaps()


class TestAlwaysAllowed:
    @pytest.mark.parametrize("path", [
        "/dashboard",
        "/dashboard/",
        "/dashboard/settings/userprofile",
        "/dashboard/notifications",
        "/dashboard/notifications/12",
    ])
    def test_allowed_with_no_capabilities(self, path):
        assert authorize(path, NONE, False)


class TestFailOpen:
    def test_unknown_section(self):
        assert authorize("/dashboard/unknown-section", NONE, False)

    def test_outside_dashboard(self):
        assert authorize("/auth/login", NONE, False)

    def test_match_returns_none(self):
        assert RouteAuthorizer().match("/dashboard/unknown-section") is None


class TestDefaultTable:
    @pytest.mark.parametrize("path, capability", [
        ("/dashboard/cases", "can_view_cases"),
        ("/dashboard/cases/42/payments", "can_view_cases"),
        ("/dashboard/cases-finance", "can_view_finance"),
        ("/dashboard/clients", "can_view_clients"),
        ("/dashboard/clients/5", "can_view_clients"),
        ("/dashboard/clients-finance", "can_view_finance"),
        ("/dashboard/calendar", "can_view_sessions"),
        ("/dashboard/sessions", "can_view_sessions"),
        ("/dashboard/tasks", "can_view_tasks"),
        ("/dashboard/courts", "can_view_documents"),
        ("/dashboard/files/9", "can_view_documents"),
        ("/dashboard/accounting/case-accounting/fees", "can_view_finance"),
    ])
    def test_governed_by_single_capability(self, path, capability):
        assert authorize(path, FakeCaps(capability), False)
        others = [p for p in FakeCaps.PREDICATES if p != capability]
        assert not authorize(path, FakeCaps(*others), False)

    @pytest.mark.parametrize("path", [
        "/dashboard/settings/office",
        "/dashboard/settings/users",
        "/dashboard/settings/permissions",
    ])
    def test_settings_are_office_admin_only(self, path):
        assert not authorize(path, ALL, False)
        assert authorize(path, NONE, True)

    def test_finance_subroute_checked_before_clients(self):
        # Client viewer without finance must not reach the finance page
        assert not authorize("/dashboard/clients-finance", FakeCaps("can_view_clients"), False)

    def test_settings_courts_is_not_a_courts_route(self):
        assert authorize("/dashboard/settings/courts", NONE, False)

    def test_real_capabilities(self):
        caps = Capabilities(PermissionProfile(view_case_permissions=2, finance_permission=8))
        assert authorize("/dashboard/cases", caps, False)
        assert authorize("/dashboard/accounting", caps, False)
        assert not authorize("/dashboard/tasks", caps, False)

    def test_office_admin_capabilities_open_everything(self):
        caps = Capabilities(PermissionProfile(), is_office_admin=True)
        for path in ("/dashboard/cases", "/dashboard/clients-finance", "/dashboard/settings/users"):
            assert authorize(path, caps, True)


class TestRuleOrder:
    finance_rule = pattern(r"^/dashboard/clients-finance", lambda can, _: can.can_view_finance())
    clients_rule = pattern(r"^/dashboard/clients", lambda can, _: can.can_view_clients())

    def test_first_match_wins(self):
        authorizer = RouteAuthorizer([self.finance_rule, self.clients_rule])
        caps = FakeCaps("can_view_clients")
        assert authorizer.match("/dashboard/clients-finance") is self.finance_rule
        assert not authorizer.authorize("/dashboard/clients-finance", caps, False)

    def test_reversed_order_changes_outcome(self):
        authorizer = RouteAuthorizer([self.clients_rule, self.finance_rule])
        caps = FakeCaps("can_view_clients")
        assert authorizer.authorize("/dashboard/clients-finance", caps, False)

    def test_later_rules_are_not_consulted(self):
        calls = []

        def spy(can, is_admin):
            calls.append(True)
            return False

        authorizer = RouteAuthorizer([pattern(r"^/dashboard/x", always), pattern(r"^/dashboard", spy)])
        assert authorizer.authorize("/dashboard/x", NONE, False)
        assert calls == []


class TestPrefixRule:
    rule = prefix("/dashboard/files", lambda can, _: can.can_view_documents())

    def test_matches_path_and_children(self):
        assert self.rule.matches("/dashboard/files")
        assert self.rule.matches("/dashboard/files/3")

    def test_does_not_match_siblings(self):
        assert not self.rule.matches("/dashboard/files-archive")
        assert not self.rule.matches("/dashboard")


class TestRuleShapes:
    def test_base_rule_cannot_be_built(self):
        with pytest.raises(TypeError):
            RouteRule(check=always)

    def test_prefix_is_required(self):
        with pytest.raises(TypeError):
            PrefixRule(check=always)

    def test_pattern_is_required(self):
        with pytest.raises(TypeError):
            PatternRule(check=always)

    def test_fields_are_keyword_only(self):
        with pytest.raises(TypeError):
            PrefixRule(always, "/dashboard/files")


def test_authorize_is_idempotent():
    caps = FakeCaps("can_view_cases")
    results = {authorize("/dashboard/cases/1", caps, False) for _ in range(5)}
    assert results == {True}


def test_missing_predicate_is_a_caller_bug():
    class Partial:
        pass

    with pytest.raises(AttributeError):
        authorize("/dashboard/cases", Partial(), False)


def test_table_is_immutable_sequence():
    assert isinstance(ROUTE_PERMISSION_MAP, tuple)
    assert len(ROUTE_PERMISSION_MAP) == 14
