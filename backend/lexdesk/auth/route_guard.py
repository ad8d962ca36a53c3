"""
Which dashboard routes the current user may open.

ROUTE_PERMISSION_MAP is an ordered table of (route pattern, capability
check). A path is tested against each rule from the top; the first rule
that matches decides, and later rules are never consulted. Nested or more
specific routes therefore sit above their ancestors
(/dashboard/clients-finance before /dashboard/clients).

Paths that match no rule are allowed. New or unclassified pages render
until somebody adds a rule for them.

Rules come in two shapes:
    PrefixRule   literal path, matches the path itself and anything below it
    PatternRule  regular expression searched against the path
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class CapabilitySet(Protocol):
    """The predicates route checks call. See lexdesk.auth.capabilities."""

    def can_view_cases(self) -> bool: ...
    def can_view_clients(self) -> bool: ...
    def can_view_sessions(self) -> bool: ...
    def can_view_tasks(self) -> bool: ...
    def can_view_documents(self) -> bool: ...
    def can_view_finance(self) -> bool: ...


CapabilityCheck = Callable[[CapabilitySet, bool], bool]


class UnauthorizedRouteError(Exception):
    """The route guard denied `path`; the shell shows the unauthorized view."""

    def __init__(self, path: str):
        super().__init__(f"Not authorized for {path}")
        self.path = path


def always(_can: CapabilitySet, _is_office_admin: bool) -> bool:
    return True


def office_admin_only(_can: CapabilitySet, is_office_admin: bool) -> bool:
    return is_office_admin


@dataclass(frozen=True)
class RouteRule(ABC):
    check: CapabilityCheck

    @abstractmethod
    def matches(self, path: str) -> bool: ...

    @property
    @abstractmethod
    def label(self) -> str: ...


@dataclass(frozen=True, kw_only=True)
class PrefixRule(RouteRule):
    prefix: str

    def matches(self, path: str) -> bool:
        return path == self.prefix or path.startswith(self.prefix + "/")

    @property
    def label(self) -> str:
        return self.prefix


@dataclass(frozen=True, kw_only=True)
class PatternRule(RouteRule):
    pattern: re.Pattern

    def matches(self, path: str) -> bool:
        return self.pattern.search(path) is not None

    @property
    def label(self) -> str:
        return self.pattern.pattern


def prefix(path: str, check: CapabilityCheck) -> PrefixRule:
    return PrefixRule(check=check, prefix=path)


def pattern(regex: str, check: CapabilityCheck) -> PatternRule:
    return PatternRule(check=check, pattern=re.compile(regex))


# Order matters: more specific paths come first.
ROUTE_PERMISSION_MAP: tuple[RouteRule, ...] = (
    # Settings - office admin only
    pattern(r"^/dashboard/settings/(office|users|permissions)", office_admin_only),
    # User profile - always allowed for authenticated users
    pattern(r"^/dashboard/settings/userprofile", always),
    # Cases
    pattern(r"^/dashboard/cases-finance", lambda can, _: can.can_view_finance()),
    pattern(r"^/dashboard/cases(/|$)", lambda can, _: can.can_view_cases()),
    # Clients
    pattern(r"^/dashboard/clients-finance", lambda can, _: can.can_view_finance()),
    pattern(r"^/dashboard/clients(/|$)", lambda can, _: can.can_view_clients()),
    # Sessions & calendar
    pattern(r"^/dashboard/calendar", lambda can, _: can.can_view_sessions()),
    pattern(r"^/dashboard/sessions(/|$)", lambda can, _: can.can_view_sessions()),
    # Tasks
    pattern(r"^/dashboard/tasks(/|$)", lambda can, _: can.can_view_tasks()),
    # Documents (courts, files)
    pattern(r"^/dashboard/courts", lambda can, _: can.can_view_documents()),
    pattern(r"^/dashboard/files(/|$)", lambda can, _: can.can_view_documents()),
    # Accounting
    pattern(r"^/dashboard/accounting", lambda can, _: can.can_view_finance()),
    # Dashboard home - always allowed
    pattern(r"^/dashboard/?$", always),
    pattern(r"^/dashboard/notifications", always),
)


class RouteAuthorizer:
    """Evaluates an ordered rule table, first match wins, default allow."""

    def __init__(self, rules: tuple[RouteRule, ...] | list[RouteRule] = ROUTE_PERMISSION_MAP):
        self.rules = tuple(rules)

    def match(self, path: str) -> RouteRule | None:
        for rule in self.rules:
            if rule.matches(path):
                return rule
        return None

    def authorize(self, path: str, capabilities: CapabilitySet, is_office_admin: bool) -> bool:
        """
        Decide whether `path` may render.

        `capabilities` must expose every predicate the table's checks call;
        a missing predicate is a caller bug, not a deny.
        """
        rule = self.match(path)
        if rule is None:
            return True
        allowed = bool(rule.check(capabilities, is_office_admin))
        if not allowed:
            logger.debug("Route %s denied by rule %s", path, rule.label)
        return allowed


default_authorizer = RouteAuthorizer()


def authorize(path: str, capabilities: CapabilitySet, is_office_admin: bool) -> bool:
    return default_authorizer.authorize(path, capabilities, is_office_admin)
