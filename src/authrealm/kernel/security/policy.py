"""Kernel security – PolicyDecision, Policy, RolePolicy, UriPolicy."""
from __future__ import annotations

import abc
import dataclasses
import fnmatch
import re
from enum import Enum
from typing import Iterable

from authrealm.kernel.errors import ValidationError
from authrealm.kernel.security.permission import (
    Permission,
    PermissionKind,
    RolePermission,
    UriPermission,
)
from authrealm.kernel.security.principal import Principal
from authrealm.kernel.security.roles import RoleRegistry, RoleSet

_WILDCARDS = re.compile(r"[*?\[]")


class PolicyDecision(str, Enum):
    GRANT = "GRANT"
    DENY = "DENY"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class Policy(abc.ABC):
    """A named rule set answering permission requests of some kinds.

    Policies are built at startup, populated by a policy source and then
    only read. ``evaluate`` is called on the request path and must not
    mutate the policy.
    """

    name: str
    kinds: frozenset[PermissionKind] = frozenset()

    def applies_to(self, permission: Permission) -> bool:
        return permission.kind in self.kinds

    @abc.abstractmethod
    def evaluate(self, principal: Principal | None, permission: Permission) -> PolicyDecision:
        """Return ``GRANT``, ``DENY`` or ``NOT_APPLICABLE`` for *permission*."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# ---------------------------------------------------------------------------
# RolePolicy
# ---------------------------------------------------------------------------


class RolePolicy(Policy):
    """Grants a :class:`RolePermission` when the principal holds that role.

    Role ids are validated against the shared :class:`RoleRegistry`: asking
    for a role that was never created raises
    :class:`~authrealm.kernel.errors.RoleNotFoundError` instead of silently
    denying, so a misconfigured permission shows up during integration tests.
    """

    NAME = "roles"

    kinds = frozenset({PermissionKind.ROLE})

    def __init__(self, registry: RoleRegistry, name: str = NAME) -> None:
        self.name = name
        self.registry = registry

    def evaluate(self, principal: Principal | None, permission: Permission) -> PolicyDecision:
        if not isinstance(permission, RolePermission):
            return PolicyDecision.NOT_APPLICABLE
        self.registry.get_role_name(permission.role)
        if principal is not None and principal.has_role(permission.role):
            return PolicyDecision.GRANT
        return PolicyDecision.DENY


# ---------------------------------------------------------------------------
# UriPolicy
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class UriRule:
    """Grants URIs matching *pattern* to any of *roles*."""

    pattern: str
    roles: RoleSet
    order: int = 0

    @property
    def specificity(self) -> int:
        """Length of the literal prefix before the first wildcard."""
        match = _WILDCARDS.search(self.pattern)
        return len(self.pattern) if match is None else match.start()

    def matches(self, uri: str) -> bool:
        return fnmatch.fnmatchcase(uri, self.pattern)


class UriPolicy(Policy):
    """Maps shell-style URI patterns to the roles allowed to access them.

    The most specific matching rule decides: rules are tried by decreasing
    literal-prefix length, then in insertion order. A URI no rule matches is
    ``NOT_APPLICABLE`` and therefore denied by the manager.

    Example::

        policy = UriPolicy(registry)
        policy.add_rule("/developer/*", ["developer"])
        policy.add_rule("/developer/admin/*", ["admin"])
    """

    NAME = "uri"

    kinds = frozenset({PermissionKind.URI})

    def __init__(self, registry: RoleRegistry, name: str = NAME) -> None:
        self.name = name
        self.registry = registry
        self._rules: list[UriRule] = []

    @property
    def rules(self) -> tuple[UriRule, ...]:
        return tuple(self._rules)

    def add_rule(self, pattern: str, roles: Iterable[str]) -> UriRule:
        """Append a rule; role names must already exist in the registry."""
        if not pattern:
            raise ValidationError("URI pattern must not be empty")
        rule = UriRule(
            pattern=pattern,
            roles=self.registry.role_set(*roles),
            order=len(self._rules),
        )
        self._rules.append(rule)
        self._rules.sort(key=lambda r: (-r.specificity, r.order))
        return rule

    def find_rule(self, uri: str) -> UriRule | None:
        for rule in self._rules:
            if rule.matches(uri):
                return rule
        return None

    def evaluate(self, principal: Principal | None, permission: Permission) -> PolicyDecision:
        if not isinstance(permission, UriPermission):
            return PolicyDecision.NOT_APPLICABLE
        rule = self.find_rule(permission.uri)
        if rule is None:
            return PolicyDecision.NOT_APPLICABLE
        if principal is not None and principal.roles.bits & rule.roles.bits:
            return PolicyDecision.GRANT
        return PolicyDecision.DENY


__all__ = ["Policy", "PolicyDecision", "RolePolicy", "UriPolicy", "UriRule"]
