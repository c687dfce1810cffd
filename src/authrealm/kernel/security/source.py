"""Kernel security – PolicySource port and MappingPolicySource."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol

from authrealm.kernel.errors import DomainError, NotFoundError, PolicyLoadError
from authrealm.kernel.security.policy import RolePolicy, UriPolicy
from authrealm.kernel.security.roles import RoleRegistry

if TYPE_CHECKING:
    from authrealm.kernel.security.manager import PolicyManager


class PolicySource(Protocol):
    """Port: populate a :class:`PolicyManager` from a declarative source.

    Implementations parse their own format (XML, TOML, a database, …) and
    call ``create_role`` and the policy-specific population methods. They
    run before the host starts serving traffic.
    """

    def load(self, manager: "PolicyManager") -> None: ...


class MappingPolicySource:
    """Policy source backed by already-decoded data.

    Expected shape::

        {
            "roles": ["admin", "developer", "manager"],
            "uri": [
                {"pattern": "/developer/*", "roles": ["developer"]},
                {"pattern": "/manager/*", "roles": ["manager", "admin"]},
            ],
        }

    Roles are created through the registry of the manager's
    :class:`RolePolicy` (or, failing that, its :class:`UriPolicy`). Unknown
    role names, a full registry and other malformed input surface as
    :class:`PolicyLoadError`.
    """

    def __init__(self, data: Mapping[str, Any], name: str = "mapping") -> None:
        self._data = data
        self.name = name

    def load(self, manager: "PolicyManager") -> None:
        roles = self._data.get("roles", [])
        rules = self._data.get("uri", [])
        if isinstance(roles, str) or not isinstance(roles, (list, tuple)):
            raise PolicyLoadError("'roles' must be a list of role names", source=self.name)
        if not isinstance(rules, (list, tuple)):
            raise PolicyLoadError("'uri' must be a list of rules", source=self.name)

        registry = self._registry(manager)
        for role in roles:
            try:
                registry.create_role(str(role))
            except DomainError as exc:
                raise PolicyLoadError(
                    f"cannot create role {role!r}: {exc.message}", source=self.name, cause=exc
                ) from exc

        if not rules:
            return
        try:
            uri_policy = manager.find_policy(UriPolicy)
        except NotFoundError as exc:
            raise PolicyLoadError(
                "URI rules given but no UriPolicy is registered", source=self.name, cause=exc
            ) from exc
        for index, rule in enumerate(rules):
            if not isinstance(rule, Mapping) or "pattern" not in rule:
                raise PolicyLoadError(
                    f"URI rule #{index} must be a mapping with a 'pattern'",
                    source=self.name,
                )
            rule_roles = rule.get("roles", [])
            if isinstance(rule_roles, str) or not isinstance(rule_roles, (list, tuple)):
                raise PolicyLoadError(
                    f"URI rule #{index}: 'roles' must be a list of role names",
                    source=self.name,
                )
            try:
                uri_policy.add_rule(str(rule["pattern"]), [str(r) for r in rule_roles])
            except DomainError as exc:
                raise PolicyLoadError(
                    f"URI rule #{index} is invalid: {exc.message}", source=self.name, cause=exc
                ) from exc

    def _registry(self, manager: "PolicyManager") -> RoleRegistry:
        for policy_type in (RolePolicy, UriPolicy):
            try:
                return manager.find_policy(policy_type).registry
            except NotFoundError:
                continue
        raise PolicyLoadError("No role-aware policy is registered", source=self.name)


__all__ = ["MappingPolicySource", "PolicySource"]
