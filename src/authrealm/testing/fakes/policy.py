"""Testing fakes – FakePolicy."""
from __future__ import annotations

from authrealm.kernel.security import (
    Permission,
    PermissionKind,
    Policy,
    PolicyDecision,
    Principal,
)


class FakePolicy(Policy):
    """Configurable policy for tests.

    Answers every kind by default and returns ``default`` unless an
    override was registered for the exact permission::

        policy.set(UriPermission("/admin"), PolicyDecision.GRANT)

    Every evaluation is recorded in ``calls``.
    """

    def __init__(
        self,
        name: str = "fake",
        default: PolicyDecision = PolicyDecision.NOT_APPLICABLE,
        kinds: frozenset[PermissionKind] = frozenset(PermissionKind),
    ) -> None:
        self.name = name
        self.kinds = kinds
        self._default = default
        self._overrides: dict[Permission, PolicyDecision] = {}
        self.calls: list[tuple[Principal | None, Permission]] = []

    def set(self, permission: Permission, decision: PolicyDecision) -> None:
        self._overrides[permission] = decision

    def grant_all(self) -> None:
        self._default = PolicyDecision.GRANT

    def deny_all(self) -> None:
        self._default = PolicyDecision.DENY

    def evaluate(self, principal: Principal | None, permission: Permission) -> PolicyDecision:
        self.calls.append((principal, permission))
        return self._overrides.get(permission, self._default)


__all__ = ["FakePolicy"]
