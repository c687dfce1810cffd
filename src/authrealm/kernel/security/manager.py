"""Kernel security – PolicyManager."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from authrealm.kernel.errors import (
    BaseError,
    CapacityError,
    NotFoundError,
    PolicyLoadError,
    ValidationError,
)
from authrealm.kernel.security.permission import Permission
from authrealm.kernel.security.policy import Policy, PolicyDecision, RolePolicy, UriPolicy
from authrealm.kernel.security.roles import RoleRegistry
from authrealm.observability.logging import get_logger

if TYPE_CHECKING:
    from authrealm.config.settings import RealmSettings
    from authrealm.kernel.security.security_context import SecurityContext
    from authrealm.kernel.security.source import PolicySource

P = TypeVar("P", bound=Policy)

DEFAULT_MAX_POLICIES = 16

_log = get_logger(__name__)


class PolicyManager:
    """Fixed-capacity aggregate of :class:`Policy` instances.

    A permission request is dispatched, in registration order, to every
    policy that declares itself applicable to the request's kind. The first
    ``GRANT`` wins; anything else is a denial.

    The manager is populated during startup (``add_policy`` / ``read_policy``)
    and is not safe to mutate while permission checks are running.
    """

    def __init__(self, max_policies: int = DEFAULT_MAX_POLICIES) -> None:
        if max_policies <= 0:
            raise ValidationError("max_policies must be positive")
        self._max_policies = max_policies
        self._policies: list[Policy] = []

    @classmethod
    def from_settings(
        cls,
        settings: "RealmSettings",
        registry: RoleRegistry | None = None,
    ) -> "PolicyManager":
        """Build a manager holding a :class:`RolePolicy` and a :class:`UriPolicy`.

        Both policies share *registry*, created from ``settings.max_roles``
        when omitted.
        """
        registry = registry or RoleRegistry(max_roles=settings.max_roles)
        manager = cls(max_policies=settings.max_policies)
        manager.add_policy(RolePolicy(registry))
        manager.add_policy(UriPolicy(registry))
        return manager

    @property
    def max_policies(self) -> int:
        return self._max_policies

    @property
    def policies(self) -> tuple[Policy, ...]:
        return tuple(self._policies)

    def add_policy(self, policy: Policy) -> None:
        if len(self._policies) >= self._max_policies:
            raise CapacityError("Policy manager", self._max_policies)
        if any(p.name == policy.name for p in self._policies):
            raise ValidationError(f"policy {policy.name!r} is already registered")
        self._policies.append(policy)
        _log.debug("policy_added", policy=policy.name, count=len(self._policies))

    def get_policy(self, name: str) -> Policy:
        for policy in self._policies:
            if policy.name == name:
                return policy
        raise NotFoundError("Policy", name)

    def find_policy(self, policy_type: type[P]) -> P:
        """Return the first registered policy of *policy_type*."""
        for policy in self._policies:
            if isinstance(policy, policy_type):
                return policy
        raise NotFoundError("Policy", policy_type.__name__)

    def evaluate(self, context: "SecurityContext", permission: Permission) -> PolicyDecision:
        """Combine the applicable policies' decisions for *permission*.

        ``DENY`` means at least one policy answered and none granted;
        ``NOT_APPLICABLE`` means no policy could answer at all.
        """
        decision = PolicyDecision.NOT_APPLICABLE
        for policy in self._policies:
            if not policy.applies_to(permission):
                continue
            result = policy.evaluate(context.principal, permission)
            if result is PolicyDecision.GRANT:
                return result
            if result is PolicyDecision.DENY:
                decision = PolicyDecision.DENY
        return decision

    def has_permission(self, context: "SecurityContext", permission: Permission) -> bool:
        return self.evaluate(context, permission) is PolicyDecision.GRANT

    def read_policy(self, source: "PolicySource") -> None:
        """Populate the registered policies from *source*.

        Startup only. Failures other than the engine's own errors are
        wrapped in :class:`~authrealm.kernel.errors.PolicyLoadError`.
        """
        name = getattr(source, "name", type(source).__name__)
        try:
            source.load(self)
        except BaseError as err:
            _log.error("policy_source_failed", source=name, error=err.to_dict())
            raise
        except Exception as exc:
            wrapped = PolicyLoadError(
                f"Failed to load policy source {name!r}: {exc}", source=name, cause=exc
            )
            _log.error("policy_source_failed", source=name, error=wrapped.to_dict())
            raise wrapped from exc
        _log.info("policy_source_loaded", source=name, policies=[p.name for p in self._policies])


__all__ = ["DEFAULT_MAX_POLICIES", "PolicyManager"]
