"""Kernel security – roles, principals, permissions, policies and context."""
from authrealm.kernel.security.roles import (
    DEFAULT_MAX_ROLES,
    FIRST_ROLE_ID,
    RoleRegistry,
    RoleSet,
)
from authrealm.kernel.security.principal import Principal, TokenPrincipal
from authrealm.kernel.security.permission import (
    Permission,
    PermissionKind,
    RolePermission,
    UriPermission,
)
from authrealm.kernel.security.policy import (
    Policy,
    PolicyDecision,
    RolePolicy,
    UriPolicy,
    UriRule,
)
from authrealm.kernel.security.manager import DEFAULT_MAX_POLICIES, PolicyManager
from authrealm.kernel.security.source import MappingPolicySource, PolicySource
from authrealm.kernel.security.security_context import (
    SecurityContext,
    has_permission,
    require_permission,
    security_context,
)
from authrealm.kernel.security.crypto import HmacPasswordHasher, PasswordHasher

__all__ = [
    "DEFAULT_MAX_POLICIES",
    "DEFAULT_MAX_ROLES",
    "FIRST_ROLE_ID",
    "HmacPasswordHasher",
    "MappingPolicySource",
    "PasswordHasher",
    "Permission",
    "PermissionKind",
    "Policy",
    "PolicyDecision",
    "PolicyManager",
    "PolicySource",
    "Principal",
    "RoleRegistry",
    "RolePermission",
    "RolePolicy",
    "RoleSet",
    "SecurityContext",
    "TokenPrincipal",
    "UriPermission",
    "UriPolicy",
    "UriRule",
    "has_permission",
    "require_permission",
    "security_context",
]
