"""Kernel security – Principal, TokenPrincipal."""
from __future__ import annotations

import dataclasses
from typing import Any

from authrealm.kernel.security.roles import RoleSet


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated identity.

    Created by the authentication layer; the policy engine only reads it.
    """
    name: str
    roles: RoleSet = RoleSet()
    claims: dict[str, Any] = dataclasses.field(default_factory=dict)

    def has_role(self, role_id: int) -> bool:
        return self.roles.has_role(role_id)

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class TokenPrincipal(Principal):
    """Principal issued by a token realm, bound to its bearer token."""
    token: str = dataclasses.field(default="", repr=False)


__all__ = ["Principal", "TokenPrincipal"]
