"""Kernel security – permission requests.

A permission request is an immutable, tagged value. The :class:`PermissionKind`
tag lets the policy manager route a request only to the policies able to
answer it.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import ClassVar


class PermissionKind(str, Enum):
    ROLE = "role"
    URI = "uri"


@dataclasses.dataclass(frozen=True)
class Permission:
    """Base class of all permission requests."""
    kind: ClassVar[PermissionKind]


@dataclasses.dataclass(frozen=True)
class RolePermission(Permission):
    """Does the principal hold role id *role*?"""
    kind: ClassVar[PermissionKind] = PermissionKind.ROLE

    role: int

    def __str__(self) -> str:
        return f"role:{self.role}"


@dataclasses.dataclass(frozen=True)
class UriPermission(Permission):
    """May the principal access *uri*?"""
    kind: ClassVar[PermissionKind] = PermissionKind.URI

    uri: str

    def __str__(self) -> str:
        return f"uri:{self.uri}"


__all__ = ["Permission", "PermissionKind", "RolePermission", "UriPermission"]
