"""Kernel security – RoleRegistry and RoleSet.

Roles are small integer identifiers handed out by a :class:`RoleRegistry`.
A principal's membership is a :class:`RoleSet`, one bit per role id, so a
role check is a single bit test.
"""

from __future__ import annotations

import dataclasses
import threading
from typing import Iterable, Iterator

from authrealm.kernel.errors import CapacityError, RoleNotFoundError, ValidationError

FIRST_ROLE_ID = 0
DEFAULT_MAX_ROLES = 64


@dataclasses.dataclass(frozen=True)
class RoleSet:
    """Immutable bitset of role ids bounded by *capacity*."""

    bits: int = 0
    capacity: int = DEFAULT_MAX_ROLES

    @classmethod
    def from_ids(cls, role_ids: Iterable[int], capacity: int = DEFAULT_MAX_ROLES) -> "RoleSet":
        result = cls(capacity=capacity)
        for role_id in role_ids:
            result = result.with_role(role_id)
        return result

    def _check(self, role_id: int) -> None:
        if not FIRST_ROLE_ID <= role_id < self.capacity:
            raise ValidationError(
                f"role id {role_id} outside of [{FIRST_ROLE_ID}, {self.capacity})",
                errors=[{"field": "role_id", "value": role_id}],
            )

    def has_role(self, role_id: int) -> bool:
        if not FIRST_ROLE_ID <= role_id < self.capacity:
            return False
        return bool(self.bits >> role_id & 1)

    def with_role(self, role_id: int) -> "RoleSet":
        self._check(role_id)
        return dataclasses.replace(self, bits=self.bits | (1 << role_id))

    def without_role(self, role_id: int) -> "RoleSet":
        self._check(role_id)
        return dataclasses.replace(self, bits=self.bits & ~(1 << role_id))

    def __contains__(self, role_id: object) -> bool:
        return isinstance(role_id, int) and self.has_role(role_id)

    def __iter__(self) -> Iterator[int]:
        return (i for i in range(FIRST_ROLE_ID, self.capacity) if self.bits >> i & 1)

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __bool__(self) -> bool:
        return self.bits != 0


class RoleRegistry:
    """Bidirectional, append-only mapping between role names and role ids.

    Ids are allocated monotonically from :data:`FIRST_ROLE_ID` and are never
    reused. The registry is meant to be filled at startup; ``create_role`` is
    nevertheless serialised by a lock so a host that creates roles at runtime
    never allocates the same id twice.

    Example::

        registry = RoleRegistry(max_roles=8)
        admin = registry.create_role("admin")
        assert registry.create_role("admin") == admin
        assert registry.get_role_name(admin) == "admin"
    """

    def __init__(self, max_roles: int = DEFAULT_MAX_ROLES) -> None:
        if max_roles <= 0:
            raise ValidationError("max_roles must be positive")
        self._max_roles = max_roles
        self._ids: dict[str, int] = {}
        self._names: list[str] = []
        self._lock = threading.Lock()

    @property
    def max_roles(self) -> int:
        return self._max_roles

    def create_role(self, name: str) -> int:
        """Return the id of *name*, allocating the next id on first use."""
        if not name:
            raise ValidationError("role name must not be empty")
        with self._lock:
            existing = self._ids.get(name)
            if existing is not None:
                return existing
            if len(self._names) >= self._max_roles:
                raise CapacityError("Role registry", self._max_roles)
            role_id = FIRST_ROLE_ID + len(self._names)
            self._names.append(name)
            self._ids[name] = role_id
            return role_id

    def find_role(self, name: str) -> int:
        try:
            return self._ids[name]
        except KeyError:
            raise RoleNotFoundError(name) from None

    def get_role_name(self, role_id: int) -> str:
        index = role_id - FIRST_ROLE_ID
        if not 0 <= index < len(self._names):
            raise RoleNotFoundError(role_id)
        return self._names[index]

    def role_set(self, *names: str) -> RoleSet:
        """Return a :class:`RoleSet` holding the ids of the registered *names*."""
        return RoleSet.from_ids((self.find_role(n) for n in names), capacity=self._max_roles)

    def names(self) -> list[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._names)


__all__ = ["DEFAULT_MAX_ROLES", "FIRST_ROLE_ID", "RoleRegistry", "RoleSet"]
