"""Config settings – Settings base class and RealmSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from authrealm.config.validation.errors import InvalidSettingValueError

# Below this the token space is small enough to guess.
MIN_TOKEN_BITS = 64


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class RealmSettings(Settings):
    """Capacities of the policy engine and entropy widths of the realm.

    Read from ``AUTHREALM_TOKEN_BITS``, ``AUTHREALM_MAX_ROLES`` … by
    :class:`~authrealm.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "AUTHREALM"

    token_bits: int = 256
    salt_bits: int = 128
    max_roles: int = 64
    max_policies: int = 16
    cacheable_tokens: bool = True

    def _validate(self) -> None:
        if self.token_bits < MIN_TOKEN_BITS:
            raise InvalidSettingValueError(
                "token_bits", self.token_bits, f"must be at least {MIN_TOKEN_BITS}"
            )
        if self.salt_bits <= 0:
            raise InvalidSettingValueError("salt_bits", self.salt_bits, "must be positive")
        if self.max_roles <= 0:
            raise InvalidSettingValueError("max_roles", self.max_roles, "must be positive")
        if self.max_policies <= 0:
            raise InvalidSettingValueError("max_policies", self.max_policies, "must be positive")


__all__ = ["MIN_TOKEN_BITS", "RealmSettings", "Settings"]
