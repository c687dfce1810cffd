"""Testing fixtures – pytest plugin.

Enable in your ``conftest.py``::

    pytest_plugins = ["authrealm.testing.fixtures"]
"""
from authrealm.testing.fixtures.principal import active_context, fake_principal
from authrealm.testing.fixtures.security import (
    policy_manager,
    realm,
    realm_settings,
    role_registry,
    secure_random,
)

__all__ = [
    "active_context",
    "fake_principal",
    "policy_manager",
    "realm",
    "realm_settings",
    "role_registry",
    "secure_random",
]
