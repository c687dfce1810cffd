"""
authrealm – role-based access control engine and bearer-token realm.

Import path convention::

    from authrealm.kernel.errors import CapacityError
    from authrealm.kernel.security import PolicyManager, RolePolicy, security_context
    from authrealm.security.oauth import FileRealm
    from authrealm.security.random import SecureRandomGenerator
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
