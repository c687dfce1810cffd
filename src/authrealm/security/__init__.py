"""Security — secure random generator and the OAuth token realm."""
from authrealm.security.oauth import (
    Application,
    ApplicationRegistry,
    AuthenticationResult,
    FileRealm,
)
from authrealm.security.random import SecureRandomGenerator

__all__ = [
    "Application",
    "ApplicationRegistry",
    "AuthenticationResult",
    "FileRealm",
    "SecureRandomGenerator",
]
