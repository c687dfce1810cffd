"""Security – shared secure random generator."""
from authrealm.security.random.generator import SecureRandomGenerator, SupportsWrite

__all__ = ["SecureRandomGenerator", "SupportsWrite"]
