"""Security – OAuth application registry and token realm."""
from authrealm.security.oauth.application import Application, ApplicationRegistry
from authrealm.security.oauth.realm import AuthenticationResult, FileRealm

__all__ = ["Application", "ApplicationRegistry", "AuthenticationResult", "FileRealm"]
