"""Shared pytest configuration."""

pytest_plugins = ["authrealm.testing.fixtures"]
