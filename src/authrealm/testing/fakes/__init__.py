"""Testing fakes – in-memory doubles."""
from authrealm.testing.fakes.policy import FakePolicy

__all__ = ["FakePolicy"]
