"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["authrealm.testing.fixtures"]
"""

from authrealm.testing.fakes import FakePolicy

__all__ = ["FakePolicy"]
