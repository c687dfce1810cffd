"""Security OAuth – Application, ApplicationRegistry."""
from __future__ import annotations

import dataclasses
import threading
from types import MappingProxyType
from typing import Any, Mapping

from authrealm.kernel.errors import UnknownApplicationError, ValidationError
from authrealm.observability.logging import get_logger

__all__ = ["Application", "ApplicationRegistry"]

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Application:
    """Registered OAuth client. Immutable once registered."""

    client_id: str
    client_secret: str = dataclasses.field(repr=False)
    redirect_uri: str = ""
    metadata: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ValidationError("client_id must not be empty")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))


class ApplicationRegistry:
    """In-memory registry of OAuth client applications.

    ``add_application`` and ``load`` are administrative and expected at
    setup time; lookups may run concurrently with them.
    """

    def __init__(self) -> None:
        self._applications: dict[str, Application] = {}
        self._lock = threading.Lock()

    def add_application(self, application: Application) -> None:
        with self._lock:
            self._applications[application.client_id] = application
        _log.debug("application_added", client_id=application.client_id)

    def find_application(self, client_id: str) -> Application:
        """Return the application for *client_id*.

        Raises :class:`UnknownApplicationError` when it is not registered.
        """
        with self._lock:
            application = self._applications.get(client_id)
        if application is None:
            _log.warning("unknown_application", client_id=client_id)
            raise UnknownApplicationError(client_id)
        return application

    def load(self, properties: Mapping[str, str], prefix: str) -> int:
        """Register the applications described by ``<prefix>.<client_id>.<key>`` entries.

        ``secret`` and ``redirect_uri`` fill the matching fields, every other
        key lands in ``metadata``. Returns the number of applications loaded.
        """
        head = f"{prefix}."
        grouped: dict[str, dict[str, str]] = {}
        for key, value in properties.items():
            if not key.startswith(head):
                continue
            client_id, sep, field = key[len(head):].rpartition(".")
            if not sep or not client_id or not field:
                continue
            grouped.setdefault(client_id, {})[field] = value

        for client_id, fields in grouped.items():
            self.add_application(
                Application(
                    client_id=client_id,
                    client_secret=fields.pop("secret", ""),
                    redirect_uri=fields.pop("redirect_uri", ""),
                    metadata=fields,
                )
            )
        return len(grouped)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._applications

    def __len__(self) -> int:
        return len(self._applications)
