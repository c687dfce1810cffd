"""Root error class for the authrealm error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Only faults derive from this class. Expected negative outcomes of the
    engine (a failed login, an unknown token, a denied permission) are
    reported as ``None`` or ``False`` and never raised.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging).

        A wrapped engine error is nested as its own ``to_dict()``; any other
        cause is reduced to its type name and message.
        """
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = _describe(self.cause)
        return payload


def _describe(cause: BaseException) -> dict[str, Any]:
    if isinstance(cause, BaseError):
        return cause.to_dict()
    return {"type": type(cause).__name__, "message": str(cause)}


__all__ = ["BaseError"]
