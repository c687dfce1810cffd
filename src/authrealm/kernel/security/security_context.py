"""Kernel security – SecurityContext using contextvars.

The active context is bound to the current logical operation through a
:class:`contextvars.ContextVar`, so each thread and each asyncio task sees
its own. Scopes are opened with :func:`security_context` and always torn
down on exit, including when the body raises.
"""

from __future__ import annotations

import contextlib
import contextvars
import dataclasses
import functools
import inspect
from typing import Any, Callable, Iterator, TypeVar

from authrealm.kernel.errors import ForbiddenError, SecurityContextError, UnauthorizedError
from authrealm.kernel.security.manager import PolicyManager
from authrealm.kernel.security.permission import Permission
from authrealm.kernel.security.principal import Principal
from authrealm.observability.logging import AuditLogger, AuditOutcome

F = TypeVar("F", bound=Callable[..., Any])

_VAR: contextvars.ContextVar["SecurityContext | None"] = contextvars.ContextVar(
    "_security_context", default=None
)


@dataclasses.dataclass(frozen=True)
class SecurityContext:
    """Active principal and policy manager for one operation."""

    principal: Principal | None
    policy_manager: PolicyManager

    def has_permission(self, permission: Permission) -> bool:
        return self.policy_manager.has_permission(self, permission)

    @staticmethod
    def get_current() -> "SecurityContext | None":
        """Return the active context, or ``None`` outside of any scope."""
        return _VAR.get()

    @staticmethod
    def current() -> "SecurityContext":
        """Return the active context or raise :class:`SecurityContextError`."""
        ctx = _VAR.get()
        if ctx is None:
            raise SecurityContextError()
        return ctx


@contextlib.contextmanager
def security_context(
    policy_manager: PolicyManager,
    principal: Principal | None,
) -> Iterator[SecurityContext]:
    """Make ``(principal, policy_manager)`` the active context for the block.

    Nested scopes restore the enclosing context on exit::

        with security_context(manager, principal) as ctx:
            handle_request()          # may call has_permission(...)
    """
    ctx = SecurityContext(principal=principal, policy_manager=policy_manager)
    token = _VAR.set(ctx)
    try:
        yield ctx
    finally:
        _VAR.reset(token)


def has_permission(permission: Permission) -> bool:
    """Check *permission* against the active context."""
    return SecurityContext.current().has_permission(permission)


def require_permission(
    permission: Permission,
    *,
    audit: AuditLogger | None = None,
) -> Callable[[F], F]:
    """Decorator that enforces *permission* on the active context.

    Works on both async and sync callables. Raises
    :class:`SecurityContextError` outside of a scope,
    :class:`UnauthorizedError` when an anonymous context is denied and
    :class:`ForbiddenError` when an authenticated principal is denied.
    Denials are recorded on *audit* when one is given.

    Example::

        @require_permission(UriPermission("/manager/reports"), audit=audit)
        async def list_reports() -> list[Report]:
            ...
    """

    def _check(action: str) -> None:
        ctx = SecurityContext.current()
        if ctx.has_permission(permission):
            return
        principal = ctx.principal
        if audit is not None:
            audit.log_access(
                principal if principal is not None else "anonymous",
                str(permission),
                action,
                outcome=AuditOutcome.DENIED,
            )
        if principal is None:
            raise UnauthorizedError(f"authentication required for {str(permission)!r}")
        raise ForbiddenError(
            f"principal {principal.name!r} lacks permission {str(permission)!r}",
            permission=str(permission),
        )

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                _check(fn.__qualname__)
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            _check(fn.__qualname__)
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["SecurityContext", "has_permission", "require_permission", "security_context"]
