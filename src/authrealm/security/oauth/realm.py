"""Security OAuth – FileRealm: password login, bearer tokens, revocation."""
from __future__ import annotations

import dataclasses
import threading
from typing import TYPE_CHECKING, Iterable, Mapping

from authrealm.kernel.security.crypto import HmacPasswordHasher, PasswordHasher
from authrealm.kernel.security.principal import TokenPrincipal
from authrealm.kernel.security.roles import DEFAULT_MAX_ROLES, RoleSet
from authrealm.observability.logging import AuditLogger, AuditOutcome, get_logger
from authrealm.security.oauth.application import Application
from authrealm.security.random import SecureRandomGenerator

if TYPE_CHECKING:
    from authrealm.config.settings import RealmSettings

__all__ = ["AuthenticationResult", "FileRealm"]

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class AuthenticationResult:
    """Outcome of :meth:`FileRealm.authenticate`.

    ``principal`` is ``None`` for unknown and revoked tokens alike.
    ``cacheable`` tells upstream layers whether they may memoise the lookup.
    """

    principal: TokenPrincipal | None
    cacheable: bool = False

    def __bool__(self) -> bool:
        return self.principal is not None


class FileRealm:
    """Username/password realm issuing opaque bearer tokens.

    State per session::

        unauthenticated --verify--> authenticated --revoke--> (token dead)

    Failed logins and unknown tokens are expected outcomes and return
    ``None``; they are logged at debug level only. The user and token tables
    are guarded by one lock so the realm can serve concurrent traffic.
    """

    def __init__(
        self,
        random: SecureRandomGenerator,
        hasher: PasswordHasher | None = None,
        *,
        token_bits: int = 256,
        cacheable: bool = True,
        max_roles: int = DEFAULT_MAX_ROLES,
        audit: AuditLogger | None = None,
    ) -> None:
        self._random = random
        self._hasher = hasher or HmacPasswordHasher(random)
        self._token_bits = token_bits
        self._cacheable = cacheable
        self._max_roles = max_roles
        self._audit = audit
        self._users: dict[str, str] = {}
        self._roles: dict[str, RoleSet] = {}
        self._tokens: dict[str, TokenPrincipal] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: "RealmSettings", audit: AuditLogger | None = None) -> "FileRealm":
        random = SecureRandomGenerator()
        return cls(
            random,
            HmacPasswordHasher(random, salt_bits=settings.salt_bits),
            token_bits=settings.token_bits,
            cacheable=settings.cacheable_tokens,
            max_roles=settings.max_roles,
            audit=audit,
        )

    # ------------------------------------------------------------------
    # Administration
    # ------------------------------------------------------------------

    def add_user(self, username: str, password: str, roles: RoleSet | Iterable[int] = ()) -> None:
        """Store the salted hash of *password* for *username*."""
        record = self._hasher.hash(password)
        role_set = roles if isinstance(roles, RoleSet) else RoleSet.from_ids(roles, capacity=self._max_roles)
        with self._lock:
            self._users[username] = record
            self._roles[username] = role_set
        _log.debug("user_added", username=username)

    def load(self, properties: Mapping[str, str], prefix: str) -> int:
        """Load ``<prefix>.<username> = "<salt> <hash>"`` credential records."""
        head = f"{prefix}."
        loaded = 0
        with self._lock:
            for key, record in properties.items():
                if not key.startswith(head) or len(key) == len(head):
                    continue
                username = key[len(head):]
                self._users[username] = record
                self._roles.setdefault(username, RoleSet(capacity=self._max_roles))
                loaded += 1
        _log.debug("users_loaded", prefix=prefix, count=loaded)
        return loaded

    # ------------------------------------------------------------------
    # Authentication state machine
    # ------------------------------------------------------------------

    def verify(self, username: str, password: str) -> TokenPrincipal | None:
        """Check the credentials and issue a new bearer token on success."""
        with self._lock:
            record = self._users.get(username)
        if record is None or not self._hasher.verify(password, record):
            _log.debug("login_rejected", username=username)
            if self._audit is not None:
                self._audit.log_security_event(
                    "login", username, "invalid credentials", outcome=AuditOutcome.FAILURE.value
                )
            return None

        token = self._random.generate(self._token_bits)
        with self._lock:
            principal = TokenPrincipal(
                name=username,
                roles=self._roles.get(username, RoleSet(capacity=self._max_roles)),
                token=token,
            )
            self._tokens[token] = principal
        _log.debug("login_accepted", username=username)
        if self._audit is not None:
            self._audit.log_security_event(
                "login", principal, "token issued", outcome=AuditOutcome.SUCCESS.value
            )
        return principal

    def authenticate(self, token: str) -> AuthenticationResult:
        """Resolve *token* back to the principal it was issued to."""
        with self._lock:
            principal = self._tokens.get(token)
        if principal is None:
            _log.debug("token_rejected")
            return AuthenticationResult(principal=None)
        return AuthenticationResult(principal=principal, cacheable=self._cacheable)

    def authorize(self, application: Application, scope: str, principal: TokenPrincipal) -> str:
        """Return the bearer token already bound to *principal*.

        No new token is minted; *application* and *scope* are accepted for
        the OAuth flow but do not narrow the token.
        """
        _log.debug(
            "token_authorized",
            client_id=application.client_id,
            scope=scope,
            username=principal.name,
        )
        return principal.token

    def revoke(self, principal: TokenPrincipal) -> None:
        """Invalidate *principal*'s token. Revoking twice is a no-op."""
        with self._lock:
            current = self._tokens.get(principal.token)
            if current is None or current.name != principal.name:
                return
            del self._tokens[principal.token]
        _log.debug("token_revoked", username=principal.name)
        if self._audit is not None:
            self._audit.log_security_event("logout", principal, "token revoked")

    @property
    def active_tokens(self) -> int:
        with self._lock:
            return len(self._tokens)
