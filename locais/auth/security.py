"""
Password hashing and bearer-token signing.

Both primitives are used through small capability protocols so the routes
can have them swapped out in tests:

* ``Hasher`` – bcrypt with a random per-user salt.
* ``TokenSigner`` – itsdangerous timed serializer; the issuance time is
  embedded in the token and checked against ``max_age`` on verification.
"""

from __future__ import annotations

import logging
import secrets
from functools import lru_cache
from typing import Protocol

import bcrypt
from itsdangerous import BadSignature, URLSafeTimedSerializer

from .config import DEFAULT_AUTH_CONFIG, AuthConfig

logger = logging.getLogger(__name__)


class Hasher(Protocol):
    def hash(self, plain: str) -> str: ...

    def verify(self, plain: str, hashed: str) -> bool: ...


class TokenSigner(Protocol):
    def issue(self, user_id: str) -> str: ...

    def verify(self, token: str) -> str | None: ...


class BcryptHasher:
    def __init__(self, rounds: int = DEFAULT_AUTH_CONFIG.bcrypt_rounds) -> None:
        self.rounds = rounds

    def hash(self, plain: str) -> str:
        return bcrypt.hashpw(plain.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plain.encode(), hashed.encode())
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


class TimedTokenSigner:
    def __init__(self, secret_key: str, max_age: int, salt: str = "locais-auth") -> None:
        self.max_age = max_age
        self._serializer = URLSafeTimedSerializer(secret_key, salt=salt)

    def issue(self, user_id: str) -> str:
        return self._serializer.dumps({"_id": user_id})

    def verify(self, token: str) -> str | None:
        """Return the embedded user id, or ``None`` if tampered with or expired."""
        try:
            payload = self._serializer.loads(token, max_age=self.max_age)
        except BadSignature:
            return None
        if not isinstance(payload, dict) or not payload.get("_id"):
            return None
        return str(payload["_id"])


@lru_cache
def get_hasher() -> Hasher:
    return BcryptHasher(DEFAULT_AUTH_CONFIG.bcrypt_rounds)


@lru_cache
def get_token_signer() -> TokenSigner:
    return build_token_signer(DEFAULT_AUTH_CONFIG)


def build_token_signer(config: AuthConfig) -> TimedTokenSigner:
    secret_key = config.secret_key
    if not secret_key:
        secret_key = secrets.token_urlsafe(32)
        logger.warning(
            "ACCESS_TOKEN_SECRET not set; using a temporary key. "
            "Issued tokens will not survive a restart."
        )
    return TimedTokenSigner(secret_key, config.token_ttl_seconds, salt=config.token_salt)
