from __future__ import annotations

import logging
import threading
import uuid
from typing import Any

from ..errors import (
    AlreadyFavoritedError,
    BadCredentialsError,
    EmailExistsError,
    UserNotFoundError,
)
from .security import Hasher, TokenSigner

logger = logging.getLogger(__name__)

_users: dict[str, dict[str, Any]] = {}
_lock = threading.Lock()


def _find_by_email(email: str) -> dict[str, Any] | None:
    # Exact, case-sensitive match on the stored value
    for record in _users.values():
        if record["email"] == email:
            return record
    return None


def register(name: str, email: str, password: str, hasher: Hasher) -> str:
    """Create a user and return its id. Raises ``EmailExistsError`` on a duplicate."""
    password_hash = hasher.hash(password)
    with _lock:
        if _find_by_email(email) is not None:
            raise EmailExistsError()
        user_id = uuid.uuid4().hex
        _users[user_id] = {
            "id": user_id,
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "favorites": [],
        }
    logger.info("Registered user %s", user_id)
    return user_id


def login(email: str, password: str, hasher: Hasher, signer: TokenSigner) -> str:
    """Verify credentials and return a signed bearer token."""
    with _lock:
        record = _find_by_email(email)
        password_hash = record["password_hash"] if record else None
        user_id = record["id"] if record else None
    if password_hash is None:
        raise UserNotFoundError()
    if not hasher.verify(password, password_hash):
        logger.warning("Failed login for user %s", user_id)
        raise BadCredentialsError()
    return signer.issue(user_id)


def get_user(user_id: str) -> dict[str, Any] | None:
    """Return a copy of the user record, or ``None``."""
    with _lock:
        record = _users.get(user_id)
        if record is None:
            return None
        return {**record, "favorites": list(record["favorites"])}


def get_favorite_ids(user_id: str) -> list[str]:
    with _lock:
        record = _users.get(user_id)
        if record is None:
            raise UserNotFoundError()
        return list(record["favorites"])


def push_favorite(user_id: str, location_id: str) -> None:
    with _lock:
        record = _users.get(user_id)
        if record is None:
            raise UserNotFoundError()
        if location_id in record["favorites"]:
            raise AlreadyFavoritedError()
        record["favorites"].append(location_id)


def pull_favorite(user_id: str, location_id: str) -> None:
    """Remove a favorite. Removing one that is not there is a no-op."""
    with _lock:
        record = _users.get(user_id)
        if record is None:
            raise UserNotFoundError()
        record["favorites"] = [f for f in record["favorites"] if f != location_id]


def clear_users() -> None:
    with _lock:
        _users.clear()
