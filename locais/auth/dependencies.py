from __future__ import annotations

from fastapi import Depends, Request

from ..errors import ForbiddenError, UnauthorizedError
from .security import TokenSigner, get_token_signer


def get_bearer_token(request: Request) -> str | None:
    """Return the token from ``Authorization: Bearer <token>``, or ``None``."""
    header = request.headers.get("authorization")
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) < 2 or parts[0].lower() != "bearer" or not parts[1]:
        return None
    return parts[1]


def require_user(
    request: Request,
    signer: TokenSigner = Depends(get_token_signer),
) -> str:
    """Raise 401 if no token is sent, 403 if it is invalid or expired."""
    token = get_bearer_token(request)
    if not token:
        raise UnauthorizedError()
    user_id = signer.verify(token)
    if user_id is None:
        raise ForbiddenError()
    return user_id
