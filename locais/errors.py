from __future__ import annotations


class LocaisError(Exception):
    """Base error. ``status_code`` and ``message`` become the HTTP response."""

    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(LocaisError):
    status_code = 404
    message = "Not found"


class LocationNotFoundError(NotFoundError):
    message = "Location not found"


class UserNotFoundError(NotFoundError):
    message = "User not found."


class ConflictError(LocaisError):
    status_code = 400
    message = "Conflict"


class EmailExistsError(ConflictError):
    message = "Email already exists. Please choose another."


class AlreadyFavoritedError(ConflictError):
    message = "Location already in favorites"


class BadCredentialsError(LocaisError):
    status_code = 400
    message = "Invalid credentials."


class UnauthorizedError(LocaisError):
    status_code = 401
    message = "Unauthorized"


class ForbiddenError(LocaisError):
    status_code = 403
    message = "Forbidden"
