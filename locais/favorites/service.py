from __future__ import annotations

from ..auth import users
from ..errors import LocationNotFoundError, UserNotFoundError
from ..locations import store
from ..locations.models import Location


def list_favorites(user_id: str) -> list[Location]:
    """Return the user's favorites in the order they were added.

    References to locations that no longer exist are skipped.
    """
    favorites: list[Location] = []
    for location_id in users.get_favorite_ids(user_id):
        location = store.get_location(location_id)
        if location is not None:
            favorites.append(location)
    return favorites


def add_favorite(user_id: str, location_id: str) -> None:
    if users.get_user(user_id) is None:
        raise UserNotFoundError()
    if not store.location_exists(location_id):
        raise LocationNotFoundError()
    users.push_favorite(user_id, location_id)


def remove_favorite(user_id: str, location_id: str) -> None:
    users.pull_favorite(user_id, location_id)
