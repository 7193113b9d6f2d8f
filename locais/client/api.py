from __future__ import annotations

import logging

import httpx

from ..locations.models import Location, VoteCounts
from .config import DEFAULT_CLIENT_CONFIG, ClientConfig

logger = logging.getLogger(__name__)

LOGIN_REQUIRED = "You need to log in first"


def _message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("detail") or response.reason_phrase)
    return response.reason_phrase


class LocaisClient:
    """
    Thin client for the Locais REST API.

    Failures never propagate to the caller: they are logged and turned into
    empty lists, ``None`` or ``False`` so the UI can keep rendering.
    """

    def __init__(
        self,
        config: ClientConfig = DEFAULT_CLIENT_CONFIG,
        http: httpx.Client | None = None,
    ) -> None:
        self.config = config
        self.http = http or httpx.Client(base_url=config.base_url, timeout=config.timeout)
        self.token: str | None = None

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    # ── Locations ────────────────────────────────────────────────────────

    def fetch_locations(self) -> list[Location]:
        try:
            response = self.http.get("/locations")
            response.raise_for_status()
            return [Location(**item) for item in response.json()]
        except (httpx.HTTPError, ValueError):
            logger.error("Failed to fetch locations", exc_info=True)
            return []

    def _vote(self, location_id: str, kind: str) -> VoteCounts | None:
        try:
            response = self.http.post(f"/locations/{location_id}/{kind}")
        except httpx.HTTPError:
            logger.error("Error sending %s for location %s", kind, location_id, exc_info=True)
            return None
        if not response.is_success:
            logger.error("%s for location %s rejected: %s", kind, location_id, _message(response))
            return None
        try:
            return VoteCounts(**response.json())
        except (ValueError, TypeError):
            logger.error("Malformed %s response for location %s", kind, location_id, exc_info=True)
            return None

    def like(self, location_id: str) -> VoteCounts | None:
        return self._vote(location_id, "like")

    def dislike(self, location_id: str) -> VoteCounts | None:
        return self._vote(location_id, "dislike")

    # ── Account ──────────────────────────────────────────────────────────

    def register(self, name: str, email: str, password: str) -> bool:
        try:
            response = self.http.post(
                "/register",
                json={"name": name, "email": email, "password": password},
                follow_redirects=False,
            )
        except httpx.HTTPError:
            logger.error("Registration request failed", exc_info=True)
            return False
        if response.is_success or response.is_redirect:
            return True
        logger.error("Registration rejected: %s", _message(response))
        return False

    def login(self, email: str, password: str) -> bool:
        """Log in and keep the bearer token for favorite requests."""
        try:
            response = self.http.post("/login", json={"email": email, "password": password})
        except httpx.HTTPError:
            logger.error("Login request failed", exc_info=True)
            return False
        if not response.is_success:
            logger.error("Login rejected: %s", _message(response))
            return False
        try:
            self.token = str(response.json()["token"])
        except (ValueError, TypeError, KeyError):
            logger.error("Malformed login response", exc_info=True)
            return False
        return True

    def logout(self) -> None:
        self.token = None

    # ── Favorites ────────────────────────────────────────────────────────

    def save_favorite(self, location_id: str) -> str:
        """Add a favorite and return the message to show the user."""
        if not self.token:
            return LOGIN_REQUIRED
        try:
            response = self.http.post(f"/favorites/{location_id}", headers=self._auth_headers())
        except httpx.HTTPError:
            logger.error("Error saving favorite %s", location_id, exc_info=True)
            return "Could not reach the server"
        return _message(response)

    def remove_favorite(self, location_id: str) -> str:
        if not self.token:
            return LOGIN_REQUIRED
        try:
            response = self.http.delete(f"/favorites/{location_id}", headers=self._auth_headers())
        except httpx.HTTPError:
            logger.error("Error removing favorite %s", location_id, exc_info=True)
            return "Could not reach the server"
        return _message(response)

    def get_favorites(self) -> list[Location]:
        if not self.token:
            return []
        try:
            response = self.http.get("/favorites", headers=self._auth_headers())
            response.raise_for_status()
            return [Location(**item) for item in response.json()]
        except (httpx.HTTPError, ValueError):
            logger.error("Failed to fetch favorites", exc_info=True)
            return []

    def close(self) -> None:
        self.http.close()
