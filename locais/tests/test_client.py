from __future__ import annotations

import httpx
from fastapi.testclient import TestClient

from locais.app import app
from locais.auth.users import clear_users
from locais.client.api import LOGIN_REQUIRED, LocaisClient
from locais.locations.store import add_location, clear_locations


def _api() -> LocaisClient:
    return LocaisClient(http=TestClient(app))


def _offline() -> LocaisClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return LocaisClient(http=httpx.Client(base_url="http://offline", transport=httpx.MockTransport(handler)))


def _add_location(likes=0, dislikes=0):
    return add_location({
        "title": "Praia do Guincho",
        "type_icon": "Beach",
        "types": ["Beach", "WC"],
        "latitude": 38.73,
        "longitude": -9.47,
        "likes": likes,
        "dislikes": dislikes,
    })


def test_fetch_locations():
    clear_locations()
    loc = _add_location()
    fetched = _api().fetch_locations()
    assert [item.id for item in fetched] == [loc.id]
    assert fetched[0].types == ["Beach", "WC"]


def test_like_and_dislike_return_server_counts():
    clear_locations()
    loc = _add_location(likes=3, dislikes=1)
    api = _api()
    assert api.like(loc.id).likes == 4
    counts = api.dislike(loc.id)
    assert (counts.likes, counts.dislikes) == (4, 2)


def test_vote_unknown_location_returns_none():
    clear_locations()
    assert _api().like("missing") is None


def test_register_login_and_favorites():
    clear_users()
    clear_locations()
    loc = _add_location()
    api = _api()
    assert api.register("Ana", "ana@example.com", "pw")
    assert not api.register("Ana", "ana@example.com", "pw")
    assert api.login("ana@example.com", "pw")
    assert api.token

    assert api.save_favorite(loc.id) == "Location saved to favorites"
    assert api.save_favorite(loc.id) == "Location already in favorites"
    assert [item.id for item in api.get_favorites()] == [loc.id]

    assert api.remove_favorite(loc.id) == "Location removed from favorites"
    assert api.get_favorites() == []


def test_login_failure_keeps_no_token():
    clear_users()
    api = _api()
    api.register("Ana", "ana@example.com", "pw")
    assert not api.login("ana@example.com", "wrong")
    assert api.token is None


def test_favorites_need_login():
    api = _api()
    assert api.save_favorite("abc") == LOGIN_REQUIRED
    assert api.remove_favorite("abc") == LOGIN_REQUIRED
    assert api.get_favorites() == []


def test_logout_drops_token():
    clear_users()
    api = _api()
    api.register("Ana", "ana@example.com", "pw")
    api.login("ana@example.com", "pw")
    api.logout()
    assert api.save_favorite("abc") == LOGIN_REQUIRED


def test_network_failures_degrade_gracefully():
    api = _offline()
    assert api.fetch_locations() == []
    assert api.like("abc") is None
    assert api.dislike("abc") is None
    assert api.register("Ana", "ana@example.com", "pw") is False
    assert api.login("ana@example.com", "pw") is False
    api.token = "stale"
    assert api.get_favorites() == []
    assert api.save_favorite("abc") == "Could not reach the server"


def test_malformed_success_bodies_degrade_gracefully():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/login":
            return httpx.Response(200, json={"unexpected": True})
        if request.url.path.endswith("/like"):
            return httpx.Response(200, text="not json")
        return httpx.Response(200, json=["likes", "dislikes"])

    api = LocaisClient(http=httpx.Client(base_url="http://odd", transport=httpx.MockTransport(handler)))
    assert api.like("abc") is None
    assert api.dislike("abc") is None
    assert api.login("ana@example.com", "pw") is False
    assert api.token is None
