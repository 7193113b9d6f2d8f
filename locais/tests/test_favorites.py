from __future__ import annotations

from fastapi.testclient import TestClient

from locais.app import app
from locais.auth.users import clear_users
from locais.locations.store import add_location, clear_locations

client = TestClient(app)


def _add_location(title="Cabo da Roca"):
    return add_location({
        "title": title,
        "type_icon": "Nature",
        "types": ["Nature"],
        "latitude": 38.78,
        "longitude": -9.49,
    })


def _auth_headers(c, email="rui@example.com"):
    c.post(
        "/register",
        json={"name": "Rui", "email": email, "password": "pw123"},
        follow_redirects=False,
    )
    token = c.post("/login", json={"email": email, "password": "pw123"}).json()["token"]
    return {"Authorization": f"Bearer {token}"}


def _reset():
    clear_users()
    clear_locations()


def test_add_and_list_favorite():
    _reset()
    headers = _auth_headers(client)
    loc = _add_location()
    resp = client.post(f"/favorites/{loc.id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Location saved to favorites"

    body = client.get("/favorites", headers=headers).json()
    assert [item["id"] for item in body] == [loc.id]
    assert body[0]["title"] == "Cabo da Roca"


def test_add_twice_rejected_and_listed_once():
    _reset()
    headers = _auth_headers(client)
    loc = _add_location()
    client.post(f"/favorites/{loc.id}", headers=headers)
    resp = client.post(f"/favorites/{loc.id}", headers=headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Location already in favorites"

    body = client.get("/favorites", headers=headers).json()
    assert [item["id"] for item in body] == [loc.id]


def test_favorites_keep_insertion_order():
    _reset()
    headers = _auth_headers(client)
    first, second = _add_location("First"), _add_location("Second")
    client.post(f"/favorites/{second.id}", headers=headers)
    client.post(f"/favorites/{first.id}", headers=headers)
    body = client.get("/favorites", headers=headers).json()
    assert [item["title"] for item in body] == ["Second", "First"]


def test_add_unknown_location_is_404():
    _reset()
    headers = _auth_headers(client)
    resp = client.post("/favorites/does-not-exist", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Location not found"


def test_remove_favorite():
    _reset()
    headers = _auth_headers(client)
    loc = _add_location()
    client.post(f"/favorites/{loc.id}", headers=headers)
    resp = client.delete(f"/favorites/{loc.id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Location removed from favorites"
    assert client.get("/favorites", headers=headers).json() == []


def test_remove_absent_favorite_is_noop():
    _reset()
    headers = _auth_headers(client)
    loc = _add_location()
    resp = client.delete(f"/favorites/{loc.id}", headers=headers)
    assert resp.status_code == 200
    assert client.get("/favorites", headers=headers).json() == []


def test_favorites_are_per_user():
    _reset()
    ana = _auth_headers(client, "ana@example.com")
    rui = _auth_headers(client, "rui@example.com")
    loc = _add_location()
    client.post(f"/favorites/{loc.id}", headers=ana)
    assert len(client.get("/favorites", headers=ana).json()) == 1
    assert client.get("/favorites", headers=rui).json() == []


def test_stale_favorite_is_omitted():
    _reset()
    headers = _auth_headers(client)
    loc = _add_location()
    client.post(f"/favorites/{loc.id}", headers=headers)
    clear_locations()
    resp = client.get("/favorites", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == []


def test_deleted_user_is_404():
    _reset()
    headers = _auth_headers(client)
    loc = _add_location()
    clear_users()
    assert client.get("/favorites", headers=headers).status_code == 404
    assert client.post(f"/favorites/{loc.id}", headers=headers).status_code == 404
    resp = client.delete(f"/favorites/{loc.id}", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found."


def test_favorite_routes_require_token():
    assert client.post("/favorites/abc").status_code == 401
    assert client.delete("/favorites/abc").status_code == 401
    bad = {"Authorization": "Bearer forged"}
    assert client.post("/favorites/abc", headers=bad).status_code == 403
    assert client.delete("/favorites/abc", headers=bad).status_code == 403
