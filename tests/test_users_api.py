from dataclasses import asdict

import pytest
from starlette.testclient import TestClient

from practicekit.users_api import User, UserStore, create_app


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


def _payload(name, email, user_id=0):
    return {"id": user_id, "name": name, "email": email}


def test_store_create_assigns_sequential_ids(store):
    first = store.create("Ann", "ann@example.com")
    second = store.create("Bob", "bob@example.com")
    assert [first.id, second.id] == [1, 2]
    assert store.all() == [first, second]


def test_store_id_follows_current_size(store):
    first = store.create("Ann", "ann@example.com")
    second = store.create("Bob", "bob@example.com")
    assert store.delete(first.id) == first
    third = store.create("Cy", "cy@example.com")
    assert third.id == second.id
    assert len(store.all()) == 2


def test_store_missing_user(store):
    assert store.get(5) is None
    assert store.update(5, "X", "x@example.com") is None
    assert store.delete(5) is None
    assert store.all() == []


def test_store_update_replaces(store):
    user = store.create("Ann", "ann@example.com")
    updated = store.update(user.id, "Anne", "anne@example.com")
    assert updated == User(user.id, "Anne", "anne@example.com")
    assert store.get(user.id) == updated


def test_list_initially_empty(client):
    response = client.get("/users")
    assert response.status_code == 200
    assert response.json() == []


def test_create_then_get(client, store):
    response = client.post("/users", json=_payload("Ann", "ann@example.com", 99))
    assert response.status_code == 200
    body = response.json()
    assert (body["name"], body["email"]) == ("Ann", "ann@example.com")
    assert body == asdict(store.get(body["id"]))
    assert client.get(f"/users/{body['id']}").json() == body
    assert client.get("/users").json() == [body]


def test_get_missing_is_404(client):
    assert client.get("/users/3").status_code == 404


def test_get_non_integer_is_404(client):
    assert client.get("/users/abc").status_code == 404


def test_update(client):
    created = client.post("/users", json=_payload("Ann", "ann@example.com")).json()
    response = client.put(
        f"/users/{created['id']}", json=_payload("Anne", "anne@example.com", 42)
    )
    assert response.status_code == 200
    assert response.json() == {
        "id": created["id"],
        "name": "Anne",
        "email": "anne@example.com",
    }
    assert client.get(f"/users/{created['id']}").json()["name"] == "Anne"


def test_update_missing_is_404(client):
    response = client.put("/users/8", json=_payload("Ann", "ann@example.com"))
    assert response.status_code == 404


def test_delete(client):
    created = client.post("/users", json=_payload("Ann", "ann@example.com")).json()
    response = client.delete(f"/users/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created
    assert client.get(f"/users/{created['id']}").status_code == 404
    assert client.get("/users").json() == []


def test_delete_missing_is_404(client):
    assert client.delete("/users/4").status_code == 404


def test_create_requires_json_content_type(client, store):
    response = client.post(
        "/users",
        content=b'{"id": 0, "name": "Ann", "email": "ann@example.com"}',
        headers={"content-type": "text/plain"},
    )
    assert response.status_code == 404
    assert store.all() == []


def test_create_malformed_json_is_400(client, store):
    response = client.post(
        "/users", content=b"{", headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert store.all() == []


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Ann", "email": "ann@example.com"},
        {"id": -1, "name": "Ann", "email": "ann@example.com"},
        {"id": True, "name": "Ann", "email": "ann@example.com"},
        {"id": 0, "name": 5, "email": "ann@example.com"},
        {"id": 0, "name": "Ann"},
        [1, 2],
    ],
)
def test_create_wrong_shape_is_422(client, store, body):
    response = client.post("/users", json=body)
    assert response.status_code == 422
    assert store.all() == []