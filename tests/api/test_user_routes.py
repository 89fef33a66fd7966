from __future__ import annotations

from fastapi.testclient import TestClient  # noqa: TC002

ALICE = {
    "loginName": "alice",
    "emailAddress": "alice@uni-heidelberg.de",
    "firstName": "Alice",
    "lastName": "Example",
}


def test_user_lifecycle(api_client: TestClient) -> None:
    created = api_client.post("/api/users", json=ALICE)

    assert created.status_code == 201
    user = created.json()
    assert created.headers["Location"] == f"http://testserver/api/users/{user['id']}"

    assert api_client.get(f"/api/users/{user['id']}").json()["loginName"] == "alice"
    filtered = api_client.get("/api/users/filter", params={"login_name": "alice"})
    assert filtered.json()["id"] == user["id"]

    renamed = api_client.put(
        f"/api/users/{user['id']}",
        json={**ALICE, "id": user["id"], "loginName": "alice2"},
    )
    assert renamed.status_code == 200
    assert renamed.json()["loginName"] == "alice2"
    assert [item["loginName"] for item in api_client.get("/api/users").json()] == ["alice2"]


def test_duplicate_login_name_returns_conflict(api_client: TestClient) -> None:
    assert api_client.post("/api/users", json=ALICE).status_code == 201

    response = api_client.post("/api/users", json=ALICE)

    assert response.status_code == 409
    assert response.json()["errorCode"] == "DuplicationError"


def test_update_unknown_user_returns_not_found(api_client: TestClient) -> None:
    response = api_client.put("/api/users/99", json={**ALICE, "id": 99, "loginName": "bob"})

    assert response.status_code == 404
    assert response.json()["statusMessage"] == "Not Found"


def test_delete_user_is_a_noop(api_client: TestClient) -> None:
    user = api_client.post("/api/users", json=ALICE).json()

    response = api_client.delete(f"/api/users/{user['id']}")

    assert response.status_code == 204
    assert api_client.get(f"/api/users/{user['id']}").status_code == 200


def test_login_name_must_be_a_word(api_client: TestClient) -> None:
    response = api_client.post("/api/users", json={**ALICE, "loginName": "not valid"})

    assert response.status_code == 400
    assert response.json()["errorCode"] == "RequestValidationError"
    assert "loginName" in response.json()["message"]


def test_health(api_client: TestClient) -> None:
    assert api_client.get("/health").json() == {"ok": True}
