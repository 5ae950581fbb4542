# HTTP 바인딩 테스트 (MongoDB 없이 서비스 의존성 교체)
import pytest
from fastapi.testclient import TestClient

from accounts.main import app
from accounts.services.user_service import UserService, get_user_service


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_user_service] = lambda: UserService(repo)
    # with 블록 없이 사용하면 startup(MongoDB 연결) 이벤트가 실행되지 않음
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_test_endpoint_returns_html(client):
    resp = client.get("/test")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.text == "Test, test, 1, 2, 3. It works!"


def test_create_user(client):
    resp = client.post("/api/v1/users", json={"name": "Ann", "email": "ANN@Example.com", "password": "secret1"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["email"] == "ann@example.com"
    assert set(body) == {"id", "name", "email"}


def test_create_user_validation_errors(client):
    resp = client.post("/api/v1/users", json={"name": "", "email": "x@e.com", "password": "123"})
    assert resp.status_code == 422
    assert resp.json() == {
        "detail": "Validation failed",
        "errors": {
            "name": ["can't be blank"],
            "password": ["is too short (minimum is 6 characters)"],
        },
    }


def test_storage_violation_is_409(client, repo):
    client.post("/api/v1/users", json={"name": "A", "email": "x@e.com", "password": "secret1"})
    repo.stale_reads = True
    resp = client.post("/api/v1/users", json={"name": "B", "email": "X@E.COM", "password": "secret2"})
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Could not save, try again"}


def test_update_get_delete(client):
    user_id = client.post("/api/v1/users", json={"name": "A", "email": "x@e.com", "password": "secret1"}).json()["id"]

    resp = client.patch(f"/api/v1/users/{user_id}", json={"email": "New@E.com"})
    assert resp.status_code == 200
    assert resp.json()["email"] == "new@e.com"

    assert client.get(f"/api/v1/users/{user_id}").json()["name"] == "A"
    assert client.delete(f"/api/v1/users/{user_id}").status_code == 204
    assert client.get(f"/api/v1/users/{user_id}").status_code == 404
    assert client.patch(f"/api/v1/users/{user_id}", json={"name": "B"}).status_code == 404


def test_login(client):
    client.post("/api/v1/users", json={"name": "A", "email": "x@e.com", "password": "secret1"})
    ok = client.post("/api/v1/auth/login", json={"email": "X@E.COM", "password": "secret1"})
    assert ok.status_code == 200
    assert ok.json()["email"] == "x@e.com"
    bad = client.post("/api/v1/auth/login", json={"email": "x@e.com", "password": "nope123"})
    assert bad.status_code == 401


def test_create_user_password_confirmation_mismatch(client):
    resp = client.post(
        "/api/v1/users",
        json={"name": "A", "email": "x@e.com", "password": "secret1", "password_confirmation": "secret2"},
    )
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"password_confirmation": ["doesn't match Password"]}
