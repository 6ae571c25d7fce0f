from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from server.core.tokens import TokenService
from server.storage import get_storage


TEST_SECRET = "test-secret"


def test_register_returns_user_and_token(client):
    r = client.post("/api/register", json={"username": "alice", "password": "pw"})
    assert r.status_code == 201
    body = r.json()
    assert body["user"]["username"] == "alice"
    assert "password" not in body["user"]
    assert body["token"]


def test_register_duplicate(client):
    client.post("/api/register", json={"username": "alice", "password": "pw"})
    r = client.post("/api/register", json={"username": "alice", "password": "pw"})
    assert r.status_code == 400
    assert r.json()["message"] == "Username already exists"


def test_login(client, auth):
    r = client.post("/api/login", json={"username": "admin", "password": "pw"})
    assert r.status_code == 200
    assert r.json()["user"]["id"] == auth[1]["id"]

    r = client.post("/api/login", json={"username": "admin", "password": "wrong"})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid credentials"

    r = client.post("/api/login", json={"username": "ghost", "password": "pw"})
    assert r.status_code == 401


def test_missing_fields(client):
    for path in ("/api/login", "/api/register"):
        r = client.post(path, json={"username": "alice"})
        assert r.status_code == 400
        assert r.json()["message"] == "Username and password are required"


def test_non_json_body_is_400(client):
    r = client.post("/api/login", content="nope", headers={"Content-Type": "application/json"})
    assert r.status_code == 400


def test_current_user(client, auth_headers):
    r = client.get("/api/user", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["username"] == "admin"


def test_missing_token_is_401(client):
    r = client.get("/api/user")
    assert r.status_code == 401
    assert r.json()["message"] == "Access token required"


def test_garbage_token_is_403(client):
    r = client.get("/api/user", headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 403
    assert r.json()["message"] == "Invalid or expired token"


def test_expired_token_is_403(client, auth):
    user = SimpleNamespace(id=auth[1]["id"], username="admin")
    token = TokenService(TEST_SECRET).issue(user, now=datetime.now(timezone.utc) - timedelta(days=8))
    r = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403


def test_token_for_missing_user_is_403(client):
    token = TokenService(TEST_SECRET).issue(SimpleNamespace(id=999, username="ghost"))
    r = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403
    assert r.json()["message"] == "User not found"


def test_user_lookup_failure_is_500(app, client, auth_headers):
    class BrokenStorage:
        def get_user(self, user_id):
            raise RuntimeError("connection reset")

    app.dependency_overrides[get_storage] = lambda: BrokenStorage()
    r = client.get("/api/user", headers=auth_headers)
    assert r.status_code == 500
    assert r.json()["message"] == "Authentication error"


def test_protected_routes_require_token(client):
    protected = [
        ("get", "/api/submissions"),
        ("get", "/api/submissions/company-codes"),
        ("get", "/api/submissions/company/ACME"),
        ("get", "/api/submissions/export"),
        ("post", "/api/leadership-values"),
        ("get", "/api/leadership-values/1"),
        ("put", "/api/leadership-values/1"),
        ("delete", "/api/leadership-values/1"),
    ]
    for method, path in protected:
        r = client.request(method.upper(), path)
        assert r.status_code == 401, path
        r = client.request(method.upper(), path, headers={"Authorization": "Bearer garbage"})
        assert r.status_code == 403, path


def test_logout(client):
    r = client.post("/api/logout")
    assert r.status_code == 200
    assert r.json() == {"message": "Logged out successfully"}
