from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.adapters.auth.crypto import JWTTokenIssuer, PasslibPasswordHasher
from src.adapters.sqlite.repos import SQLiteUserRepo
from src.api.deps import Settings, get_rules, get_settings
from src.api.main import app
from src.domain.entities import User
from src.rules.loader import load_rules
from tests.conftest import PROJECT_ROOT

SECRET = "test-secret"


# --- Fixtures ---
@pytest.fixture
def user(db_path: str) -> User:
    return SQLiteUserRepo(db_path).save(
        User(
            name="User",
            email="user@nextmail.com",
            password_hash=PasslibPasswordHasher().hash_password("123456"),
        )
    )


@pytest.fixture
def client(db_path: str) -> Iterator[TestClient]:
    def _settings() -> Settings:
        s = Settings()
        s.db_path = db_path
        s.rules_path = PROJECT_ROOT / "rules.yaml"
        s.secret_key = SECRET
        return s

    app.dependency_overrides[get_settings] = _settings
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_login_sets_session_cookie_and_redirects(client: TestClient, user: User) -> None:
    resp = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "123456"},
        follow_redirects=False,
    )

    assert resp.status_code == 303
    assert resp.headers["location"] == "/dashboard"

    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith("access_token=")
    assert "HttpOnly" in set_cookie

    value = set_cookie.split(";")[0].split("=", 1)[1].strip('"')
    assert value.startswith("Bearer ")
    token = value.removeprefix("Bearer ")
    payload = JWTTokenIssuer(SECRET, ttl_minutes=1).decode_token(token)
    assert payload is not None
    assert payload["sub"] == user.id


def test_login_uses_configured_strategy(client: TestClient, user: User) -> None:
    rules = load_rules(PROJECT_ROOT / "rules.yaml")
    rules.auth.strategy = "password"
    app.dependency_overrides[get_rules] = lambda: rules

    resp = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "123456"},
        follow_redirects=False,
    )

    assert resp.status_code == 303
    assert resp.headers["location"] == "/dashboard"


def test_wrong_password_returns_message(client: TestClient, user: User) -> None:
    resp = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "wrong-password"},
        follow_redirects=False,
    )

    assert resp.status_code == 200
    assert resp.json() == {"message": "Invalid credentials"}
    assert "set-cookie" not in resp.headers


def test_unknown_user_returns_message(client: TestClient) -> None:
    resp = client.post("/login", data={"email": "nobody@nextmail.com", "password": "123456"})
    assert resp.json() == {"message": "Invalid credentials"}


def test_empty_form_returns_message(client: TestClient) -> None:
    resp = client.post("/login", data={})
    assert resp.json() == {"message": "Invalid credentials"}


def test_logout_clears_cookie(client: TestClient) -> None:
    resp = client.post("/logout")

    assert resp.status_code == 200
    assert resp.json() == {"status": "success"}
    assert resp.headers["set-cookie"].startswith("access_token=")
