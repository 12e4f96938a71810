"""Contract tests for the admin authentication gate and sign-in."""

from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import delete

from course_admin.core.config import get_settings
from course_admin.core.security import issue_credential
from course_admin.db.models.user import User

ADMIN_PATHS = [
    "/admin/articles",
    "/admin/categories",
    "/admin/courses",
    "/admin/chapters?courseId=1",
    "/admin/users",
    "/admin/settings",
    "/admin/charts/sex",
    "/admin/charts/user",
    "/admin/articles/1",
]


def _assert_unauthorized(response) -> None:
    assert response.status_code == 401
    payload = response.json()
    assert payload["success"] is False
    assert isinstance(payload["message"], str) and payload["message"]


@pytest.mark.parametrize("path", ADMIN_PATHS)
def test_missing_credential_is_unauthorized_on_every_admin_route(client: TestClient, path: str) -> None:
    _assert_unauthorized(client.get(path))


def test_writes_without_credential_are_unauthorized(client: TestClient) -> None:
    _assert_unauthorized(client.post("/admin/articles", json={"title": "t", "content": "c"}))
    _assert_unauthorized(client.delete("/admin/categories/1"))


def test_non_admin_principal_is_unauthorized_not_forbidden(client: TestClient, user_headers: dict[str, str]) -> None:
    _assert_unauthorized(client.get("/admin/articles", headers=user_headers))


def test_admin_principal_is_admitted(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.get("/admin/articles", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["success"] is True


def test_legacy_token_header_is_accepted(client: TestClient, admin_id: int) -> None:
    token = issue_credential(get_settings(), user_id=admin_id)

    response = client.get("/admin/articles", headers={"token": token})

    assert response.status_code == 200


@pytest.mark.parametrize(
    "authorization",
    ["Bearer", "Bearer ", "Basic abc", "Bearer not-a-jwt"],
)
def test_malformed_authorization_is_unauthorized(client: TestClient, admin_id: int, authorization: str) -> None:
    _assert_unauthorized(client.get("/admin/articles", headers={"Authorization": authorization}))


def test_expired_credential_is_unauthorized(client: TestClient, admin_id: int) -> None:
    settings = get_settings()
    issued = datetime.now(timezone.utc) - timedelta(days=settings.token_expire_days + 1)
    token = issue_credential(settings, user_id=admin_id, now=issued)

    _assert_unauthorized(client.get("/admin/articles", headers={"Authorization": f"Bearer {token}"}))


def test_deleted_principal_is_unauthorized_not_server_error(
    client: TestClient,
    session_factory,
    admin_headers: dict[str, str],
    admin_id: int,
) -> None:
    with session_factory() as session:
        session.execute(delete(User).where(User.id == admin_id))
        session.commit()

    _assert_unauthorized(client.get("/admin/articles", headers=admin_headers))


def test_role_change_takes_effect_on_next_request(
    client: TestClient,
    session_factory,
    admin_headers: dict[str, str],
    admin_id: int,
) -> None:
    assert client.get("/admin/users", headers=admin_headers).status_code == 200

    with session_factory() as session:
        session.get(User, admin_id).role = 0
        session.commit()

    _assert_unauthorized(client.get("/admin/users", headers=admin_headers))


def test_health_is_public(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_sign_in_issues_a_usable_token(client: TestClient, admin_id: int) -> None:
    response = client.post("/admin/auth/sign_in", json={"login": "admin@example.com", "password": "admin-secret"})

    assert response.status_code == 200
    token = response.json()["data"]["token"]
    assert client.get("/admin/articles", headers={"Authorization": f"Bearer {token}"}).status_code == 200

    response = client.post("/admin/auth/sign_in", json={"login": "admin", "password": "admin-secret"})
    assert response.status_code == 200


def test_sign_in_failures(client: TestClient, admin_id: int, plain_user_id: int) -> None:
    response = client.post("/admin/auth/sign_in", json={"login": "admin"})
    assert response.status_code == 400
    assert "password is required" in response.json()["errors"]

    response = client.post("/admin/auth/sign_in", json={"login": "nobody", "password": "x"})
    assert response.status_code == 404

    _assert_unauthorized(client.post("/admin/auth/sign_in", json={"login": "admin", "password": "wrong"}))
    _assert_unauthorized(client.post("/admin/auth/sign_in", json={"login": "learner", "password": "user-secret"}))


def test_current_user_is_served_to_any_role(client: TestClient, user_headers: dict[str, str], plain_user_id: int) -> None:
    response = client.get("/users/me", headers=user_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == plain_user_id
    assert data["username"] == "learner"
    assert data["role"] == 0
    assert "password" not in data


def test_current_user_requires_a_valid_credential(client: TestClient, plain_user_id: int) -> None:
    _assert_unauthorized(client.get("/users/me"))
    _assert_unauthorized(client.get("/users/me", headers={"Authorization": "Bearer not-a-jwt"}))
