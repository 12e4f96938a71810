"""Contract tests for the settings singleton and dashboard charts."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker


def _seed_setting(session_factory: sessionmaker[Session]) -> None:
    from course_admin.db.models import Setting

    with session_factory() as session:
        session.add(Setting(name="Course Hub", icp="ICP-0001", copyright="(c) Course Hub"))
        session.commit()


def test_settings_missing_row(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.get("/admin/settings", headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Initial settings not found, run the seeders first",
    }

    response = client.put("/admin/settings", json={"name": "New"}, headers=admin_headers)
    assert response.status_code == 404


def test_settings_get_and_update(
    client: TestClient,
    admin_headers: dict[str, str],
    session_factory: sessionmaker[Session],
) -> None:
    _seed_setting(session_factory)

    response = client.get("/admin/settings", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Course Hub"

    response = client.put("/admin/settings", json={"copyright": "(c) 2026"}, headers=admin_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["copyright"] == "(c) 2026"
    assert data["icp"] == "ICP-0001"


def test_sex_chart_reports_every_bucket(
    client: TestClient,
    admin_headers: dict[str, str],
    make_user: Callable[..., int],
) -> None:
    make_user("alan", sex=0)
    make_user("barbara", sex=1)
    make_user("claude", sex=0)

    response = client.get("/admin/charts/sex", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"] == {
        "list": [
            {"value": 2, "name": "male"},
            {"value": 1, "name": "female"},
            {"value": 1, "name": "unspecified"},
        ]
    }


def test_monthly_user_chart(
    client: TestClient,
    admin_headers: dict[str, str],
    admin_id: int,
    make_user: Callable[..., int],
    session_factory: sessionmaker[Session],
) -> None:
    from course_admin.db.models import User

    with session_factory() as session:
        session.get(User, admin_id).created_at = datetime(2025, 11, 3, 9, 0)
        session.commit()
    make_user("jan-a", created_at=datetime(2026, 1, 5, 12, 0))
    make_user("jan-b", created_at=datetime(2026, 1, 28, 18, 30))
    make_user("mar", created_at=datetime(2026, 3, 1, 0, 0))

    response = client.get("/admin/charts/user", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"] == {
        "months": ["2025-11", "2026-01", "2026-03"],
        "values": [1, 2, 1],
    }


def test_settings_update_clears_a_field(
    client: TestClient,
    admin_headers: dict[str, str],
    session_factory: sessionmaker[Session],
) -> None:
    _seed_setting(session_factory)

    response = client.put("/admin/settings", json={"icp": None}, headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["icp"] is None
    assert data["name"] == "Course Hub"
