"""OpenAPI parity checks for the admin route surface."""

from __future__ import annotations

from course_admin.main import app

RESOURCE_PATHS = {
    "/admin/articles": "article_id",
    "/admin/categories": "category_id",
    "/admin/courses": "course_id",
    "/admin/chapters": "chapter_id",
    "/admin/users": "user_id",
}


def _operations() -> dict[str, set[str]]:
    schema = app.openapi()
    return {path: set(methods) for path, methods in schema["paths"].items()}


def test_every_resource_exposes_crud() -> None:
    operations = _operations()

    for collection, id_param in RESOURCE_PATHS.items():
        assert operations[collection] == {"get", "post"}
        assert operations[f"{collection}/{{{id_param}}}"] == {"get", "put", "delete"}


def test_singleton_chart_and_auth_routes() -> None:
    operations = _operations()

    assert operations["/admin/settings"] == {"get", "put"}
    assert operations["/admin/charts/sex"] == {"get"}
    assert operations["/admin/charts/user"] == {"get"}
    assert operations["/admin/auth/sign_in"] == {"post"}
    assert operations["/health"] == {"get"}
    assert operations["/users/me"] == {"get"}


def test_no_unexpected_routes() -> None:
    expected = set(RESOURCE_PATHS) | {f"{path}/{{{param}}}" for path, param in RESOURCE_PATHS.items()}
    expected |= {
        "/admin/settings",
        "/admin/charts/sex",
        "/admin/charts/user",
        "/admin/auth/sign_in",
        "/health",
        "/users/me",
    }

    assert set(_operations()) == expected
