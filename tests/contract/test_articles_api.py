"""Contract tests for article CRUD and list endpoints."""

from __future__ import annotations

from datetime import datetime

from fastapi.testclient import TestClient

API_PREFIX = "/admin/articles"


def _assert_article_contract(payload: dict) -> None:
    for field in ("id", "title", "content", "createdAt", "updatedAt"):
        assert field in payload
    assert isinstance(payload["id"], int)
    datetime.fromisoformat(payload["createdAt"])
    datetime.fromisoformat(payload["updatedAt"])


def _create_article(client: TestClient, headers: dict[str, str], title: str, content: str = "body") -> dict:
    response = client.post(API_PREFIX, json={"title": title, "content": content}, headers=headers)
    assert response.status_code == 201
    envelope = response.json()
    assert envelope["success"] is True
    _assert_article_contract(envelope["data"])
    return envelope["data"]


def test_articles_crud_contract(client: TestClient, admin_headers: dict[str, str]) -> None:
    created = _create_article(client, admin_headers, "Intro to SQL")
    article_id = created["id"]

    response = client.get(f"{API_PREFIX}/{article_id}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Intro to SQL"

    response = client.put(
        f"{API_PREFIX}/{article_id}",
        json={"title": "Intro to PostgreSQL", "id": 999, "createdAt": "2000-01-01T00:00:00"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["id"] == article_id
    assert updated["title"] == "Intro to PostgreSQL"
    assert updated["content"] == "body"
    assert updated["createdAt"] == created["createdAt"]

    response = client.delete(f"{API_PREFIX}/{article_id}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Article deleted", "data": None}

    response = client.get(f"{API_PREFIX}/{article_id}", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_create_article_without_content_is_rejected(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(API_PREFIX, json={"title": "No body"}, headers=admin_headers)

    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["errors"] == ["content is required"]

    response = client.post(API_PREFIX, json={"title": "Blank body", "content": ""}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["errors"] == ["content is required"]

    listing = client.get(API_PREFIX, headers=admin_headers).json()["data"]
    assert listing["pagination"]["total"] == 0


def test_article_list_paginates(client: TestClient, admin_headers: dict[str, str]) -> None:
    for index in range(25):
        _create_article(client, admin_headers, f"Article {index:02d}")

    response = client.get(API_PREFIX, params={"pageNum": 3, "pageSize": 10}, headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["pagination"] == {"pageNum": 3, "pageSize": 10, "total": 25, "totalPage": 3}
    assert [item["title"] for item in data["list"]] == [f"Article {index:02d}" for index in range(20, 25)]


def test_article_list_normalizes_bad_paging(client: TestClient, admin_headers: dict[str, str]) -> None:
    for index in range(3):
        _create_article(client, admin_headers, f"Article {index}")

    response = client.get(API_PREFIX, params={"pageNum": "-1", "pageSize": "0"}, headers=admin_headers)

    assert response.status_code == 200
    pagination = response.json()["data"]["pagination"]
    assert pagination == {"pageNum": 1, "pageSize": 10, "total": 3, "totalPage": 1}

    response = client.get(API_PREFIX, params={"pageNum": "two", "pageSize": "-2"}, headers=admin_headers)
    pagination = response.json()["data"]["pagination"]
    assert (pagination["pageNum"], pagination["pageSize"], pagination["totalPage"]) == (1, 2, 2)


def test_article_title_search_is_a_literal_substring(client: TestClient, admin_headers: dict[str, str]) -> None:
    _create_article(client, admin_headers, "intro to python")
    _create_article(client, admin_headers, "advanced python")
    _create_article(client, admin_headers, "100% coverage")

    response = client.get(API_PREFIX, params={"title": "intro"}, headers=admin_headers)
    titles = [item["title"] for item in response.json()["data"]["list"]]
    assert titles == ["intro to python"]

    response = client.get(API_PREFIX, params={"title": "%"}, headers=admin_headers)
    titles = [item["title"] for item in response.json()["data"]["list"]]
    assert titles == ["100% coverage"]


def test_unknown_article_and_bad_id(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.put(f"{API_PREFIX}/404", json={"title": "x"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Article id: 404 not found"

    response = client.get(f"{API_PREFIX}/abc", headers=admin_headers)
    assert response.status_code == 400


def test_out_of_range_numbers_are_bad_requests(client: TestClient, admin_headers: dict[str, str]) -> None:
    huge = "99999999999999999999"

    response = client.get(API_PREFIX, params={"pageNum": huge}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["errors"] == ["pageNum: pageNum is out of range"]

    response = client.get(f"{API_PREFIX}/{huge}", headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0].startswith("article_id:")

    response = client.delete(f"{API_PREFIX}/2147483648", headers=admin_headers)
    assert response.status_code == 400


def test_article_fields_cannot_be_nulled(client: TestClient, admin_headers: dict[str, str]) -> None:
    created = _create_article(client, admin_headers, "Keep me")

    response = client.put(f"{API_PREFIX}/{created['id']}", json={"content": None}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "content cannot be null"
    assert client.get(f"{API_PREFIX}/{created['id']}", headers=admin_headers).json()["data"]["content"] == "body"
