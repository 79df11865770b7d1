from sqlalchemy.exc import OperationalError

from main import app
from app.storage.database import get_page_repo

BASE = "/api/v1/pages"


def _create_page(client, title="About", content="About us"):
    resp = client.post(BASE, json={"title": title, "content": content})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_list_pages_empty(client):
    resp = client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_page_echoes_fields(client):
    page = _create_page(client)
    assert page["id"] > 0
    assert page["title"] == "About"
    assert page["content"] == "About us"
    assert page["created_at"]
    assert page["updated_at"]


def test_get_page_after_create(client):
    created = _create_page(client)
    resp = client.get(f"{BASE}/{created['id']}")
    assert resp.status_code == 200
    got = resp.json()
    for key in ("id", "title", "content"):
        assert got[key] == created[key]


def test_list_pages_returns_all(client):
    _create_page(client, title="One")
    _create_page(client, title="Two")
    titles = [p["title"] for p in client.get(BASE).json()]
    assert titles == ["One", "Two"]


def test_get_page_invalid_id(client):
    resp = client.get(f"{BASE}/abc")
    assert resp.status_code == 400
    assert resp.json() == {"code": 400, "message": "Invalid page ID"}


def test_get_page_not_found(client):
    resp = client.get(f"{BASE}/999")
    assert resp.status_code == 404
    assert resp.json() == {"code": 404, "message": "Page not found"}


def test_create_page_invalid_json(client):
    resp = client.post(BASE, content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == 400
    assert body["message"]


def test_create_page_missing_title(client):
    resp = client.post(BASE, json={"content": "only content"})
    assert resp.status_code == 400
    assert "title" in resp.json()["message"]


def test_create_page_empty_title(client):
    resp = client.post(BASE, json={"title": "", "content": "x"})
    assert resp.status_code == 400


def test_update_page_overwrites_fields(client):
    page = _create_page(client)
    resp = client.put(f"{BASE}/{page['id']}", json={"title": "New", "content": "New content"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "New"
    assert body["content"] == "New content"
    assert body["created_at"] == page["created_at"]
    assert body["updated_at"] != page["updated_at"]


def test_update_page_empty_field_overwrites_to_empty(client):
    page = _create_page(client)
    resp = client.put(f"{BASE}/{page['id']}", json={"title": "", "content": "kept?"})
    assert resp.status_code == 200
    assert resp.json()["title"] == ""

    # 未传的字段同样按空值覆盖
    resp = client.put(f"{BASE}/{page['id']}", json={"title": "T"})
    assert resp.json()["content"] == ""


def test_update_page_is_idempotent(client):
    page = _create_page(client)
    patch = {"title": "Same", "content": "Same content"}
    first = client.put(f"{BASE}/{page['id']}", json=patch).json()
    second = client.put(f"{BASE}/{page['id']}", json=patch).json()
    for key in ("id", "title", "content", "created_at"):
        assert first[key] == second[key]


def test_update_page_invalid_id_and_not_found(client):
    resp = client.put(f"{BASE}/x1", json={"title": "a", "content": "b"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid page ID"

    resp = client.put(f"{BASE}/42", json={"title": "a", "content": "b"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Page not found"


def test_update_page_invalid_body(client):
    page = _create_page(client)
    resp = client.put(f"{BASE}/{page['id']}", json={"title": 123})
    assert resp.status_code == 400
    assert resp.json()["message"] == "title: Input should be a valid string"

    resp = client.put(f"{BASE}/{page['id']}", content="{broken", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_update_page_checks_id_before_body(client):
    resp = client.put(f"{BASE}/abc", json={"title": 123})
    assert resp.json() == {"code": 400, "message": "Invalid page ID"}

    resp = client.put(f"{BASE}/42", content="{broken", headers={"Content-Type": "application/json"})
    assert resp.json() == {"code": 404, "message": "Page not found"}


def test_update_page_refreshes_updated_at_even_with_same_values(client):
    page = _create_page(client, title="Same", content="Same content")
    patch = {"title": "Same", "content": "Same content"}

    first = client.put(f"{BASE}/{page['id']}", json=patch).json()
    assert first["updated_at"] != page["updated_at"]
    second = client.put(f"{BASE}/{page['id']}", json=patch).json()
    assert second["updated_at"] != first["updated_at"]
    assert second["created_at"] == page["created_at"]


def test_delete_page_then_get_is_not_found(client):
    page = _create_page(client)
    resp = client.delete(f"{BASE}/{page['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Page deleted successfully"}

    resp = client.get(f"{BASE}/{page['id']}")
    assert resp.status_code == 404


def test_delete_page_errors(client):
    assert client.delete(f"{BASE}/abc").status_code == 400
    assert client.delete(f"{BASE}/7").status_code == 404


class _BrokenPageRepository:
    def list_pages(self):
        raise OperationalError("SELECT * FROM pages", {}, Exception("connection refused"))

    def get_by_id(self, page_id):
        raise OperationalError("SELECT * FROM pages", {}, Exception("connection refused"))


def test_store_failure_maps_to_500(client):
    app.dependency_overrides[get_page_repo] = lambda: _BrokenPageRepository()

    resp = client.get(BASE)
    assert resp.status_code == 500
    assert resp.json() == {"code": 500, "message": "connection refused"}

    resp = client.get(f"{BASE}/1")
    assert resp.status_code == 500
