from sqlalchemy import select, func

from app.models.post import post_media

BASE = "/api/v1/media"


def test_media_lifecycle(client):
    resp = client.post(BASE, json={"url": "http://x/a.jpg", "type": "image"})
    assert resp.status_code == 201
    media = resp.json()
    assert media["id"] == 1
    assert media["url"] == "http://x/a.jpg"
    assert media["type"] == "image"
    assert media["created_at"] and media["updated_at"]

    resp = client.get(f"{BASE}/1")
    assert resp.status_code == 200
    assert resp.json()["url"] == "http://x/a.jpg"

    resp = client.delete(f"{BASE}/1")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Media deleted successfully"}

    resp = client.get(f"{BASE}/1")
    assert resp.status_code == 404
    assert resp.json() == {"code": 404, "message": "Media not found"}


def test_list_media(client, create_media):
    assert client.get(BASE).json() == []
    create_media(url="http://x/a.jpg", type_="image")
    create_media(url="http://x/b.mp4", type_="video")
    types = [m["type"] for m in client.get(BASE).json()]
    assert types == ["image", "video"]


def test_create_media_requires_url_and_type(client):
    payloads = (
        {"type": "image"},
        {"url": "http://x"},
        {"url": "", "type": "image"},
        {"url": "http://x", "type": ""},
        {"url": None, "type": "image"},
        {"url": "http://x", "type": None},
    )
    for payload in payloads:
        resp = client.post(BASE, json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"code": 400, "message": "URL and type are required"}


def test_create_media_invalid_json(client):
    resp = client.post(BASE, content="nope", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_media_invalid_id(client):
    assert client.get(f"{BASE}/abc").json() == {"code": 400, "message": "Invalid media ID"}
    assert client.delete(f"{BASE}/abc").json() == {"code": 400, "message": "Invalid media ID"}
    assert client.delete(f"{BASE}/77").json() == {"code": 404, "message": "Media not found"}


def test_media_has_no_update_route(client, create_media):
    media = create_media()
    resp = client.put(f"{BASE}/{media['id']}", json={"url": "http://y"})
    assert resp.status_code == 405
    assert resp.json()["code"] == 405


def test_delete_referenced_media_detaches_from_posts(client, db_session, create_post, create_media):
    post = create_post()
    media = create_media()
    client.post(f"/api/v1/posts/{post['id']}/media/{media['id']}")

    resp = client.delete(f"{BASE}/{media['id']}")
    assert resp.status_code == 200

    count = db_session.execute(
        select(func.count()).select_from(post_media).where(post_media.c.media_id == media["id"])
    ).scalar_one()
    assert count == 0
    assert client.get(f"/api/v1/posts/{post['id']}").json()["media"] == []
