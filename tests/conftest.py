"""
pytest configuration and fixtures.

每个测试使用独立的内存 SQLite 数据库，并通过 dependency_overrides 替换 get_db。
"""

import os

# 必须在导入 main 之前设置，避免引擎指向默认的 MySQL
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from app.storage.database import get_db, init_db


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_media(client):
    def _create(url: str = "http://x/a.jpg", type_: str = "image") -> dict:
        resp = client.post("/api/v1/media", json={"url": url, "type": type_})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create


@pytest.fixture
def create_post(client):
    def _create(title: str = "Hello", content: str = "World", author: str = "") -> dict:
        resp = client.post("/api/v1/posts", json={"title": title, "content": content, "author": author})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
