import os
import tempfile

# Settings are read at import time, so point them at throwaway resources first
_upload_dir = tempfile.mkdtemp(prefix="practicals-uploads-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = _upload_dir
os.environ["STORAGE_BACKEND"] = "local"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from practicals.core.security import hash_password
from practicals.database import Base, SessionLocal, engine
from practicals.main import app
from practicals.models.user import User, UserRole
from practicals.services.mock_store import mock_store
from practicals.services.storage import LocalStorage, get_storage


@pytest.fixture(autouse=True)
def reset_state():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    mock_store.seed()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def storage(tmp_path):
    local = LocalStorage(str(tmp_path / "uploads"), "/uploads")
    app.dependency_overrides[get_storage] = lambda: local
    return local


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register_user(client):
    def _register(username="alice", email=None, password="secret123", **extra):
        payload = {
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
            **extra,
        }
        response = client.post("/api/v1/auth/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "user": body["user"],
            "token": body["access_token"],
            "headers": {"Authorization": f"Bearer {body['access_token']}"},
        }
    return _register


@pytest.fixture
def auth_headers(register_user):
    return register_user()["headers"]


@pytest.fixture
def admin_headers(client, db):
    admin = User(
        email="root@example.com",
        username="root",
        password=hash_password("rootpass1"),
        role=UserRole.admin,
    )
    db.add(admin)
    db.commit()
    response = client.post("/api/v1/auth/login", json={"email": "root@example.com", "password": "rootpass1"})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
