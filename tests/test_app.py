from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from practicals.database import get_db
from practicals.main import app
from practicals.models.like import Like
from practicals.models.video import Video


def test_root(client):
    body = client.get("/").json()

    assert body["docs"] == "/docs"
    assert "version" in body


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy", "database": "ok"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": {"status": 404, "code": "NOT_FOUND", "message": "Not Found"},
    }


def test_unhandled_error_returns_generic_500():
    @app.get("/boom-for-test")
    def boom():
        raise RuntimeError("secret internals")

    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom-for-test")
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/boom-for-test"]

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["message"] == "Internal server error"
    assert "secret" not in response.text


def test_integrity_error_returns_409_envelope(client, db, register_user):
    user_id = register_user()["user"]["id"]
    video = Video(ownerId=user_id, title="clip", url="u")
    db.add(video)
    db.flush()
    video_id = video.id
    db.add(Like(userId=user_id, videoId=video_id))
    db.commit()

    @app.post("/like-twice-for-test")
    def like_twice(session: Session = Depends(get_db)):
        session.add(Like(userId=user_id, videoId=video_id))
        session.commit()

    try:
        response = client.post("/like-twice-for-test")
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/like-twice-for-test"]

    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "error": {"status": 409, "code": "CONFLICT", "message": "Resource conflicts with an existing record"},
    }
