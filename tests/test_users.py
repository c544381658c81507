from practicals.core.config import settings


def test_get_and_update_own_profile(client, auth_headers):
    response = client.put(
        "/api/v1/users/me",
        json={"fullName": "Alice Liddell", "bio": "Down the rabbit hole"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    me = client.get("/api/v1/users/me", headers=auth_headers).json()
    assert me["fullName"] == "Alice Liddell"
    assert me["bio"] == "Down the rabbit hole"


def test_get_user_profile_with_counts(client, register_user):
    alice = register_user(username="alice")
    client.post("/api/v1/videos/", json={"title": "a", "url": "u"}, headers=alice["headers"])
    client.post("/api/v1/videos/", json={"title": "b", "url": "u", "visibility": "hidden"}, headers=alice["headers"])

    response = client.get(f"/api/v1/users/{alice['user']['id']}")

    assert response.status_code == 200
    profile = response.json()
    assert profile["username"] == "alice"
    assert profile["videos_count"] == 1
    assert profile["followers_count"] == 0
    assert profile["following_count"] == 0


def test_get_unknown_user(client):
    response = client.get("/api/v1/users/999")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_list_users_paginates(client, register_user):
    for name in ("amy", "ben", "cat"):
        register_user(username=name)

    response = client.get("/api/v1/users/", params={"skip": 1, "limit": 1})

    assert [u["username"] for u in response.json()] == ["ben"]


def test_upload_avatar(client, auth_headers, storage):
    response = client.post(
        "/api/v1/users/me/avatar",
        files={"file": ("me.PNG", b"\x89PNG\r\n\x1a\nfake", "image/png")},
        headers=auth_headers,
    )

    assert response.status_code == 200, response.text
    avatar_url = response.json()["avatarUrl"]
    assert avatar_url.startswith("/uploads/avatars/")
    assert avatar_url.endswith(".png")
    assert storage.list("avatars/") == [avatar_url[len("/uploads/"):]]


def test_upload_avatar_rejects_non_image(client, auth_headers, storage):
    response = client.post(
        "/api/v1/users/me/avatar",
        files={"file": ("me.pdf", b"%PDF-1.4", "application/pdf")},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "UNSUPPORTED_FILE_TYPE"


def test_upload_avatar_rejects_large_file(client, auth_headers, storage, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 10)

    response = client.post(
        "/api/v1/users/me/avatar",
        files={"file": ("me.png", b"x" * 11, "image/png")},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "FILE_TOO_LARGE"
    assert storage.list() == []
