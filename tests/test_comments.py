import pytest


@pytest.fixture
def video(client, auth_headers):
    response = client.post("/api/v1/videos/", json={"title": "clip", "url": "u"}, headers=auth_headers)
    return response.json()


def test_comment_on_video(client, auth_headers, video):
    response = client.post(
        "/api/v1/comments/",
        json={"videoId": video["id"], "content": "Nice!"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["status"] == "visible"
    listed = client.get(f"/api/v1/comments/video/{video['id']}").json()
    assert [c["content"] for c in listed] == ["Nice!"]
    assert client.get(f"/api/v1/videos/{video['id']}").json()["comments_count"] == 1


def test_comment_on_missing_video(client, auth_headers):
    response = client.post("/api/v1/comments/", json={"videoId": 999, "content": "hi"}, headers=auth_headers)

    assert response.status_code == 404


def test_comment_content_required(client, auth_headers, video):
    response = client.post("/api/v1/comments/", json={"videoId": video["id"], "content": ""}, headers=auth_headers)

    assert response.status_code == 400


def test_only_author_updates_comment(client, register_user, auth_headers, video):
    comment = client.post(
        "/api/v1/comments/", json={"videoId": video["id"], "content": "original"}, headers=auth_headers
    ).json()
    other = register_user(username="other")

    forbidden = client.put(f"/api/v1/comments/{comment['id']}", json={"content": "x"}, headers=other["headers"])
    allowed = client.put(f"/api/v1/comments/{comment['id']}", json={"content": "edited"}, headers=auth_headers)

    assert forbidden.status_code == 403
    assert allowed.json()["content"] == "edited"


def test_video_owner_can_remove_comment(client, register_user, auth_headers, video):
    commenter = register_user(username="commenter")
    comment = client.post(
        "/api/v1/comments/", json={"videoId": video["id"], "content": "spam"}, headers=commenter["headers"]
    ).json()

    response = client.delete(f"/api/v1/comments/{comment['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get(f"/api/v1/comments/video/{video['id']}").json() == []
    assert client.delete(f"/api/v1/comments/{comment['id']}", headers=auth_headers).status_code == 404


def test_stranger_cannot_remove_comment(client, register_user, auth_headers, video):
    comment = client.post(
        "/api/v1/comments/", json={"videoId": video["id"], "content": "mine"}, headers=auth_headers
    ).json()
    stranger = register_user(username="stranger")

    response = client.delete(f"/api/v1/comments/{comment['id']}", headers=stranger["headers"])

    assert response.status_code == 403
