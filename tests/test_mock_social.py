import threading

from practicals.schemas.post import PostCreate
from practicals.services.mock_store import MOCK_POSTS, MOCK_USERS, MockStore


def test_seeded_users_and_posts(client):
    users = client.get("/api/v1/mock/users").json()
    posts = client.get("/api/v1/mock/posts", params={"limit": 100}).json()

    assert len(users) == len(MOCK_USERS)
    assert len(posts) == len(MOCK_POSTS)
    created = [post["createdAt"] for post in posts]
    assert created == sorted(created, reverse=True)


def test_get_user_and_their_posts(client):
    assert client.get("/api/v1/mock/users/1").json()["username"] == "alice"
    posts = client.get("/api/v1/mock/users/1/posts").json()
    assert posts and all(post["userId"] == 1 for post in posts)
    assert client.get("/api/v1/mock/users/99").status_code == 404
    assert client.get("/api/v1/mock/users/99/posts").status_code == 404


def test_user_posts_are_paged(client):
    for i in range(25):
        client.post("/api/v1/mock/posts", json={"userId": 3, "content": f"post {i}"})

    first = client.get("/api/v1/mock/users/3/posts").json()
    rest = client.get("/api/v1/mock/users/3/posts", params={"skip": 20, "limit": 20}).json()

    assert len(first) == 20
    assert len(rest) == 6
    assert {post["id"] for post in first}.isdisjoint(post["id"] for post in rest)


def test_filter_and_search_posts(client):
    by_user = client.get("/api/v1/mock/posts", params={"userId": 2}).json()
    by_text = client.get("/api/v1/mock/posts", params={"q": "sunset"}).json()

    assert {post["userId"] for post in by_user} == {2}
    assert len(by_text) == 1


def test_create_update_delete_post(client):
    created = client.post("/api/v1/mock/posts", json={"userId": 3, "content": "New post"})

    assert created.status_code == 201
    post_id = created.json()["id"]
    assert created.json()["likes"] == 0

    updated = client.put(f"/api/v1/mock/posts/{post_id}", json={"content": "Edited"})
    assert updated.json()["content"] == "Edited"
    assert updated.json()["userId"] == 3

    assert client.delete(f"/api/v1/mock/posts/{post_id}").status_code == 204
    assert client.get(f"/api/v1/mock/posts/{post_id}").status_code == 404


def test_create_post_for_unknown_user(client):
    response = client.post("/api/v1/mock/posts", json={"userId": 42, "content": "hi"})

    assert response.status_code == 404


def test_create_post_requires_content(client):
    response = client.post("/api/v1/mock/posts", json={"userId": 1})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_like_post(client):
    before = client.get("/api/v1/mock/posts/1").json()["likes"]

    response = client.post("/api/v1/mock/posts/1/like")

    assert response.json()["likes"] == before + 1


def test_comments_on_post(client):
    added = client.post("/api/v1/mock/posts/1/comments", json={"userId": 3, "content": "Late to the party"})

    assert added.status_code == 201
    comments = client.get("/api/v1/mock/posts/1/comments").json()
    assert comments[-1]["content"] == "Late to the party"
    assert client.get("/api/v1/mock/posts/99/comments").status_code == 404


def test_deleting_post_removes_its_comments():
    store = MockStore()
    store.seed()

    store.delete_post(2)

    assert all(comment.postId != 2 for post_id in (1, 3) for comment in store.list_comments(post_id))
    assert len(store._comments) == 2


def test_concurrent_creates_get_unique_ids():
    store = MockStore()
    store.seed()

    def create_many():
        for _ in range(50):
            store.create_post(PostCreate(userId=1, content="load"))

    threads = [threading.Thread(target=create_many) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    posts = store.list_posts(limit=1000)
    assert len(posts) == len(MOCK_POSTS) + 200
    assert len({post.id for post in posts}) == len(posts)
