from practicals.models.follow import Follow
from practicals.models.like import Like
from practicals.models.user import User, UserRole
from practicals.models.video import Video
from practicals.services.seed import DEMO_PASSWORD, DEMO_USERS, DEMO_VIDEOS, seed_database


def test_seed_populates_empty_database(db):
    counts = seed_database(db)

    assert counts["users"] == len(DEMO_USERS)
    assert db.query(User).count() == len(DEMO_USERS)
    assert db.query(Video).count() == len(DEMO_VIDEOS)
    assert db.query(Like).count() == counts["likes"]
    assert db.query(Follow).count() == counts["follows"]
    assert db.query(User).filter(User.username == "admin").one().role == UserRole.admin


def test_seed_is_idempotent(db):
    seed_database(db)

    counts = seed_database(db)

    assert counts["users"] == 0
    assert db.query(User).count() == len(DEMO_USERS)


def test_seeded_users_can_log_in(client, db):
    seed_database(db)

    response = client.post("/api/v1/auth/login", json={"email": "dance@example.com", "password": DEMO_PASSWORD})

    assert response.status_code == 200
    feed = client.get(
        "/api/v1/videos/feed",
        headers={"Authorization": f"Bearer {response.json()['access_token']}"},
    )
    assert {video["title"] for video in feed.json()} == {"Sunrise over the Alps", "60 second carbonara"}
