"""
Load the demo data set into the database.

Moves the TikTok clone's original in-memory fixtures into real tables so a
fresh database starts with something to browse.

    python -m practicals.services.seed
"""
import logging
from typing import Dict

from sqlalchemy.orm import Session

from practicals.core.logging_config import setup_logging
from practicals.core.security import hash_password
from practicals.database import Base, SessionLocal, engine
from practicals.models.comment import Comment
from practicals.models.follow import Follow
from practicals.models.like import Like
from practicals.models.user import User, UserRole
from practicals.models.video import Video

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    {"username": "admin", "email": "admin@example.com", "fullName": "Site Admin", "role": UserRole.admin},
    {"username": "dancequeen", "email": "dance@example.com", "fullName": "Dana Lee"},
    {"username": "chefmike", "email": "mike@example.com", "fullName": "Mike Rossi"},
    {"username": "traveltom", "email": "tom@example.com", "fullName": "Tom Becker"},
]

# Indexes below refer to positions in DEMO_USERS / DEMO_VIDEOS
DEMO_VIDEOS = [
    {"owner": 1, "title": "Morning dance routine", "url": "/uploads/videos/dance.mp4", "durationSec": 32},
    {"owner": 2, "title": "60 second carbonara", "url": "/uploads/videos/carbonara.mp4", "durationSec": 60},
    {"owner": 3, "title": "Sunrise over the Alps", "url": "/uploads/videos/alps.mp4", "durationSec": 45},
    {"owner": 1, "title": "Dance challenge part 2", "url": "/uploads/videos/challenge.mp4", "durationSec": 28},
]

DEMO_COMMENTS = [
    {"video": 0, "author": 2, "content": "Teach me this!"},
    {"video": 1, "author": 1, "content": "Making this tonight."},
    {"video": 2, "author": 1, "content": "Wow, where is this?"},
    {"video": 2, "author": 2, "content": "Adding it to my list."},
]

DEMO_LIKES = [(2, 0), (3, 0), (1, 1), (1, 2), (2, 2)]

DEMO_FOLLOWS = [(2, 1), (3, 1), (1, 3), (1, 2)]


def seed_database(db: Session) -> Dict[str, int]:
    """Insert the demo data into empty tables. Does nothing if any user exists."""
    if db.query(User).first() is not None:
        logger.info("Database already has users, skipping seed")
        return {"users": 0, "videos": 0, "comments": 0, "likes": 0, "follows": 0}

    password = hash_password(DEMO_PASSWORD)
    users = [User(password=password, **data) for data in DEMO_USERS]
    db.add_all(users)
    db.flush()

    videos = []
    for data in DEMO_VIDEOS:
        fields = dict(data)
        owner = users[fields.pop("owner")]
        videos.append(Video(ownerId=owner.id, **fields))
    db.add_all(videos)
    db.flush()

    db.add_all(
        Comment(videoId=videos[c["video"]].id, userId=users[c["author"]].id, content=c["content"])
        for c in DEMO_COMMENTS
    )
    db.add_all(Like(userId=users[u].id, videoId=videos[v].id) for u, v in DEMO_LIKES)
    db.add_all(Follow(followerId=users[a].id, followeeId=users[b].id) for a, b in DEMO_FOLLOWS)
    db.commit()

    counts = {
        "users": len(DEMO_USERS),
        "videos": len(DEMO_VIDEOS),
        "comments": len(DEMO_COMMENTS),
        "likes": len(DEMO_LIKES),
        "follows": len(DEMO_FOLLOWS),
    }
    logger.info(f"Seeded database: {counts}")
    return counts


if __name__ == "__main__":
    setup_logging()
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_database(session)
    finally:
        session.close()
