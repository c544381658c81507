"""
In-memory data for the mock social-media API.

Nothing here touches the database; the store lives for the lifetime of the
process and starts from a fixed set of users, posts and comments.
"""
import logging
import threading
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from practicals.core.errors import NotFoundError
from practicals.schemas.post import MockUser, Post, PostComment, PostCommentCreate, PostCreate, PostUpdate

logger = logging.getLogger(__name__)

MOCK_USERS = [
    {"username": "alice", "name": "Alice Nguyen", "bio": "Coffee, code and climbing."},
    {"username": "bob", "name": "Bob Martin", "bio": "Backend dev. Occasional photographer."},
    {"username": "carol", "name": "Carol Diaz", "bio": None},
]

MOCK_POSTS = [
    {"userId": 1, "content": "Hello world! First post on the new API.", "likes": 3},
    {"userId": 2, "content": "Express vs FastAPI, which one do you prefer?", "likes": 5},
    {"userId": 1, "content": "Sunset from the office today.", "imageUrl": "/uploads/mock/sunset.jpg", "likes": 8},
    {"userId": 3, "content": "Just finished my first REST API practical.", "likes": 1},
]

MOCK_COMMENTS = [
    {"postId": 1, "userId": 2, "content": "Welcome!"},
    {"postId": 2, "userId": 1, "content": "Depends on the project."},
    {"postId": 2, "userId": 3, "content": "FastAPI for the docs alone."},
    {"postId": 3, "userId": 2, "content": "Great shot."},
]


class MockStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[int, MockUser] = {}
        self._posts: Dict[int, Post] = {}
        self._comments: Dict[int, PostComment] = {}
        self._next_ids = {"user": 1, "post": 1, "comment": 1}

    def _allocate(self, kind: str) -> int:
        new_id = self._next_ids[kind]
        self._next_ids[kind] = new_id + 1
        return new_id

    def reset(self) -> None:
        with self._lock:
            self._users.clear()
            self._posts.clear()
            self._comments.clear()
            self._next_ids = {"user": 1, "post": 1, "comment": 1}

    def seed(self) -> None:
        """Reset the store to the fixed mock data set."""
        self.reset()
        base_time = datetime.utcnow() - timedelta(days=1)
        with self._lock:
            for data in MOCK_USERS:
                user_id = self._allocate("user")
                self._users[user_id] = MockUser(id=user_id, **data)
            for offset, data in enumerate(MOCK_POSTS):
                post_id = self._allocate("post")
                created = base_time + timedelta(hours=offset)
                self._posts[post_id] = Post(id=post_id, createdAt=created, updatedAt=created, **data)
            for offset, data in enumerate(MOCK_COMMENTS):
                comment_id = self._allocate("comment")
                created = base_time + timedelta(hours=offset, minutes=30)
                self._comments[comment_id] = PostComment(id=comment_id, createdAt=created, **data)
        logger.info(
            f"Mock store seeded with {len(self._users)} users, "
            f"{len(self._posts)} posts and {len(self._comments)} comments"
        )

    # ===== USERS =====

    def list_users(self) -> List[MockUser]:
        with self._lock:
            return list(self._users.values())

    def get_user(self, user_id: int) -> MockUser:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    # ===== POSTS =====

    def list_posts(
        self,
        user_id: Optional[int] = None,
        q: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> List[Post]:
        with self._lock:
            posts = list(self._posts.values())
        if user_id is not None:
            posts = [post for post in posts if post.userId == user_id]
        if q:
            needle = q.lower()
            posts = [post for post in posts if needle in post.content.lower()]
        posts.sort(key=lambda post: (post.createdAt, post.id), reverse=True)
        return posts[skip:skip + limit]

    def get_post(self, post_id: int) -> Post:
        with self._lock:
            post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def create_post(self, data: PostCreate) -> Post:
        self.get_user(data.userId)
        now = datetime.utcnow()
        with self._lock:
            post_id = self._allocate("post")
            post = Post(id=post_id, createdAt=now, updatedAt=now, **data.model_dump())
            self._posts[post_id] = post
        return post

    def update_post(self, post_id: int, data: PostUpdate) -> Post:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                raise NotFoundError("Post not found")
            post = post.model_copy(update={**changes, "updatedAt": datetime.utcnow()})
            self._posts[post_id] = post
        return post

    def delete_post(self, post_id: int) -> None:
        with self._lock:
            if self._posts.pop(post_id, None) is None:
                raise NotFoundError("Post not found")
            for comment_id in [c.id for c in self._comments.values() if c.postId == post_id]:
                del self._comments[comment_id]

    def like_post(self, post_id: int) -> Post:
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                raise NotFoundError("Post not found")
            post = post.model_copy(update={"likes": post.likes + 1})
            self._posts[post_id] = post
        return post

    # ===== COMMENTS =====

    def list_comments(self, post_id: int) -> List[PostComment]:
        self.get_post(post_id)
        with self._lock:
            comments = [c for c in self._comments.values() if c.postId == post_id]
        return sorted(comments, key=lambda c: (c.createdAt, c.id))

    def add_comment(self, post_id: int, data: PostCommentCreate) -> PostComment:
        self.get_post(post_id)
        self.get_user(data.userId)
        with self._lock:
            comment_id = self._allocate("comment")
            comment = PostComment(id=comment_id, postId=post_id, createdAt=datetime.utcnow(), **data.model_dump())
            self._comments[comment_id] = comment
        return comment


mock_store = MockStore()


def get_mock_store() -> MockStore:
    return mock_store
