from typing import List, Optional

from fastapi import APIRouter, Depends, status

from practicals.schemas.post import MockUser, Post, PostComment, PostCommentCreate, PostCreate, PostUpdate
from practicals.services.mock_store import MockStore, get_mock_store

router = APIRouter()


@router.get("/users", response_model=List[MockUser])
def list_users(store: MockStore = Depends(get_mock_store)):
    return store.list_users()


@router.get("/users/{user_id}", response_model=MockUser)
def get_user(user_id: int, store: MockStore = Depends(get_mock_store)):
    return store.get_user(user_id)


@router.get("/users/{user_id}/posts", response_model=List[Post])
def get_user_posts(
    user_id: int,
    skip: int = 0,
    limit: int = 20,
    store: MockStore = Depends(get_mock_store)
):
    store.get_user(user_id)
    return store.list_posts(user_id=user_id, skip=skip, limit=limit)


@router.get("/posts", response_model=List[Post])
def list_posts(
    userId: Optional[int] = None,
    q: Optional[str] = None,
    skip: int = 0,
    limit: int = 20,
    store: MockStore = Depends(get_mock_store)
):
    return store.list_posts(user_id=userId, q=q, skip=skip, limit=limit)


@router.get("/posts/{post_id}", response_model=Post)
def get_post(post_id: int, store: MockStore = Depends(get_mock_store)):
    return store.get_post(post_id)


@router.post("/posts", response_model=Post, status_code=status.HTTP_201_CREATED)
def create_post(post_data: PostCreate, store: MockStore = Depends(get_mock_store)):
    return store.create_post(post_data)


@router.put("/posts/{post_id}", response_model=Post)
def update_post(post_id: int, post_update: PostUpdate, store: MockStore = Depends(get_mock_store)):
    return store.update_post(post_id, post_update)


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, store: MockStore = Depends(get_mock_store)):
    store.delete_post(post_id)
    return None


@router.post("/posts/{post_id}/like", response_model=Post)
def like_post(post_id: int, store: MockStore = Depends(get_mock_store)):
    return store.like_post(post_id)


@router.get("/posts/{post_id}/comments", response_model=List[PostComment])
def list_comments(post_id: int, store: MockStore = Depends(get_mock_store)):
    return store.list_comments(post_id)


@router.post("/posts/{post_id}/comments", response_model=PostComment, status_code=status.HTTP_201_CREATED)
def add_comment(post_id: int, comment_data: PostCommentCreate, store: MockStore = Depends(get_mock_store)):
    return store.add_comment(post_id, comment_data)
