from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class MockUser(BaseModel):
    id: int
    username: str
    name: str
    bio: Optional[str] = None
    avatarUrl: Optional[str] = None


class PostBase(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)
    imageUrl: Optional[str] = None


class PostCreate(PostBase):
    userId: int


class PostUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1, max_length=2000)
    imageUrl: Optional[str] = None


class Post(PostBase):
    id: int
    userId: int
    likes: int = 0
    createdAt: datetime
    updatedAt: datetime


class PostCommentCreate(BaseModel):
    userId: int
    content: str = Field(..., min_length=1, max_length=500)


class PostComment(PostCommentCreate):
    id: int
    postId: int
    createdAt: datetime
