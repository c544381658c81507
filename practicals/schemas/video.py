from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from practicals.models.video import VideoVisibility


class VideoBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=120)
    description: Optional[str] = Field(None, max_length=2200)
    visibility: VideoVisibility = VideoVisibility.public


class VideoCreate(VideoBase):
    url: str = Field(..., min_length=1, max_length=500)
    thumbUrl: Optional[str] = Field(None, max_length=500)
    durationSec: Optional[int] = Field(None, ge=0)


class VideoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=120)
    description: Optional[str] = Field(None, max_length=2200)
    thumbUrl: Optional[str] = Field(None, max_length=500)
    visibility: Optional[VideoVisibility] = None


class VideoResponse(BaseModel):
    id: int
    ownerId: int
    title: str
    description: Optional[str] = None
    durationSec: Optional[int] = None
    visibility: VideoVisibility
    url: str
    thumbUrl: Optional[str] = None
    views: int = 0
    createdAt: datetime
    likes_count: int = 0
    comments_count: int = 0

    class Config:
        from_attributes = True
