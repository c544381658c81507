from pydantic import BaseModel
from datetime import datetime


class FollowResponse(BaseModel):
    followerId: int
    followeeId: int
    createdAt: datetime

    class Config:
        from_attributes = True
