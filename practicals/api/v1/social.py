import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from practicals.database import get_db
from practicals.models.user import User
from practicals.models.like import Like
from practicals.models.follow import Follow
from practicals.schemas.like import LikeResponse
from practicals.schemas.follow import FollowResponse
from practicals.api.deps import get_current_user
from practicals.api.v1.videos import get_visible_video
from practicals.core.errors import BadRequestError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


# ===== LIKES =====

@router.post("/likes/{video_id}", response_model=LikeResponse, status_code=status.HTTP_201_CREATED)
def like_video(
    video_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    get_visible_video(db, video_id)

    existing_like = db.query(Like).filter(
        Like.userId == current_user.id,
        Like.videoId == video_id
    ).first()

    if existing_like:
        raise ConflictError("Already liked this video", code="ALREADY_LIKED")

    db_like = Like(
        userId=current_user.id,
        videoId=video_id
    )

    db.add(db_like)
    db.commit()
    db.refresh(db_like)

    return db_like


@router.delete("/likes/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
def unlike_video(
    video_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    like = db.query(Like).filter(
        Like.userId == current_user.id,
        Like.videoId == video_id
    ).first()

    if not like:
        raise NotFoundError("Like not found")

    db.delete(like)
    db.commit()

    return None


@router.get("/likes/video/{video_id}", response_model=List[LikeResponse])
def get_video_likes(
    video_id: int,
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db)
):
    get_visible_video(db, video_id)

    likes = db.query(Like).filter(
        Like.videoId == video_id
    ).order_by(Like.createdAt).offset(skip).limit(limit).all()

    return likes


# ===== FOLLOWS =====

@router.post("/follow/{user_id}", response_model=FollowResponse, status_code=status.HTTP_201_CREATED)
def follow_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if user_id == current_user.id:
        raise BadRequestError("Cannot follow yourself")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")

    existing_follow = db.query(Follow).filter(
        Follow.followerId == current_user.id,
        Follow.followeeId == user_id
    ).first()

    if existing_follow:
        raise ConflictError("Already following this user", code="ALREADY_FOLLOWING")

    db_follow = Follow(
        followerId=current_user.id,
        followeeId=user_id
    )

    db.add(db_follow)
    db.commit()
    db.refresh(db_follow)

    logger.info(f"User {current_user.id} followed user {user_id}")
    return db_follow


@router.delete("/unfollow/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def unfollow_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    follow = db.query(Follow).filter(
        Follow.followerId == current_user.id,
        Follow.followeeId == user_id
    ).first()

    if not follow:
        raise NotFoundError("Follow relationship not found")

    db.delete(follow)
    db.commit()

    return None


@router.get("/followers/{user_id}", response_model=List[FollowResponse])
def get_followers(
    user_id: int,
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db)
):
    followers = db.query(Follow).filter(
        Follow.followeeId == user_id
    ).order_by(Follow.createdAt).offset(skip).limit(limit).all()

    return followers


@router.get("/following/{user_id}", response_model=List[FollowResponse])
def get_following(
    user_id: int,
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db)
):
    following = db.query(Follow).filter(
        Follow.followerId == user_id
    ).order_by(Follow.createdAt).offset(skip).limit(limit).all()

    return following
