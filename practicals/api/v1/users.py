import logging
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy import func
from sqlalchemy.orm import Session

from practicals.api.deps import get_current_user
from practicals.core.config import settings
from practicals.core.errors import NotFoundError
from practicals.database import get_db
from practicals.models.follow import Follow
from practicals.models.user import User
from practicals.models.video import Video, VideoVisibility
from practicals.schemas.user import UserProfile, UserResponse, UserUpdate
from practicals.services.storage import StorageBackend, get_storage
from practicals.utils.validators import get_extension, read_upload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=UserResponse)
def get_current_user_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/me", response_model=UserResponse)
def update_user_profile(
    user_update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if user_update.fullName is not None:
        current_user.fullName = user_update.fullName
    if user_update.bio is not None:
        current_user.bio = user_update.bio
    if user_update.avatarUrl is not None:
        current_user.avatarUrl = user_update.avatarUrl

    db.commit()
    db.refresh(current_user)
    return current_user


@router.post("/me/avatar", response_model=UserResponse)
async def upload_avatar(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    storage: StorageBackend = Depends(get_storage)
):
    content = await read_upload(file, settings.ALLOWED_IMAGE_EXTENSIONS, settings.MAX_UPLOAD_SIZE)

    key = f"avatars/{current_user.id}{get_extension(file.filename)}"
    current_user.avatarUrl = storage.save(key, content, file.content_type)
    db.commit()
    db.refresh(current_user)

    logger.info(f"User {current_user.id} uploaded avatar {key}")
    return current_user


@router.get("/{user_id}", response_model=UserProfile)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")

    profile = UserProfile.model_validate(user)
    profile.followers_count = db.query(func.count(Follow.followerId)).filter(Follow.followeeId == user_id).scalar()
    profile.following_count = db.query(func.count(Follow.followeeId)).filter(Follow.followerId == user_id).scalar()
    profile.videos_count = db.query(func.count(Video.id)).filter(
        Video.ownerId == user_id,
        Video.visibility == VideoVisibility.public
    ).scalar()
    return profile


@router.get("/", response_model=List[UserResponse])
def list_users(
    skip: int = 0,
    limit: int = 20,
    db: Session = Depends(get_db)
):
    users = db.query(User).order_by(User.id).offset(skip).limit(limit).all()
    return users
