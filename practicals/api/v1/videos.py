import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from practicals.api.deps import get_current_user, get_current_user_optional
from practicals.core.config import settings
from practicals.core.errors import ForbiddenError, NotFoundError
from practicals.database import get_db
from practicals.models.comment import Comment, CommentStatus
from practicals.models.follow import Follow
from practicals.models.like import Like
from practicals.models.user import User, UserRole
from practicals.models.video import Video, VideoVisibility
from practicals.schemas.video import VideoCreate, VideoResponse, VideoUpdate
from practicals.services.storage import StorageBackend, get_storage
from practicals.utils.validators import read_upload, unique_filename

logger = logging.getLogger(__name__)

router = APIRouter()


def to_video_response(db: Session, video: Video) -> VideoResponse:
    video_response = VideoResponse.model_validate(video)
    video_response.likes_count = db.query(func.count(Like.userId)).filter(Like.videoId == video.id).scalar()
    video_response.comments_count = db.query(func.count(Comment.id)).filter(
        Comment.videoId == video.id,
        Comment.status == CommentStatus.visible
    ).scalar()
    return video_response


def get_visible_video(db: Session, video_id: int) -> Video:
    video = db.query(Video).filter(Video.id == video_id).first()
    if not video or video.visibility == VideoVisibility.deleted:
        raise NotFoundError("Video not found")
    return video


@router.post("/", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
def create_video(
    video_data: VideoCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    db_video = Video(ownerId=current_user.id, **video_data.model_dump())
    db.add(db_video)
    db.commit()
    db.refresh(db_video)

    logger.info(f"User {current_user.id} created video {db_video.id}")
    return to_video_response(db, db_video)


@router.post("/upload", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
async def upload_video(
    title: str = Form(..., min_length=1, max_length=120),
    description: Optional[str] = Form(None, max_length=2200),
    visibility: VideoVisibility = Form(VideoVisibility.public),
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    storage: StorageBackend = Depends(get_storage)
):
    content = await read_upload(file, settings.ALLOWED_VIDEO_EXTENSIONS, settings.MAX_VIDEO_SIZE)

    key = f"videos/{unique_filename(file.filename)}"
    video_url = storage.save(key, content, file.content_type)

    db_video = Video(
        ownerId=current_user.id,
        title=title,
        description=description,
        url=video_url,
        visibility=visibility
    )
    try:
        db.add(db_video)
        db.commit()
        db.refresh(db_video)
    except Exception:
        # Cleanup uploaded file if database fails
        db.rollback()
        storage.delete(key)
        raise

    logger.info(f"User {current_user.id} uploaded video {db_video.id} ({key})")
    return to_video_response(db, db_video)


@router.get("/", response_model=List[VideoResponse])
def list_videos(
    skip: int = 0,
    limit: int = 20,
    q: Optional[str] = None,
    db: Session = Depends(get_db)
):
    query = db.query(Video).filter(Video.visibility == VideoVisibility.public)
    if q:
        query = query.filter(Video.title.ilike(f"%{q}%"))
    videos = query.order_by(desc(Video.createdAt), desc(Video.id)).offset(skip).limit(limit).all()
    return [to_video_response(db, video) for video in videos]


@router.get("/feed", response_model=List[VideoResponse])
def get_following_feed(
    skip: int = 0,
    limit: int = 20,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    followee_ids = select(Follow.followeeId).where(Follow.followerId == current_user.id)
    videos = db.query(Video).filter(
        Video.ownerId.in_(followee_ids),
        Video.visibility == VideoVisibility.public
    ).order_by(desc(Video.createdAt), desc(Video.id)).offset(skip).limit(limit).all()
    return [to_video_response(db, video) for video in videos]


@router.get("/user/{user_id}", response_model=List[VideoResponse])
def get_user_videos(
    user_id: int,
    skip: int = 0,
    limit: int = 20,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional)
):
    query = db.query(Video).filter(Video.ownerId == user_id)
    # Owners also see their hidden videos
    if current_user is not None and user_id == current_user.id:
        query = query.filter(Video.visibility != VideoVisibility.deleted)
    else:
        query = query.filter(Video.visibility == VideoVisibility.public)

    videos = query.order_by(desc(Video.createdAt), desc(Video.id)).offset(skip).limit(limit).all()
    return [to_video_response(db, video) for video in videos]


@router.get("/{video_id}", response_model=VideoResponse)
def get_video(video_id: int, db: Session = Depends(get_db)):
    video = get_visible_video(db, video_id)

    video.views = (video.views or 0) + 1
    db.commit()
    db.refresh(video)

    return to_video_response(db, video)


@router.put("/{video_id}", response_model=VideoResponse)
def update_video(
    video_id: int,
    video_update: VideoUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    video = get_visible_video(db, video_id)

    if video.ownerId != current_user.id:
        raise ForbiddenError("Not authorized to update this video")

    for field, value in video_update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(video, field, value)

    db.commit()
    db.refresh(video)
    return to_video_response(db, video)


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_video(
    video_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    video = get_visible_video(db, video_id)

    if video.ownerId != current_user.id and current_user.role != UserRole.admin:
        raise ForbiddenError("Not authorized to delete this video")

    # Soft delete - mark as deleted
    video.visibility = VideoVisibility.deleted
    db.commit()

    logger.info(f"Video {video_id} deleted by user {current_user.id}")
    return None
