from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from practicals.database import get_db
from practicals.models.user import User, UserRole
from practicals.models.comment import Comment, CommentStatus
from practicals.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from practicals.api.deps import get_current_user
from practicals.api.v1.videos import get_visible_video
from practicals.core.errors import ForbiddenError, NotFoundError

router = APIRouter()


def get_visible_comment(db: Session, comment_id: int) -> Comment:
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment or comment.status != CommentStatus.visible:
        raise NotFoundError("Comment not found")
    return comment


@router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_data: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    get_visible_video(db, comment_data.videoId)

    db_comment = Comment(
        userId=current_user.id,
        videoId=comment_data.videoId,
        content=comment_data.content
    )

    db.add(db_comment)
    db.commit()
    db.refresh(db_comment)

    return db_comment


@router.get("/video/{video_id}", response_model=List[CommentResponse])
def get_video_comments(
    video_id: int,
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db)
):
    get_visible_video(db, video_id)

    comments = db.query(Comment).filter(
        Comment.videoId == video_id,
        Comment.status == CommentStatus.visible
    ).order_by(Comment.createdAt, Comment.id).offset(skip).limit(limit).all()

    return comments


@router.put("/{comment_id}", response_model=CommentResponse)
def update_comment(
    comment_id: int,
    comment_update: CommentUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    comment = get_visible_comment(db, comment_id)

    if comment.userId != current_user.id:
        raise ForbiddenError("Not authorized to update this comment")

    comment.content = comment_update.content
    db.commit()
    db.refresh(comment)

    return comment


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    comment = get_visible_comment(db, comment_id)

    # Authors, the video's owner and admins may remove a comment
    allowed = (
        comment.userId == current_user.id
        or comment.video.ownerId == current_user.id
        or current_user.role == UserRole.admin
    )
    if not allowed:
        raise ForbiddenError("Not authorized to delete this comment")

    # Soft delete - hide comment
    comment.status = CommentStatus.hidden
    db.commit()

    return None
