from practicals.schemas.user import UserCreate, UserUpdate, UserResponse, UserProfile, UserLogin, Token, AuthResponse
from practicals.schemas.video import VideoCreate, VideoUpdate, VideoResponse
from practicals.schemas.comment import CommentCreate, CommentUpdate, CommentResponse
from practicals.schemas.like import LikeResponse
from practicals.schemas.follow import FollowResponse
from practicals.schemas.upload import UploadedFile, UploadResult, StoredFile
from practicals.schemas.storage import MigrationReport
from practicals.schemas.post import MockUser, Post, PostCreate, PostUpdate, PostComment, PostCommentCreate

__all__ = [
    "UserCreate", "UserUpdate", "UserResponse", "UserProfile", "UserLogin", "Token", "AuthResponse",
    "VideoCreate", "VideoUpdate", "VideoResponse",
    "CommentCreate", "CommentUpdate", "CommentResponse",
    "LikeResponse",
    "FollowResponse",
    "UploadedFile", "UploadResult", "StoredFile",
    "MigrationReport",
    "MockUser", "Post", "PostCreate", "PostUpdate", "PostComment", "PostCommentCreate",
]
