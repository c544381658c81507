from practicals.models.user import User
from practicals.models.video import Video
from practicals.models.comment import Comment
from practicals.models.like import Like
from practicals.models.follow import Follow

__all__ = ["User", "Video", "Comment", "Like", "Follow"]
