from .engagement_repo import CommentRepo, LikeRepo
from .post_repo import PostRepo
from .user_repo import UserRepo

__all__ = ["CommentRepo", "LikeRepo", "PostRepo", "UserRepo"]
