from .accounts import AccountService
from .comments import CommentService
from .likes import LikeService, LikeStatus, ToggleResult
from .posts import PostService

__all__ = [
    "AccountService",
    "CommentService",
    "LikeService",
    "LikeStatus",
    "PostService",
    "ToggleResult",
]
