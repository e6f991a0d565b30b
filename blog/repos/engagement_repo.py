"""Repository helpers for likes and comments."""

from typing import Optional
from django.db.models import QuerySet
from blog.db_accessor import DB_Accessor
from blog.models import Comment, Like


class LikeRepo(DB_Accessor):
    """Repository for Like rows keyed by (user, post)."""
    def __init__(self) -> None:
        super().__init__(Like)

    def find(self, user_id: int, post_id) -> Optional[Like]:
        """Return the like for this user/post pair, or None."""
        return self.first(user_id=user_id, post_id=post_id)

    def count_for_post(self, post_id) -> int:
        return self.model.objects.filter(post_id=post_id).count()


class CommentRepo(DB_Accessor):
    """Repository for comment queries."""
    def __init__(self) -> None:
        super().__init__(Comment)

    def list_for_post(self, post_id) -> QuerySet:
        """Return comments for a post newest first, with commenters joined."""
        qs = self.list(filters={"post_id": post_id}, order_by=("-created_at", "-pk"))
        return qs.select_related("user")
