"""Repository helpers for fetching posts."""

from typing import Optional
from django.db.models import Count, QuerySet
from blog.db_accessor import DB_Accessor
from blog.models import Post

NEWEST_FIRST = ("-created_at", "-pk")


class PostRepo(DB_Accessor):
    """Repository for Post queries (feed, per-author, lookups)."""
    def __init__(self) -> None:
        """Initialise with the Post model."""
        super().__init__(Post)

    def list_with_counts(self, *, author_id: Optional[int] = None) -> QuerySet:
        """Return posts newest first with author joined and like/comment counts."""
        filters = {"author_id": author_id} if author_id is not None else None
        qs = self.list(filters=filters, order_by=NEWEST_FIRST)
        return qs.select_related("author").annotate(
            like_count=Count("likes", distinct=True),
            comment_count=Count("comments", distinct=True),
        )

    def get_with_author(self, post_id) -> Post:
        """Return one post with its author and counts; raises Post.DoesNotExist."""
        return self.list_with_counts().get(id=post_id)

    def get_at_position(self, position: int) -> Optional[Post]:
        """Return the post at a 1-based position in newest-first order."""
        offset = max(1, int(position)) - 1
        page = list(self._apply_slice(self.list_with_counts(), offset=offset, limit=1))
        return page[0] if page else None
