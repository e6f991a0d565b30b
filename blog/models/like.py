"""Model representing a user's like on a post."""

from django.db import models
from .user import User
from .post import Post

class Like(models.Model):
    """User like on a post. Presence of the row means "liked"."""
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        db_column='post_id',
        related_name='likes'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/post pair."""
        constraints = [
            models.UniqueConstraint(fields=["user", "post"], name="unique_like_per_user_post"),
        ]
        db_table = "like"

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.post_id}"
