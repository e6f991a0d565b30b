"""Model for user comments on posts."""

import uuid
from django.core.validators import MaxLengthValidator
from django.db import models
from .user import User
from .post import Post

class Comment(models.Model):
    """User-authored comment on a post. Comments are never edited."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        db_column='post_id',
        related_name='comments'
    )

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    content = models.TextField(max_length=2000, validators=[MaxLengthValidator(2000)])

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        """DB table name and newest-first ordering for comments."""
        db_table = "comment"
        ordering = ["-created_at", "-pk"]

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.user_id} on {self.post_id}"
