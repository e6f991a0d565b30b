import uuid
from django.conf import settings
from django.db import models
from django.urls import reverse

from .user import User

"""
Post model

A post is a Markdown article written by one user.
- `author` is set when the post is created and never reassigned.
- `title`/`content` are the only fields an author can change afterwards.
- Likes and comments hang off the post through `related_name="likes"` and
  `related_name="comments"`; both cascade when the post is deleted.
- Posts are listed newest first everywhere (see Meta.ordering).
"""


class Post(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    author = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="posts",
        db_column="author_id",
    )

    title = models.CharField(max_length=255)
    content = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "post"
        ordering = ["-created_at", "-pk"]

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("post_detail", kwargs={"post_id": self.id})

    @property
    def share_url(self):
        """Absolute link built from the configured public base URL."""
        return f"{settings.PUBLIC_BASE_URL}{self.get_absolute_url()}"
