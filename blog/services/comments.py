"""Service helpers for listing and creating comments."""

import logging

from rest_framework.exceptions import NotFound, ValidationError

from blog.authentication import AuthContext, require_session
from blog.models import Comment
from blog.repos import CommentRepo, PostRepo, UserRepo
from blog.services.helpers import acting_user_id, clean_text

logger = logging.getLogger(__name__)

CONTENT_MAX_LENGTH = Comment._meta.get_field("content").max_length


class CommentService:
    """Encapsulate comment reads and creation for posts."""

    def __init__(self, comments=None, posts=None, users=None):
        self.comments = comments or CommentRepo()
        self.posts = posts or PostRepo()
        self.users = users or UserRepo()

    def list(self, post_id):
        """Comments for a post with commenter info, newest first."""
        return list(self.comments.list_for_post(post_id))

    def create(self, post_id, *, content, caller: AuthContext):
        """Create a comment by the caller on the given post."""
        require_session(caller)
        text = clean_text(content)
        if not text:
            raise ValidationError("Comment content is required")
        if len(text) > CONTENT_MAX_LENGTH:
            raise ValidationError(f"Comment must be at most {CONTENT_MAX_LENGTH} characters")

        user_id = acting_user_id(caller, self.users)
        if not self.posts.exists(id=post_id):
            raise NotFound("Post not found")

        comment = self.comments.create(post_id=post_id, user_id=user_id, content=text)
        logger.info("Comment %s created on post %s by user %s", comment.id, post_id, user_id)
        return self.comments.list_for_post(post_id).get(pk=comment.pk)
