"""Service helpers for post creation, lookup, updates, and deletion."""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from rest_framework.exceptions import NotFound, ValidationError

from blog.authentication import (
    AuthContext,
    ensure_can_modify,
    require_session,
    require_session_or_server_key,
)
from blog.exceptions import Conflict
from blog.models import Post
from blog.repos import PostRepo, UserRepo
from blog.services.helpers import acting_user_id, clean_text

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = Post._meta.get_field("title").max_length


class PostService:
    """Encapsulate the post lifecycle behind the author-only ownership rule."""

    def __init__(self, posts=None, users=None):
        self.posts = posts or PostRepo()
        self.users = users or UserRepo()

    def list(self):
        """All posts, newest first, with author and like/comment counts."""
        return list(self.posts.list_with_counts())

    def list_for_author(self, user_id):
        """Posts written by one user, newest first."""
        return list(self.posts.list_with_counts(author_id=user_id))

    def get(self, post_id):
        """Return a post by id or raise NotFound."""
        try:
            return self.posts.get_with_author(post_id)
        except (Post.DoesNotExist, ValueError, DjangoValidationError):
            raise NotFound("Post not found")

    def get_at_position(self, position):
        """Return the post at a 1-based position in newest-first order."""
        post = self.posts.get_at_position(position)
        if post is None:
            raise NotFound("Post not found")
        return post

    def create(self, *, title, content, caller: AuthContext):
        """Create a post owned by the caller."""
        require_session(caller)
        title = clean_text(title)
        content = clean_text(content)
        if not title or not content:
            raise ValidationError("Title and content are required")
        self._check_title_length(title)

        author_id = acting_user_id(caller, self.users)
        post = self.posts.create(author_id=author_id, title=title, content=content)
        logger.info("Post %s created by user %s", post.id, author_id)
        return self.get(post.id)

    def update(self, post_id, *, title=None, content=None, caller: AuthContext):
        """Apply the provided non-empty fields; author or server key only."""
        require_session_or_server_key(caller)
        changes = {}
        title = clean_text(title)
        content = clean_text(content)
        if title:
            self._check_title_length(title)
            changes["title"] = title
        if content:
            changes["content"] = content
        if not changes:
            raise ValidationError("Provide at least a title or content to update")

        post = self.get(post_id)
        ensure_can_modify(post, caller)

        for field, value in changes.items():
            setattr(post, field, value)
        post.save(update_fields=[*changes, "updated_at"])
        logger.info(
            "Post %s updated (%s) by %s",
            post.id,
            ", ".join(changes),
            "server key" if caller.trusted else f"user {caller.user_id}",
        )
        return post

    def delete(self, post_id, *, caller: AuthContext):
        """Delete a post and, through cascades, its likes and comments."""
        require_session_or_server_key(caller)
        post = self.get(post_id)
        ensure_can_modify(post, caller)
        try:
            with transaction.atomic():
                post.delete()
        except (IntegrityError, ProtectedError) as e:
            logger.warning("Could not delete post %s: %s", post_id, e)
            raise Conflict("Cannot delete post due to existing related records")
        logger.info("Post %s deleted", post_id)
        return post_id

    def _check_title_length(self, title):
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
