"""Service helpers for the per-user like toggle."""

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound

from blog.authentication import AuthContext, require_session
from blog.repos import LikeRepo, PostRepo, UserRepo
from blog.services.helpers import acting_user_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LikeStatus:
    like_count: int
    is_liked_by_current_user: bool


@dataclass(frozen=True)
class ToggleResult:
    liked: bool
    like_count: int

    @property
    def message(self):
        return "Post liked successfully" if self.liked else "Post unliked successfully"


class LikeService:
    """Toggle and report likes. One Like row per (user, post) at most."""

    def __init__(self, likes=None, posts=None, users=None):
        self.likes = likes or LikeRepo()
        self.posts = posts or PostRepo()
        self.users = users or UserRepo()

    def toggle(self, post_id, caller: AuthContext) -> ToggleResult:
        """Unlike when a like exists, like otherwise."""
        require_session(caller)
        if not self.posts.exists(id=post_id):
            raise NotFound("Post not found")
        user_id = acting_user_id(caller, self.users)

        existing = self.likes.find(user_id, post_id)
        if existing is not None:
            self.likes.delete(pk=existing.pk)
            liked = False
        else:
            liked = self._like(user_id, post_id)
        return ToggleResult(liked=liked, like_count=self.likes.count_for_post(post_id))

    def status(self, post_id, caller: AuthContext) -> LikeStatus:
        """Total likes plus whether the caller (if any) is one of them."""
        liked = False
        if caller.user_id is not None:
            liked = self.likes.find(caller.user_id, post_id) is not None
        return LikeStatus(
            like_count=self.likes.count_for_post(post_id),
            is_liked_by_current_user=liked,
        )

    def _like(self, user_id, post_id):
        try:
            with transaction.atomic():
                self.likes.create(user_id=user_id, post_id=post_id)
        except IntegrityError:
            # Lost a race with a duplicate request; the unique constraint kept one row.
            if self.likes.find(user_id, post_id) is None:
                raise
            logger.info("Like for post %s by user %s already recorded", post_id, user_id)
        return True
