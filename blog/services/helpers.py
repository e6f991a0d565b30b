"""Small helpers shared by the blog services."""

import logging

from rest_framework.exceptions import NotFound

from blog.authentication import AuthContext
from blog.repos import UserRepo

logger = logging.getLogger(__name__)


def clean_text(value) -> str:
    """Coerce a submitted value to a stripped string ("" when missing)."""
    if value is None:
        return ""
    return str(value).strip()


def acting_user_id(caller: AuthContext, users: UserRepo) -> int:
    """
    Return the id of the user behind `caller`.

    Sessions normally carry the id. When one only carries an email the user
    is looked up by that address instead.
    """
    if caller.user_id is not None:
        return caller.user_id
    user = users.find_by_email(caller.email or "")
    if user is None:
        logger.warning("No user found for session email %s", caller.email)
        raise NotFound("User not found")
    return user.pk
