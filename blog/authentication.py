"""
Per-request caller identity and the post ownership rule.

Every view resolves an `AuthContext` once from the incoming request and
hands it to the services. Nothing about the caller is kept in module or
process state.
"""

from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.utils.crypto import constant_time_compare
from rest_framework.authentication import SessionAuthentication
from rest_framework.exceptions import NotAuthenticated, PermissionDenied

SERVER_KEY_HEADER = "X-Copilot-Server-Key"


@dataclass(frozen=True)
class AuthContext:
    """Who is calling: a session user, a trusted server-key holder, both or neither."""
    user_id: Optional[int] = None
    email: Optional[str] = None
    trusted: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None or bool(self.email)

    @classmethod
    def for_user(cls, user, *, trusted: bool = False) -> "AuthContext":
        """Build a context for a logged-in Django user."""
        return cls(user_id=user.pk, email=user.email, trusted=trusted)


def server_key_matches(request) -> bool:
    """True when the request carries the configured server key."""
    expected = getattr(settings, "BLOG_SERVER_KEY", "")
    presented = request.headers.get(SERVER_KEY_HEADER)
    if not expected or not presented:
        return False
    return constant_time_compare(presented, expected)


def resolve_auth_context(request) -> AuthContext:
    """Resolve the caller from the session user and the server key header."""
    trusted = server_key_matches(request)
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return AuthContext.for_user(user, trusted=trusted)
    return AuthContext(trusted=trusted)


def require_session(caller: AuthContext) -> None:
    """Raise 401 unless a user session is present."""
    if not caller.is_authenticated:
        raise NotAuthenticated("Unauthorized")


def require_session_or_server_key(caller: AuthContext) -> None:
    """Raise 401 unless a user session or the server key is present."""
    if not (caller.trusted or caller.is_authenticated):
        raise NotAuthenticated("Unauthorized")


def ensure_can_modify(post, caller: AuthContext) -> None:
    """Only the post's author may change it; server-key callers bypass the check."""
    if caller.trusted:
        return
    require_session(caller)
    if post.author_id != caller.user_id:
        raise PermissionDenied("Forbidden")


class BlogSessionAuthentication(SessionAuthentication):
    """Session auth that answers unauthenticated requests with 401 instead of 403."""

    def authenticate_header(self, request):
        return 'Session realm="api"'
