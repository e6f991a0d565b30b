"""Repository helpers for user lookups."""

from typing import Optional

from blog.db_accessor import DB_Accessor
from blog.models import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_id(self, user_id: int) -> User:
        """Return a user by id."""
        return self.get(id=user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user with this email (case-insensitive), or None."""
        if not email:
            return None
        return self.first(email__iexact=email.strip())

    def email_taken(self, email: str) -> bool:
        return self.exists(email__iexact=email.strip())
