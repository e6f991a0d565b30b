"""Custom user model keyed by email with an optional display name."""

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models
from libgravatar import Gravatar


class UserManager(BaseUserManager):
    """Manager creating users identified by email instead of username."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("An email address is required")
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        """Create a regular user with a hashed password."""
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        """Create an admin user."""
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        if not extra_fields.get("is_staff") or not extra_fields.get("is_superuser"):
            raise ValueError("Superuser must have is_staff=True and is_superuser=True.")
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Blog account. Logs in with email; `name` is shown next to posts when set."""

    username = None
    first_name = None
    last_name = None

    email = models.EmailField(unique=True, blank=False)
    name = models.CharField(max_length=100, blank=True, default="")

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        """Default ordering for users."""
        ordering = ["email"]

    def __str__(self):
        return self.email

    @property
    def display_name(self):
        """Name when set, otherwise the email address."""
        return self.name or self.email

    def get_full_name(self):
        return self.display_name

    def get_short_name(self):
        return self.display_name

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default="mp")

    def mini_gravatar(self):
        """Return smaller gravatar URL."""
        return self.gravatar(size=40)
