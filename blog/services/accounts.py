"""Service helpers for registering users and checking their credentials."""

import logging

from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction
from rest_framework.exceptions import AuthenticationFailed, ValidationError

from blog.exceptions import Conflict
from blog.models import User
from blog.repos import UserRepo
from blog.services.helpers import clean_text

logger = logging.getLogger(__name__)


class AccountService:
    """Registration and credential checks for email/password accounts."""

    def __init__(self, users=None):
        self.users = users or UserRepo()

    def register(self, *, name, email, password):
        """Create a new account; emails are unique case-insensitively."""
        name = clean_text(name)
        email = clean_text(email).lower()
        password = "" if password is None else str(password)
        if not email or not password:
            raise ValidationError("Email and password are required")

        try:
            validate_email(email)
        except DjangoValidationError:
            raise ValidationError("Enter a valid email address")
        try:
            validate_password(password)
        except DjangoValidationError as e:
            raise ValidationError(e.messages[0])

        if self.users.email_taken(email):
            raise Conflict("User with this email already exists")
        try:
            with transaction.atomic():
                user = User.objects.create_user(email=email, password=password, name=name)
        except IntegrityError:
            raise Conflict("User with this email already exists")

        logger.info("Registered user %s", user.pk)
        return user

    def check_credentials(self, request, *, email, password):
        """Return the user for these credentials or raise AuthenticationFailed."""
        email = clean_text(email).lower()
        if not email or not password:
            raise ValidationError("Email and password are required")
        user = authenticate(request, username=email, password=password)
        if user is None:
            raise AuthenticationFailed("Invalid email or password")
        return user
