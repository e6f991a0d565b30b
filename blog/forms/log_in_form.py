from django import forms
from django.contrib.auth import authenticate


class LogInForm(forms.Form):
    """Authenticate a user by email/password against the Django backend."""
    email = forms.EmailField(label="Email")
    password = forms.CharField(label="Password", widget=forms.PasswordInput())

    def get_user(self, request=None):
        """Return the authenticated user or None after validating credentials."""
        if not self.is_valid():
            return None

        email = self.cleaned_data.get("email")
        password = self.cleaned_data.get("password")
        if not email or not password:
            return None

        return authenticate(request, username=email.strip().lower(), password=password)
