from django.core.exceptions import ImproperlyConfigured
from django.shortcuts import redirect


class LoginProhibitedMixin:
    """
    Mixin that prevents logged-in users from accessing certain class-based views.

    Useful for the log in and sign up views: an authenticated user is
    redirected to `redirect_when_logged_in_url` instead.
    """

    redirect_when_logged_in_url = None

    def dispatch(self, *args, **kwargs):
        """Redirect authenticated users, otherwise proceed normally."""
        if self.request.user.is_authenticated:
            return self.handle_already_logged_in(*args, **kwargs)
        return super().dispatch(*args, **kwargs)

    def handle_already_logged_in(self, *args, **kwargs):
        """Redirect the user when already logged in."""
        url = self.get_redirect_when_logged_in_url()
        return redirect(url)

    def get_redirect_when_logged_in_url(self):
        """
        Determine the redirect URL for authenticated users.

        Subclasses must set `redirect_when_logged_in_url` or override this
        method, otherwise `ImproperlyConfigured` is raised.
        """
        if self.redirect_when_logged_in_url is None:
            raise ImproperlyConfigured(
                "LoginProhibitedMixin requires either a value for "
                "'redirect_when_logged_in_url', or an implementation for "
                "'get_redirect_when_logged_in_url()'."
            )
        return self.redirect_when_logged_in_url
