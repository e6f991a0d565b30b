from django.shortcuts import render, redirect
from django.urls import reverse
from django.contrib.auth import login
from django.views import View
from django.utils.decorators import method_decorator
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.cache import never_cache
from django.contrib import messages
from blog.forms import LogInForm
from blog.views.decorators import LoginProhibitedMixin

@method_decorator(never_cache, name="dispatch")
class LogInView(LoginProhibitedMixin, View):
    """Display and process the login form for unauthenticated users."""

    redirect_when_logged_in_url = 'home'

    def dispatch(self, request, *args, **kwargs):
        """Capture ?next param before handling request."""
        self.next = request.POST.get("next") or request.GET.get("next") or None
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        """Render the login form."""
        form = LogInForm()
        return render(request, "auth/log_in.html", {"form": form, "next": self.next})

    def post(self, request):
        """Process login form submission."""
        form = LogInForm(request.POST)
        user = form.get_user(request)
        if user:
            return self._login_success(request, user)
        form.add_error(None, self._error_message())
        messages.add_message(request, messages.ERROR, self._error_message())
        return render(request, "auth/log_in.html", {"form": form, "next": self.next})

    def _login_success(self, request, user):
        login(request, user, backend='django.contrib.auth.backends.ModelBackend')
        messages.add_message(request, messages.SUCCESS, "You have logged in successfully!")
        next_url = self.next
        if not next_url or not url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
            next_url = reverse("home")
        return redirect(next_url)

    def _error_message(self):
        return "Oh no, perhaps your email or password is incorrect!"
