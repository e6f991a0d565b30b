# blog/views/sign_up_view.py
from django.contrib.auth import login as auth_login
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.views.generic.edit import FormView
from rest_framework.exceptions import APIException

from blog.exceptions import error_message
from blog.forms import SignUpForm
from blog.services import AccountService
from blog.views.decorators import LoginProhibitedMixin

account_service = AccountService()


class SignUpView(LoginProhibitedMixin, FormView):
    """
    Handles user registration via the SignUpForm.
    """

    template_name = "auth/sign_up.html"
    form_class = SignUpForm
    success_url = reverse_lazy("home")
    redirect_when_logged_in_url = reverse_lazy("home")

    def form_valid(self, form):
        # 1) Create the account through the same path as the JSON API
        try:
            user = account_service.register(**form.registration_data())
        except APIException as e:
            form.add_error(None, error_message(e.detail))
            return self.form_invalid(form)

        # 2) Log them in using the explicit backend
        auth_login(
            self.request,
            user,
            backend="django.contrib.auth.backends.ModelBackend",
        )
        return redirect(self.get_success_url())

    def form_invalid(self, form):
        return render(self.request, self.template_name, {"form": form})
