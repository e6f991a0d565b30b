"""Forms for account signup."""

from django import forms
from blog.models import User


class NewPasswordMixin(forms.Form):
    """Mixin providing password and password confirmation fields."""
    new_password = forms.CharField(label='Password', widget=forms.PasswordInput())
    password_confirmation = forms.CharField(label='Password confirmation', widget=forms.PasswordInput())

    def clean(self):
        """Validate new password and confirmation match."""
        super().clean()
        new_password = self.cleaned_data.get('new_password')
        password_confirmation = self.cleaned_data.get('password_confirmation')
        if new_password != password_confirmation:
            self.add_error(
                'password_confirmation',
                'Confirmation does not match password.'
            )


class SignUpForm(NewPasswordMixin, forms.Form):
    """Form to register a new user with an email, optional name and password."""
    name = forms.CharField(label='Name', max_length=100, required=False)
    email = forms.EmailField(label='Email')

    field_order = ['name', 'email', 'new_password', 'password_confirmation']

    def clean_email(self):
        email = self.cleaned_data['email'].strip().lower()
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("This email is already registered.")
        return email

    def registration_data(self):
        """Keyword arguments for AccountService.register."""
        return {
            'name': self.cleaned_data.get('name', ''),
            'email': self.cleaned_data['email'],
            'password': self.cleaned_data['new_password'],
        }
