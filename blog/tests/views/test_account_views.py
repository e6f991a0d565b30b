from django.test import TestCase
from django.urls import reverse

from blog.forms import LogInForm, SignUpForm
from blog.models import User
from blog.tests.helpers import LogInTester, make_user


class LogInViewTestCase(TestCase, LogInTester):
    def setUp(self):
        self.url = reverse('log_in')
        self.user = make_user(email='johndoe@example.org')

    def test_log_in_url(self):
        self.assertEqual(self.url, '/log-in/')

    def test_get_log_in(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'auth/log_in.html')
        self.assertIsInstance(response.context['form'], LogInForm)

    def test_get_log_in_redirects_when_logged_in(self):
        self.client.force_login(self.user)
        response = self.client.get(self.url)
        self.assertRedirects(response, reverse('home'))

    def test_succesful_log_in(self):
        response = self.client.post(self.url, {'email': 'JohnDoe@example.org', 'password': 'Password123'})
        self.assertRedirects(response, reverse('home'))
        self.assertTrue(self._is_logged_in())

    def test_log_in_honours_safe_next(self):
        response = self.client.post(
            self.url, {'email': 'johndoe@example.org', 'password': 'Password123', 'next': reverse('my_posts')}
        )
        self.assertRedirects(response, reverse('my_posts'))

    def test_log_in_ignores_external_next(self):
        response = self.client.post(
            self.url, {'email': 'johndoe@example.org', 'password': 'Password123', 'next': 'https://evil.example.com/'}
        )
        self.assertRedirects(response, reverse('home'))

    def test_unsuccesful_log_in(self):
        response = self.client.post(self.url, {'email': 'johndoe@example.org', 'password': 'Wrong123'})
        self.assertEqual(response.status_code, 200)
        self.assertFalse(self._is_logged_in())

    def test_log_out(self):
        self.client.force_login(self.user)
        response = self.client.get(reverse('log_out'))
        self.assertRedirects(response, reverse('home'))
        self.assertFalse(self._is_logged_in())


class SignUpViewTestCase(TestCase, LogInTester):
    def setUp(self):
        self.url = reverse('sign_up')
        self.form_input = {
            'name': 'Jane Doe',
            'email': 'janedoe@example.org',
            'new_password': 'Password123',
            'password_confirmation': 'Password123',
        }

    def test_get_sign_up(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertIsInstance(response.context['form'], SignUpForm)

    def test_succesful_sign_up(self):
        response = self.client.post(self.url, self.form_input)
        self.assertRedirects(response, reverse('home'))
        user = User.objects.get(email='janedoe@example.org')
        self.assertEqual(user.name, 'Jane Doe')
        self.assertTrue(self._is_logged_in())

    def test_mismatched_confirmation(self):
        self.form_input['password_confirmation'] = 'Different123'
        response = self.client.post(self.url, self.form_input)
        self.assertEqual(response.status_code, 200)
        self.assertFalse(User.objects.exists())

    def test_short_password_is_rejected(self):
        self.form_input['new_password'] = self.form_input['password_confirmation'] = 'short'
        response = self.client.post(self.url, self.form_input)
        self.assertEqual(response.status_code, 200)
        self.assertFalse(User.objects.exists())

    def test_duplicate_email(self):
        make_user(email='janedoe@example.org')
        response = self.client.post(self.url, self.form_input)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(User.objects.count(), 1)
