from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from blog.models import Comment, Like, Post, User
from blog.tests.helpers import make_post, make_user


class SeedCommandTestCase(TestCase):
    def test_seed_creates_sample_data(self):
        out = StringIO()
        call_command("seed", "--users", "5", "--posts-per-user", "1", stdout=out)
        self.assertEqual(User.objects.count(), 5)
        self.assertEqual(Post.objects.count(), 5)
        self.assertIn("Seeding complete", out.getvalue())
        self.assertTrue(User.objects.get(email="johndoe@example.org").check_password("Password123"))

    def test_seed_twice_does_not_duplicate_fixture_users(self):
        call_command("seed", "--users", "3", "--posts-per-user", "0", stdout=StringIO())
        call_command("seed", "--users", "3", "--posts-per-user", "0", stdout=StringIO())
        self.assertEqual(User.objects.filter(email="johndoe@example.org").count(), 1)


class UnseedCommandTestCase(TestCase):
    def test_unseed_keeps_staff(self):
        staff = make_user(is_staff=True)
        seeded = make_user()
        post = make_post(author=seeded)
        Like.objects.create(user=staff, post=post)
        Comment.objects.create(user=staff, post=post, content="hi")
        call_command("unseed", stdout=StringIO())
        self.assertEqual(list(User.objects.all()), [staff])
        self.assertFalse(Post.objects.exists())
        self.assertFalse(Like.objects.exists())


class AssistantCommandTestCase(TestCase):
    def test_list_actions(self):
        out = StringIO()
        call_command("assistant", "--list", stdout=out)
        self.assertIn("createBlogPost title content", out.getvalue())
        self.assertIn("updateBlogPost post_id [title] [content]", out.getvalue())

    @patch("blog.management.commands.assistant.BlogApiClient")
    def test_run_action(self, client_class):
        client_class.return_value.list_posts.return_value = []
        out = StringIO()
        call_command("assistant", "getBlogPosts", "--base-url", "http://blog.test", stdout=out)
        client_class.assert_called_once_with("http://blog.test", server_key=None)
        self.assertIn("No blog posts found", out.getvalue())

    @patch("blog.management.commands.assistant.BlogApiClient")
    def test_run_action_with_arguments_and_login(self, client_class):
        client = client_class.return_value
        client.create_post.return_value = {"id": "abc", "title": "Hi"}
        out = StringIO()
        call_command(
            "assistant", "createBlogPost", "title=Hi", "content=Body = text",
            "--email", "a@example.org", "--password", "pw", stdout=out,
        )
        client.log_in.assert_called_once_with("a@example.org", "pw")
        client.create_post.assert_called_once_with("Hi", "Body = text")
        self.assertIn('Successfully created blog post "Hi"', out.getvalue())

    def test_unknown_action(self):
        with self.assertRaises(CommandError):
            call_command("assistant", "nope", stdout=StringIO())

    def test_malformed_argument(self):
        with self.assertRaises(CommandError):
            call_command("assistant", "getBlogPost", "oops", stdout=StringIO())

    @patch("blog.management.commands.assistant.BlogApiClient")
    def test_register_user_with_display_name(self, client_class):
        client = client_class.return_value
        client.register.return_value = {"user": {"email": "ann@example.org"}, "message": "User registered successfully"}
        out = StringIO()
        call_command(
            "assistant", "registerUser", "name=Ann", "email=ann@example.org", "password=Password123", stdout=out,
        )
        client.register.assert_called_once_with("Ann", "ann@example.org", "Password123")
        self.assertIn("User registered successfully: ann@example.org.", out.getvalue())
