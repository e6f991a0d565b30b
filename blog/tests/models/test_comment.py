from django.core.exceptions import ValidationError
from django.test import TestCase

from blog.models import Comment
from blog.tests.helpers import make_post, make_user


class CommentModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user()
        self.post = make_post()
        self.comment = Comment.objects.create(post=self.post, user=self.user, content="First!")

    def test_valid_comment(self):
        self.comment.full_clean()

    def test_content_is_required(self):
        self.comment.content = ""
        with self.assertRaises(ValidationError):
            self.comment.full_clean()

    def test_content_of_exactly_2000_characters_is_valid(self):
        self.comment.content = "x" * 2000
        self.comment.full_clean()

    def test_content_may_not_exceed_2000_characters(self):
        self.comment.content = "x" * 2001
        with self.assertRaises(ValidationError):
            self.comment.full_clean()

    def test_comments_reachable_from_post_and_user(self):
        self.assertEqual(list(self.post.comments.all()), [self.comment])
        self.assertEqual(list(self.user.comments.all()), [self.comment])

    def test_a_user_may_comment_more_than_once(self):
        Comment.objects.create(post=self.post, user=self.user, content="Second")
        self.assertEqual(self.post.comments.count(), 2)

    def test_string_representation(self):
        self.assertIn(str(self.post.id), str(self.comment))
