import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from blog.models import Comment, Like
from blog.tests.helpers import make_post, make_user


class LikeApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user()
        self.post = make_post()
        self.url = reverse("post_like_api", kwargs={"post_id": self.post.id})

    def test_toggle_requires_login(self):
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 401)
        self.assertFalse(Like.objects.exists())

    def test_toggle_like_and_unlike(self):
        self.client.force_authenticate(self.user)
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), {"liked": True, "message": "Post liked successfully", "likeCount": 1}
        )
        response = self.client.post(self.url)
        self.assertEqual(
            response.json(), {"liked": False, "message": "Post unliked successfully", "likeCount": 0}
        )

    def test_toggle_missing_post_is_404(self):
        self.client.force_authenticate(self.user)
        response = self.client.post(reverse("post_like_api", kwargs={"post_id": uuid.uuid4()}))
        self.assertEqual(response.status_code, 404)

    def test_status_anonymous(self):
        Like.objects.create(user=self.user, post=self.post)
        response = self.client.get(self.url)
        self.assertEqual(response.json(), {"likeCount": 1, "isLikedByCurrentUser": False})

    def test_status_for_liker(self):
        Like.objects.create(user=self.user, post=self.post)
        self.client.force_authenticate(self.user)
        response = self.client.get(self.url)
        self.assertEqual(response.json(), {"likeCount": 1, "isLikedByCurrentUser": True})

    def test_status_for_missing_post(self):
        response = self.client.get(reverse("post_like_api", kwargs={"post_id": uuid.uuid4()}))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"likeCount": 0, "isLikedByCurrentUser": False})


class CommentApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user(name="Commenter", email="commenter@example.org")
        self.post = make_post()
        self.url = reverse("post_comments_api", kwargs={"post_id": self.post.id})

    def test_list_comments(self):
        Comment.objects.create(user=self.user, post=self.post, content="hi")
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        comments = response.json()["comments"]
        self.assertEqual(len(comments), 1)
        self.assertEqual(comments[0]["content"], "hi")
        self.assertEqual(comments[0]["user"], {"name": "Commenter", "email": "commenter@example.org"})
        self.assertEqual(comments[0]["postId"], str(self.post.id))

    def test_create_requires_login(self):
        response = self.client.post(self.url, {"content": "hi"}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_create_comment(self):
        self.client.force_authenticate(self.user)
        response = self.client.post(self.url, {"content": "Great"}, format="json")
        self.assertEqual(response.status_code, 201)
        comment = response.json()["comment"]
        self.assertEqual(comment["content"], "Great")
        self.assertEqual(comment["userId"], self.user.pk)

    def test_create_blank_comment_is_400(self):
        self.client.force_authenticate(self.user)
        response = self.client.post(self.url, {"content": "  "}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Comment content is required"})

    def test_comment_on_missing_post_is_404(self):
        self.client.force_authenticate(self.user)
        url = reverse("post_comments_api", kwargs={"post_id": uuid.uuid4()})
        response = self.client.post(url, {"content": "hi"}, format="json")
        self.assertEqual(response.status_code, 404)
