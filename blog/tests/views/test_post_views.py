import uuid

from django.test import TestCase
from django.urls import reverse

from blog.models import Comment, Like, Post
from blog.tests.helpers import make_post, make_user, reverse_with_next


class PostPageViewsTestCase(TestCase):
    def setUp(self):
        self.author = make_user(name="Author")
        self.other = make_user(name="Other")
        self.post = make_post(author=self.author, title="Hello world", content="Body text")
        self.detail_url = reverse("post_detail", kwargs={"post_id": self.post.id})

    def test_home_lists_posts(self):
        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "blog/home.html")
        self.assertContains(response, "Hello world")

    def test_detail_shows_post_and_comments(self):
        Comment.objects.create(user=self.other, post=self.post, content="Lovely")
        response = self.client.get(self.detail_url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Body text")
        self.assertContains(response, "Lovely")
        self.assertFalse(response.context["is_author"])
        self.assertFalse(response.context["user_liked"])

    def test_detail_for_author(self):
        self.client.force_login(self.author)
        response = self.client.get(self.detail_url)
        self.assertTrue(response.context["is_author"])

    def test_detail_missing_post_is_404(self):
        response = self.client.get(reverse("post_detail", kwargs={"post_id": uuid.uuid4()}))
        self.assertEqual(response.status_code, 404)

    def test_create_requires_login(self):
        url = reverse("post_create")
        response = self.client.get(url)
        self.assertRedirects(response, reverse_with_next("log_in", url))

    def test_create_post(self):
        self.client.force_login(self.other)
        response = self.client.post(reverse("post_create"), {"title": "Mine", "content": "# Yes"})
        post = Post.objects.get(title="Mine")
        self.assertRedirects(response, reverse("post_detail", kwargs={"post_id": post.id}))
        self.assertEqual(post.author, self.other)

    def test_create_with_blank_fields_rerenders(self):
        self.client.force_login(self.other)
        response = self.client.post(reverse("post_create"), {"title": " ", "content": ""})
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "blog/post_form.html")
        self.assertFalse(response.context["form"].is_valid())

    def test_author_can_edit(self):
        self.client.force_login(self.author)
        url = reverse("post_edit", kwargs={"post_id": self.post.id})
        response = self.client.post(url, {"title": "Edited", "content": "Body text"})
        self.assertRedirects(response, self.detail_url)
        self.post.refresh_from_db()
        self.assertEqual(self.post.title, "Edited")

    def test_non_author_cannot_edit(self):
        self.client.force_login(self.other)
        response = self.client.get(reverse("post_edit", kwargs={"post_id": self.post.id}))
        self.assertEqual(response.status_code, 404)

    def test_author_can_delete(self):
        self.client.force_login(self.author)
        response = self.client.post(reverse("post_delete", kwargs={"post_id": self.post.id}))
        self.assertRedirects(response, reverse("my_posts"))
        self.assertFalse(Post.objects.exists())

    def test_non_author_delete_is_refused(self):
        self.client.force_login(self.other)
        response = self.client.post(reverse("post_delete", kwargs={"post_id": self.post.id}))
        self.assertRedirects(response, self.detail_url)
        self.assertTrue(Post.objects.exists())

    def test_delete_via_get_does_nothing(self):
        self.client.force_login(self.author)
        self.client.get(reverse("post_delete", kwargs={"post_id": self.post.id}))
        self.assertTrue(Post.objects.exists())

    def test_my_posts_only_lists_own(self):
        make_post(author=self.other, title="Someone else")
        self.client.force_login(self.author)
        response = self.client.get(reverse("my_posts"))
        self.assertEqual([p.id for p in response.context["posts"]], [self.post.id])

    def test_toggle_like_redirects_back(self):
        self.client.force_login(self.other)
        response = self.client.post(reverse("toggle_like", kwargs={"post_id": self.post.id}))
        self.assertRedirects(response, self.detail_url)
        self.assertTrue(Like.objects.filter(user=self.other, post=self.post).exists())

    def test_toggle_like_ajax_returns_json(self):
        self.client.force_login(self.other)
        response = self.client.post(
            reverse("toggle_like", kwargs={"post_id": self.post.id}),
            HTTP_X_REQUESTED_WITH="XMLHttpRequest",
        )
        self.assertEqual(response.json(), {"liked": True, "message": "Post liked successfully", "likeCount": 1})

    def test_toggle_like_requires_post(self):
        self.client.force_login(self.other)
        response = self.client.get(reverse("toggle_like", kwargs={"post_id": self.post.id}))
        self.assertEqual(response.status_code, 405)

    def test_add_comment(self):
        self.client.force_login(self.other)
        response = self.client.post(reverse("add_comment", kwargs={"post_id": self.post.id}), {"content": "Nice"})
        self.assertRedirects(response, self.detail_url)
        self.assertEqual(self.post.comments.get().content, "Nice")

    def test_add_blank_comment_is_rejected(self):
        self.client.force_login(self.other)
        self.client.post(reverse("add_comment", kwargs={"post_id": self.post.id}), {"content": ""})
        self.assertFalse(Comment.objects.exists())
