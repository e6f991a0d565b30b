from django.urls import reverse
import uuid

from blog.models import Post, User

DEFAULT_PASSWORD = "Password123"


def reverse_with_next(url_name, next_url):
    """Extended version of reverse to generate URLs with redirects"""
    url = reverse(url_name)
    url += f"?next={next_url}"
    return url


def make_user(**kwargs):
    name = kwargs.pop("name", "John Doe")
    email = kwargs.pop("email", f"john_{uuid.uuid4().hex[:6]}@example.org")
    password = kwargs.pop("password", DEFAULT_PASSWORD)
    return User.objects.create_user(email=email, password=password, name=name, **kwargs)


def make_post(*, author=None, title="test post", content="Some **markdown**.", **extra):
    """Creates and returns a post; a fresh author is made when none is given."""
    if author is None:
        author = make_user()
    return Post.objects.create(author=author, title=title, content=content, **extra)


class LogInTester:
    """Class support login in tests."""

    def _is_logged_in(self):
        """Returns True if a user is logged in.  False otherwise."""
        return '_auth_user_id' in self.client.session.keys()
