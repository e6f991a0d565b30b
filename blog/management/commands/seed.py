"""Management command to seed the database with sample users, posts, likes and comments."""

from random import choice, randint, sample
from typing import List

from django.db import IntegrityError, transaction
from django.core.management.base import BaseCommand
from faker import Faker

from blog.models import Comment, Like, Post, User

user_fixtures = [
    {'email': 'johndoe@example.org', 'name': 'John Doe'},
    {'email': 'janedoe@example.org', 'name': 'Jane Doe'},
    {'email': 'charlie@example.org', 'name': 'Charlie Johnson'},
]

comment_phrases = [
    "Great read, thanks for sharing!",
    "I had never thought about it this way.",
    "Bookmarking this for later.",
    "Could you write a follow-up on this?",
    "Nicely put.",
    "This cleared things up for me.",
]


class Command(BaseCommand):
    """Management command to seed the database with sample blog data."""
    USER_COUNT = 20
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to reach.")
        parser.add_argument("--posts-per-user", type=int, default=2)

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_posts(per_user=options["posts_per_user"])
        self.seed_likes(max_likes_per_post=10)
        self.seed_comments(max_comments_per_post=4)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, user_count: int) -> None:
        """Create the fixture users, then random ones until `user_count` exist."""
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < user_count and attempts < user_count * 3:
            name = self.faker.name()
            self.try_create_user({'email': self.faker.unique.email(), 'name': name})
            attempts += 1
        self.stdout.write(f"Users: {User.objects.count()}")

    def try_create_user(self, data) -> None:
        """Create a user, skipping emails that already exist."""
        try:
            with transaction.atomic():
                User.objects.create_user(
                    email=data['email'],
                    password=Command.DEFAULT_PASSWORD,
                    name=data['name'],
                )
        except IntegrityError:
            pass

    def seed_posts(self, *, per_user: int = 2) -> None:
        """Generate Markdown posts for every user."""
        user_ids = list(User.objects.values_list("id", flat=True))
        rows: List[Post] = []
        for author_id in user_ids:
            for _ in range(per_user):
                rows.append(self._build_post(author_id))
        Post.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"Posts created: {len(rows)}")

    def _build_post(self, author_id) -> Post:
        """Construct an unsaved Post with Markdown content."""
        paragraphs = self.faker.paragraphs(nb=randint(2, 4))
        heading = self.faker.sentence(nb_words=3).rstrip(".")
        content = f"## {heading}\n\n" + "\n\n".join(paragraphs)
        return Post(
            author_id=author_id,
            title=self.faker.sentence(nb_words=5).rstrip(".")[:255],
            content=content,
        )

    def seed_likes(self, *, max_likes_per_post: int = 10) -> None:
        """Like random posts; duplicates are skipped by the unique constraint."""
        users = list(User.objects.values_list("id", flat=True))
        posts = list(Post.objects.values_list("id", flat=True))
        if not users or not posts:
            return
        rows = _build_like_rows(users, posts, max_likes_per_post)
        with transaction.atomic():
            Like.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"Likes created (attempted): {len(rows)}")

    def seed_comments(self, *, max_comments_per_post: int = 4) -> None:
        """Add a few comments from random users to each post."""
        users = list(User.objects.values_list("id", flat=True))
        posts = list(Post.objects.values_list("id", flat=True))
        if not users or not posts:
            return
        rows: List[Comment] = []
        for post_id in posts:
            for _ in range(randint(0, max_comments_per_post)):
                rows.append(Comment(post_id=post_id, user_id=choice(users), content=choice(comment_phrases)))
        Comment.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"Comments created: {len(rows)}")


def _build_like_rows(users, posts, max_likes_per_post):
    rows = []
    for post_id in posts:
        like_count = randint(0, min(max_likes_per_post, len(users)))
        for user_id in sample(users, like_count):
            rows.append(Like(user_id=user_id, post_id=post_id))
    return rows
