from django.core.management.base import BaseCommand
from django.db import transaction

from blog.models import User


class Command(BaseCommand):
    """
    Remove seeded data.

    Deletes every non-staff user. Their posts, likes and comments go with
    them through cascading deletes, so staff accounts and anything they
    wrote are left in place.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted_count, _ = User.objects.filter(is_staff=False).delete()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} non-staff users and related data."))
