"""Run one assistant action against a running blog from the command line."""

import requests
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from blog.assistant import ActionCatalog, ApiError, BlogApiClient


class Command(BaseCommand):
    help = 'Runs an assistant action (e.g. getBlogPosts, createBlogPost title=... content=...) against the blog API'

    def add_arguments(self, parser):
        parser.add_argument("action", nargs="?", help="Action name; omit or use --list to see them all.")
        parser.add_argument("arguments", nargs="*", help="Action arguments as key=value pairs.")
        parser.add_argument("--base-url", default=None, help="Blog root URL (defaults to ASSISTANT_BASE_URL).")
        parser.add_argument("--email", default=None, help="Log in as this user before running the action.")
        parser.add_argument("--password", default=None)
        parser.add_argument("--server-key", default=None, help="Send this server key on update/delete calls.")
        parser.add_argument("--list", action="store_true", help="List the available actions and exit.")

    def handle(self, *args, **options):
        client = BlogApiClient(
            options["base_url"] or settings.ASSISTANT_BASE_URL,
            server_key=options["server_key"],
        )
        catalog = ActionCatalog(client)

        if options["list"] or not options["action"]:
            for action in catalog:
                params = " ".join(p.name if p.required else f"[{p.name}]" for p in action.parameters)
                self.stdout.write(f"{action.name} {params}".rstrip() + f"\n    {action.description}")
            return

        if options["action"] not in catalog:
            raise CommandError(f"Unknown action '{options['action']}'. Use --list to see the available actions.")
        arguments = self._parse_arguments(options["arguments"])

        if options["email"]:
            try:
                client.log_in(options["email"], options["password"] or "")
            except (ApiError, requests.RequestException) as e:
                raise CommandError(f"Could not log in as {options['email']}: {e}")

        self.stdout.write(catalog.run(options["action"], **arguments))

    def _parse_arguments(self, pairs):
        arguments = {}
        for pair in pairs:
            key, sep, value = pair.partition("=")
            if not sep or not key:
                raise CommandError(f"Arguments must look like key=value, got '{pair}'.")
            arguments[key.strip()] = value
        return arguments
