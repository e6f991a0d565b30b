"""Resolve a post from a human-typed title."""

from typing import Any, Dict, Iterable, List


class PostLookupError(Exception):
    """No post, or more than one post, matches the requested title."""


def match_posts_by_title(posts: Iterable[Dict[str, Any]], title: str) -> List[Dict[str, Any]]:
    """
    Case-insensitive title matching.

    Exact matches win. Only when there are none do substring matches count.
    """
    needle = (title or "").strip().casefold()
    if not needle:
        raise PostLookupError("Please provide a post title.")
    posts = list(posts)
    exact = [p for p in posts if (p.get("title") or "").strip().casefold() == needle]
    if exact:
        return exact
    return [p for p in posts if needle in (p.get("title") or "").casefold()]


def resolve_post_by_title(client, title: str) -> Dict[str, Any]:
    """Return the single post matching `title`; ambiguity is an error, not a guess."""
    candidates = match_posts_by_title(client.list_posts(), title)
    if not candidates:
        raise PostLookupError(f'No blog post found with a title matching "{title}".')
    if len(candidates) > 1:
        listing = "; ".join(f'"{p["title"]}" (id: {p["id"]})' for p in candidates)
        raise PostLookupError(
            f'More than one blog post matches "{title}": {listing}. Please use the post id instead.'
        )
    return candidates[0]
