"""
Assistant action catalog.

Each action wraps one or two blog API calls and turns the result into a
short, human-readable reply. `ActionCatalog.run` never raises: API errors,
lookup failures and transport errors all come back as reply text so a
chat agent can relay them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import requests

from blog.assistant.client import ApiError, BlogApiClient
from blog.assistant.lookup import PostLookupError, resolve_post_by_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parameter:
    name: str
    description: str
    type: str = "string"
    required: bool = True


@dataclass(frozen=True)
class Action:
    name: str
    description: str
    summary: str
    handler: Callable[..., str]
    parameters: Tuple[Parameter, ...] = field(default_factory=tuple)

    @property
    def required(self) -> List[str]:
        return [p.name for p in self.parameters if p.required]

    def schema(self) -> Dict[str, Any]:
        """Tool definition in the JSON-schema shape chat agents expect."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": {
                "type": "object",
                "properties": {
                    p.name: {"type": p.type, "description": p.description} for p in self.parameters
                },
                "required": self.required,
            },
        }


DEFAULT_ACTIONS: Dict[str, Action] = {}


def action(name: str, description: str, summary: str, *parameters: Parameter):
    """Register the decorated function as a default catalog action."""

    def decorator(func):
        DEFAULT_ACTIONS[name] = Action(name, description, summary, func, tuple(parameters))
        return func

    return decorator


class ActionCatalog:
    """The set of actions an agent may call, bound to one API client."""

    def __init__(self, client: BlogApiClient, actions: Optional[Dict[str, Action]] = None):
        self.client = client
        self.actions = dict(DEFAULT_ACTIONS if actions is None else actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions.values())

    def __contains__(self, name) -> bool:
        return name in self.actions

    def tool_schemas(self) -> List[Dict[str, Any]]:
        return [a.schema() for a in self]

    def run(self, action_name: str, /, **arguments) -> str:
        selected = self.actions.get(action_name)
        if selected is None:
            return f"Unknown action '{action_name}'. Available actions: {', '.join(self.actions)}."

        missing = [p for p in selected.required if not _text(arguments.get(p))]
        if missing:
            return f"Missing required argument(s) for {action_name}: {', '.join(missing)}."

        kwargs = {p.name: arguments.get(p.name) for p in selected.parameters}
        try:
            return selected.handler(self.client, **kwargs)
        except ApiError as e:
            return f"Failed to {selected.summary}: {e.message}"
        except PostLookupError as e:
            return str(e)
        except requests.RequestException as e:
            logger.warning("Action %s could not reach the blog API: %s", action_name, e)
            return f"Error trying to {selected.summary}: {e}"


def _text(value) -> str:
    return "" if value is None else str(value).strip()


def _author(post) -> str:
    author = post.get("author") or {}
    return author.get("name") or author.get("email") or "Unknown author"


def _date(post) -> str:
    return (post.get("createdAt") or "")[:10]


def _plural(count, word) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


POST_ID = Parameter("post_id", "The id of the blog post")


@action(
    "createBlogPost",
    "Create a new blog post as the logged-in user.",
    "create blog post",
    Parameter("title", "The title of the blog post"),
    Parameter("content", "The Markdown content of the blog post"),
)
def create_blog_post(client, title, content):
    post = client.create_post(_text(title), _text(content))
    return f'Successfully created blog post "{post["title"]}". You can now view it at /posts/{post["id"]}/'


@action("getBlogPosts", "List every blog post, newest first.", "fetch blog posts")
def get_blog_posts(client):
    posts = client.list_posts()
    if not posts:
        return "No blog posts found. You can create a new one by asking me to create a blog post."
    lines = ["Here are all the blog posts:"]
    for i, post in enumerate(posts, start=1):
        lines.append(
            f'{i}. "{post["title"]}" by {_author(post)} on {_date(post)} '
            f'({_plural(post.get("likeCount", 0), "like")}, '
            f'{_plural(post.get("commentCount", 0), "comment")}) [id: {post["id"]}]'
        )
    return "\n".join(lines)


@action("getBlogPost", "Show one blog post by id.", "fetch blog post", POST_ID)
def get_blog_post(client, post_id):
    post = client.get_post(_text(post_id))
    return f'"{post["title"]}" by {_author(post)} on {_date(post)}\n\n{post["content"]}'


@action(
    "findBlogPost",
    "Find a blog post by its title and report its id.",
    "find blog post",
    Parameter("title", "The title, or part of the title, to look for"),
)
def find_blog_post(client, title):
    post = resolve_post_by_title(client, title)
    return f'Found "{post["title"]}" by {_author(post)} [id: {post["id"]}].'


def _update(client, post_id, title, content):
    title, content = _text(title), _text(content)
    if not title and not content:
        return "No changes provided. Please specify either a new title or new content."
    post = client.update_post(post_id, title=title or None, content=content or None)
    return f'Successfully updated blog post "{post["title"]}". You can view it at /posts/{post["id"]}/'


@action(
    "updateBlogPost",
    "Change the title and/or content of a blog post by id.",
    "update blog post",
    POST_ID,
    Parameter("title", "The new title", required=False),
    Parameter("content", "The new Markdown content", required=False),
)
def update_blog_post(client, post_id, title=None, content=None):
    return _update(client, _text(post_id), title, content)


@action(
    "updateBlogPostByTitle",
    "Change the title and/or content of the blog post with the given current title.",
    "update blog post",
    Parameter("current_title", "The current title of the post to change"),
    Parameter("title", "The new title", required=False),
    Parameter("content", "The new Markdown content", required=False),
)
def update_blog_post_by_title(client, current_title, title=None, content=None):
    post = resolve_post_by_title(client, current_title)
    return _update(client, post["id"], title, content)


@action("deleteBlogPost", "Delete a blog post by id.", "delete blog post", POST_ID)
def delete_blog_post(client, post_id):
    post_id = _text(post_id)
    client.delete_post(post_id)
    return f"Successfully deleted blog post {post_id}."


@action(
    "deleteBlogPostByTitle",
    "Delete the blog post with the given title.",
    "delete blog post",
    Parameter("title", "The title of the post to delete"),
)
def delete_blog_post_by_title(client, title):
    post = resolve_post_by_title(client, title)
    client.delete_post(post["id"])
    return f'Successfully deleted blog post "{post["title"]}".'


@action("toggleLike", "Like a blog post, or remove the like if it is already liked.", "toggle like", POST_ID)
def toggle_like(client, post_id):
    result = client.toggle_like(_text(post_id))
    message = result.get("message") or ("Post liked successfully" if result.get("liked") else "Post unliked successfully")
    return f'{message}. It now has {_plural(result.get("likeCount", 0), "like")}.'


@action("getLikeCount", "Report how many likes a blog post has.", "fetch like count", POST_ID)
def get_like_count(client, post_id):
    result = client.like_status(_text(post_id))
    reply = f'This post has {_plural(result.get("likeCount", 0), "like")}.'
    if result.get("isLikedByCurrentUser"):
        reply += " You liked it."
    return reply


@action("getComments", "List the comments on a blog post, newest first.", "fetch comments", POST_ID)
def get_comments(client, post_id):
    comments = client.list_comments(_text(post_id))
    if not comments:
        return "No comments found."
    lines = ["Comments:"]
    for i, comment in enumerate(comments, start=1):
        user = comment.get("user") or {}
        lines.append(f'{i}. {user.get("name") or user.get("email") or "Someone"}: {comment["content"]}')
    return "\n".join(lines)


@action(
    "createComment",
    "Comment on a blog post as the logged-in user.",
    "create comment",
    POST_ID,
    Parameter("content", "The comment text"),
)
def create_comment(client, post_id, content):
    comment = client.create_comment(_text(post_id), _text(content))
    return f'Comment created: {comment["content"]}'


@action(
    "registerUser",
    "Create a new account.",
    "register user",
    Parameter("name", "Display name", required=False),
    Parameter("email", "Email address"),
    Parameter("password", "Password, at least 8 characters"),
)
def register_user(client, email, password, name=None):
    result = client.register(_text(name), _text(email), password)
    user = result.get("user") or {}
    return f'{result.get("message") or "User registered successfully"}: {user.get("email", email)}.'
