from .client import ApiError, BlogApiClient
from .lookup import PostLookupError, match_posts_by_title, resolve_post_by_title
from .actions import Action, ActionCatalog, DEFAULT_ACTIONS, Parameter
