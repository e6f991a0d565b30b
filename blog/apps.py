from django.apps import AppConfig

class BlogConfig(AppConfig):
    """Django app config for the blog: posts, likes, comments and accounts."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'blog'
