"""Django app configuration for blog_rpc."""
from django.apps import AppConfig


class BlogRpcConfig(AppConfig):
    """Configuration for the blog RPC app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "blog_rpc"
    verbose_name = "Blog"

    def ready(self):
        """Connect signal handlers."""
        from . import signals  # noqa: F401
