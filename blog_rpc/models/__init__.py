"""
Models for django-blog-rpc.

All models are importable from blog_rpc.models:

    from blog_rpc.models import Post, Category, Tag, Comment, Reaction
"""
from .posts import Category, Tag, Post, build_slug, title_words
from .comments import Comment, Reaction
from .profiles import Profile, display_name, get_profile

__all__ = [
    # Posts
    "Category",
    "Tag",
    "Post",
    "build_slug",
    "title_words",
    # Comments
    "Comment",
    "Reaction",
    # Profiles
    "Profile",
    "display_name",
    "get_profile",
]
