"""
Configuration settings for django-blog-rpc.

Override these in your Django settings.py:

    BLOG_RPC = {
        'CATEGORY_PAGE_SIZE': 10,
        'FALLBACK_IMAGE_URL': 'https://example.com/avatar.svg',
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Categories a post can be filed under
    "CATEGORY_CHOICES": [
        ("TECHNOLOGY", "Technology"),
        ("PROGRAMMING", "Programming"),
        ("SCIENCE", "Science"),
        ("LIFESTYLE", "Lifestyle"),
        ("TRAVEL", "Travel"),
        ("FOOD", "Food"),
        ("HEALTH", "Health"),
        ("BUSINESS", "Business"),
        ("ENTERTAINMENT", "Entertainment"),
        ("SPORTS", "Sports"),
    ],
    "CATEGORY_PAGE_SIZE": 10,

    # Posts
    "TITLE_MAX_LENGTH": 255,
    "SUBTITLE_MAX_LENGTH": 255,
    "BODY_MIN_LENGTH": 1,

    # Comments
    "COMMENT_MAX_LENGTH": 5000,

    # Reactions
    "REACTION_TYPES": [
        ("LIKE", "Like", "👍"),
        ("LOVE", "Love", "❤️"),
        ("HAHA", "Haha", "😂"),
        ("WOW", "Wow", "😮"),
        ("SAD", "Sad", "😢"),
        ("ANGRY", "Angry", "😠"),
    ],

    # UI
    "FALLBACK_IMAGE_URL": "https://api.dicebear.com/6.x/adventurer-neutral/svg?seed=Tigger",

    # Debug logging of procedure payloads
    "LOG_PROCEDURE_INPUT": False,
}


class BlogRpcSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_rpc.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_rpc setting: {name}")

        user_settings = getattr(settings, "BLOG_RPC", {})
        return user_settings.get(name, DEFAULTS[name])

    @property
    def CATEGORY_NAMES(self):
        """Return the stored values of the category choices."""
        return [value for value, _label in self.CATEGORY_CHOICES]

    @property
    def REACTION_CHOICES(self):
        """Return reaction types as (value, label) pairs."""
        return [(r[0], r[1]) for r in self.REACTION_TYPES]


blog_settings = BlogRpcSettings()
