"""
django-blog-rpc - A Django blog with a typed remote-procedure API.

Features:
- Blog posts with on-demand categories and title-word tags
- Comments and per-user reactions
- JSON procedures (queries and mutations) behind session authentication
- Server-rendered pages with route protection and image fallbacks
"""

__version__ = "0.1.0"
