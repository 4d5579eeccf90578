"""
Procedure routers for django-blog-rpc.

``app_router`` combines every router; procedures are addressed as
``blog.getAllBlogs``, ``comment.createComment`` and so on.
"""
from ..rpc import Router
from .auth import auth_router
from .blog import blog_router
from .comment import comment_router
from .reaction import reaction_router

app_router = Router.merge(
    auth=auth_router,
    blog=blog_router,
    comment=comment_router,
    reaction=reaction_router,
)

__all__ = ["app_router"]
