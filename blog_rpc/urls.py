"""
URL configuration for django-blog-rpc.

Include in your project urls.py:

    path('blog/', include('blog_rpc.urls')),

Procedures are served under ``api/``, e.g. ``/blog/api/blog.getAllBlogs``.
"""
from django.urls import path

from . import views
from .routers import app_router
from .rpc import RpcView

app_name = "blog_rpc"

urlpatterns = [
    # Pages
    path("", views.PostListView.as_view(), name="post_list"),
    path("post/new/", views.PostCreateView.as_view(), name="post_create"),
    path("post/<uuid:pk>/", views.PostDetailView.as_view(), name="post_detail"),
    path("post/<uuid:pk>/edit/", views.PostUpdateView.as_view(), name="post_update"),
    path("post/<uuid:pk>/delete/", views.PostDeleteView.as_view(), name="post_delete"),
    path(
        "category/<str:category_name>/",
        views.CategoryPostListView.as_view(),
        name="category_posts",
    ),
    path("author/<int:user_id>/", views.AuthorPostListView.as_view(), name="author_posts"),

    # Procedures
    path("api/<str:name>", RpcView.as_view(router=app_router), name="rpc"),
]
