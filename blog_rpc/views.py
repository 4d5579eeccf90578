"""
Page views for django-blog-rpc.

Every page requires a signed-in user; anonymous visitors are sent to
``settings.LOGIN_URL``.
"""
import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.views.generic import DeleteView, DetailView, FormView, ListView

from .conf import blog_settings
from .forms import CreateNewBlogForm
from .models import Category, Comment, Post, Reaction

logger = logging.getLogger(__name__)


class PostListView(LoginRequiredMixin, ListView):
    """List all posts, newest first."""

    template_name = "blog_rpc/post_list.html"
    context_object_name = "posts"

    def get_queryset(self):
        return (
            Post.objects.with_counts()
            .select_related("author", "author__blog_profile", "category")
            .order_by("-created_at")
        )


class CategoryPostListView(PostListView):
    """Latest posts in a category."""

    template_name = "blog_rpc/category_posts.html"

    def get_queryset(self):
        self.category_name = self.kwargs["category_name"]
        if self.category_name not in blog_settings.CATEGORY_NAMES:
            raise Http404("Unknown category")
        qs = super().get_queryset().in_category(self.category_name)
        return qs[:blog_settings.CATEGORY_PAGE_SIZE]

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["category"] = Category(category_name=self.category_name)
        return context


class AuthorPostListView(PostListView):
    """List posts by a specific author."""

    template_name = "blog_rpc/author_posts.html"

    def get_queryset(self):
        User = get_user_model()
        self.author = get_object_or_404(User, pk=self.kwargs["user_id"])
        return super().get_queryset().by_author(self.author.pk)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["author"] = self.author
        return context


class PostDetailView(LoginRequiredMixin, DetailView):
    """Display a single post with its comments and reactions."""

    template_name = "blog_rpc/post_detail.html"
    context_object_name = "post"

    def get_queryset(self):
        return Post.objects.select_related(
            "author", "author__blog_profile", "category"
        ).prefetch_related("tags")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["comments"] = Comment.objects.filter(post=self.object).select_related(
            "user", "user__blog_profile"
        )
        context["reactions"] = Reaction.objects.filter(post=self.object).select_related(
            "user"
        )
        context["reaction_types"] = blog_settings.REACTION_TYPES
        context["can_edit"] = self.object.is_authored_by(self.request.user)
        return context


class PostCreateView(LoginRequiredMixin, FormView):
    """Create a new post."""

    template_name = "blog_rpc/post_form.html"
    form_class = CreateNewBlogForm

    def form_valid(self, form):
        data = form.cleaned_data
        post = Post.objects.create_post(author=self.request.user, **data)
        logger.info("User %s created blog %s", self.request.user.pk, post.pk)
        return redirect(post.get_absolute_url())


class AuthorOnlyMixin:
    """Restrict a single-post view to the post's author."""

    def get_post(self):
        post = get_object_or_404(Post, pk=self.kwargs["pk"])
        if not post.is_authored_by(self.request.user):
            raise PermissionDenied
        return post


class PostUpdateView(LoginRequiredMixin, AuthorOnlyMixin, FormView):
    """Edit an existing post."""

    template_name = "blog_rpc/post_form.html"
    form_class = CreateNewBlogForm

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            self.object = self.get_post()
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        post = self.object
        return {
            "title": post.title,
            "subtitle": post.subtitle,
            "body": post.body,
            "image": post.image or "",
            "category": post.category.category_name if post.category else None,
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["post"] = self.object
        return context

    def form_valid(self, form):
        self.object.apply_changes(form.cleaned_data)
        logger.info("User %s updated blog %s", self.request.user.pk, self.object.pk)
        return redirect(self.object.get_absolute_url())


class PostDeleteView(LoginRequiredMixin, AuthorOnlyMixin, DeleteView):
    """Delete a post along with its comments."""

    template_name = "blog_rpc/post_confirm_delete.html"
    context_object_name = "post"
    success_url = reverse_lazy("blog_rpc:post_list")

    def get_object(self, queryset=None):
        return self.get_post()
