"""
Blog post procedures.

All procedures require an authenticated session.
"""
import logging

from ..conf import blog_settings
from ..forms import (
    CategoryFilterForm,
    CreateNewBlogForm,
    PostIdForm,
    UpdateBlogForm,
    UserIdForm,
)
from ..models import Post
from ..rpc import RpcError, Router
from ..serializers import post_detail, post_summary, post_to_dict, post_with_counts

logger = logging.getLogger(__name__)

blog_router = Router()


def feed_queryset():
    return Post.objects.with_counts().select_related("category").order_by("-created_at")


def get_own_post(ctx, post_id, missing_code):
    """Fetch a post the caller authored, raising RpcError otherwise."""
    post = Post.objects.filter(pk=post_id).first()
    if post is None:
        raise RpcError(missing_code, "Blog not found")
    if not post.is_authored_by(ctx.user):
        raise RpcError("FORBIDDEN", "Only the author can change this blog")
    return post


# [POST]
@blog_router.mutation("createNewBlog", input=CreateNewBlogForm)
def create_new_blog(ctx, data):
    if blog_settings.LOG_PROCEDURE_INPUT:
        logger.debug("createNewBlog input: %r", data)

    post = Post.objects.create_post(
        author=ctx.user,
        title=data["title"],
        subtitle=data["subtitle"],
        body=data["body"],
        image=data["image"],
        category=data["category"],
    )
    logger.info("User %s created blog %s", ctx.user.pk, post.pk)
    return {
        "status": 201,
        "data": {
            "post": post_to_dict(post, include_category=True),
        },
    }


# [GET]
@blog_router.query("getAllBlogs")
def get_all_blogs(ctx):
    blogs = feed_queryset()
    return {
        "status": 200,
        "data": [post_summary(post) for post in blogs],
    }


# [GET] by category
@blog_router.query("getBlogsByCategory", input=CategoryFilterForm)
def get_blogs_by_category(ctx, data):
    blogs = feed_queryset().in_category(data["category_name"])
    blogs = blogs[:blog_settings.CATEGORY_PAGE_SIZE]
    return {
        "status": 200,
        "data": [post_summary(post) for post in blogs],
    }


# [GET] one blog by id
@blog_router.query("getBlogById", input=PostIdForm)
def get_blog_by_id(ctx, data):
    blog = (
        Post.objects.filter(pk=data["id"])
        .select_related("author", "author__blog_profile")
        .prefetch_related("reactions__user__blog_profile")
        .first()
    )
    return {
        "status": 200,
        "data": post_detail(blog) if blog else None,
    }


# [GET] blogs by author
@blog_router.query("getBlogByUserId", input=UserIdForm)
def get_blog_by_user_id(ctx, data):
    blogs = Post.objects.with_counts().by_author(data["userId"]).order_by("-created_at")
    return {
        "status": 200,
        "message": "BLOGS FOUND SUCCESSFULLY",
        "data": [post_with_counts(post) for post in blogs],
    }


# [UPDATE] blog by id
@blog_router.mutation("updateBlogById", input=UpdateBlogForm)
def update_blog_by_id(ctx, data):
    changes = dict(data)
    post = get_own_post(ctx, changes.pop("id"), missing_code="NOT_FOUND")
    post.apply_changes(changes)
    logger.info("User %s updated blog %s (%s)", ctx.user.pk, post.pk, ", ".join(changes))
    return {
        "status": 201,
        "data": post_to_dict(post),
        "message": "BLOG UPDATED SUCCESSFULLY",
    }


# [DELETE] blog by id
@blog_router.mutation("deleteBlogByBlogId", input=PostIdForm)
def delete_blog_by_blog_id(ctx, data):
    post = get_own_post(ctx, data["id"], missing_code="BAD_REQUEST")
    # Comments, reactions and tags go with the post (on_delete=CASCADE)
    post.delete()
    logger.info("User %s deleted blog %s", ctx.user.pk, data["id"])
    return {
        "status": 201,
        "message": "BLOG DELETED SUCCESSFULLY",
    }
