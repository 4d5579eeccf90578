"""Comment procedures."""
import logging

from ..forms import CommentForm, CommentListForm
from ..models import Comment, Post
from ..rpc import RpcError, Router
from ..serializers import comment_to_dict

logger = logging.getLogger(__name__)

comment_router = Router()


@comment_router.mutation("createComment", input=CommentForm)
def create_comment(ctx, data):
    post = Post.objects.filter(pk=data["postId"]).first()
    if post is None:
        raise RpcError("NOT_FOUND", "Blog not found")

    comment = Comment.objects.create(post=post, user=ctx.user, body=data["body"])
    logger.info("User %s commented on blog %s", ctx.user.pk, post.pk)
    return {
        "status": 201,
        "data": comment_to_dict(comment),
    }


@comment_router.query("getCommentsByBlogId", input=CommentListForm)
def get_comments_by_blog_id(ctx, data):
    comments = (
        Comment.objects.filter(post_id=data["postId"])
        .select_related("user", "user__blog_profile")
        .order_by("-created_at")
    )
    return {
        "status": 200,
        "data": [comment_to_dict(comment) for comment in comments],
    }
