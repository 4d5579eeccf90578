"""Reaction procedures."""
from ..forms import ReactionForm
from ..models import Post, Reaction
from ..rpc import RpcError, Router

reaction_router = Router()


@reaction_router.mutation("toggleReaction", input=ReactionForm)
def toggle_reaction(ctx, data):
    post = Post.objects.filter(pk=data["postId"]).first()
    if post is None:
        raise RpcError("NOT_FOUND", "Blog not found")

    reaction, action = Reaction.toggle(post, ctx.user, data["type"])
    return {
        "status": 201 if action == "created" else 200,
        "data": {
            "action": action,
            "type": reaction.type if reaction else None,
            "total_reactions": post.reactions.count(),
        },
    }
