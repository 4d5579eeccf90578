"""Session procedures."""
from ..rpc import Router
from ..serializers import user_to_dict

auth_router = Router()


@auth_router.query("getSession", protected=False)
def get_session(ctx):
    if not ctx.user.is_authenticated:
        return {"user": None}
    return {"user": user_to_dict(ctx.user)}
