"""
JSON projections of blog_rpc models.

Keys use the camelCase names of the public API (``createdAt``, ``_count``).
"""
from .models import display_name, get_profile


def user_to_dict(user, fields=("id", "name", "email", "image")):
    profile = get_profile(user)
    values = {
        "id": user.pk,
        "name": display_name(user),
        "email": user.email,
        "image": profile.image if profile and profile.image else None,
        "gender": profile.gender if profile and profile.gender else None,
    }
    return {field: values[field] for field in fields}


def category_to_dict(category):
    if category is None:
        return None
    return {
        "id": category.pk,
        "category_name": category.category_name,
    }


def counts_to_dict(post):
    """Return ``_count`` from annotated comment and reaction counts."""
    return {
        "comment": post.comment_count,
        "reaction": post.reaction_count,
    }


def post_to_dict(post, include_category=False):
    data = {
        "id": post.pk,
        "title": post.title,
        "subtitle": post.subtitle,
        "slug": post.slug,
        "body": post.body,
        "image": post.image,
        "authorId": post.author_id,
        "categoryId": post.category_id,
        "createdAt": post.created_at,
        "updatedAt": post.updated_at,
    }
    if include_category:
        data["category"] = category_to_dict(post.category)
    return data


def post_summary(post):
    """List projection used by the feeds."""
    return {
        "id": post.pk,
        "image": post.image,
        "title": post.title,
        "subtitle": post.subtitle,
        "createdAt": post.created_at,
        "category": category_to_dict(post.category),
        "_count": counts_to_dict(post),
    }


def post_with_counts(post):
    data = post_to_dict(post)
    data["_count"] = counts_to_dict(post)
    return data


def post_detail(post):
    """Single post with its author and reactions."""
    data = post_to_dict(post)
    data["user"] = user_to_dict(
        post.author, fields=("id", "name", "email", "image", "gender")
    )
    data["reaction"] = [
        {
            "type": reaction.type,
            "user": user_to_dict(reaction.user, fields=("id", "image", "name")),
        }
        for reaction in post.reactions.all()
    ]
    return data


def comment_to_dict(comment):
    return {
        "id": comment.pk,
        "body": comment.body,
        "postId": comment.post_id,
        "createdAt": comment.created_at,
        "user": user_to_dict(comment.user, fields=("id", "name", "image")),
    }
