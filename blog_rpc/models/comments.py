"""
Comment and Reaction models for django-blog-rpc.
"""
from django.conf import settings
from django.db import models

from ..conf import blog_settings


class Comment(models.Model):
    """Comment on a post."""

    post = models.ForeignKey(
        "blog_rpc.Post",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_comments",
    )
    body = models.TextField(max_length=blog_settings.COMMENT_MAX_LENGTH)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["post", "created_at"]),
        ]

    def __str__(self):
        return f"Comment by {self.user} on {self.post}"

    @property
    def preview(self):
        """Return truncated body for admin display."""
        if len(self.body) > 100:
            return self.body[:100] + "..."
        return self.body


class Reaction(models.Model):
    """A user's reaction to a post; at most one per (post, user)."""

    post = models.ForeignKey(
        "blog_rpc.Post",
        on_delete=models.CASCADE,
        related_name="reactions",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_reactions",
    )
    type = models.CharField(
        max_length=20,
        choices=blog_settings.REACTION_CHOICES,
        default="LIKE",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ["post", "user"]
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.user} reacted {self.type} to {self.post}"

    @property
    def emoji(self):
        symbols = {value: symbol for value, _label, symbol in blog_settings.REACTION_TYPES}
        return symbols.get(self.type, "")

    @classmethod
    def toggle(cls, post, user, reaction_type="LIKE"):
        """
        Add, switch or withdraw ``user``'s reaction on ``post``.

        Sending the reaction the user already has withdraws it. Returns
        ``(reaction, action)`` where action is "created", "changed" or
        "removed" (reaction is None when removed).
        """
        reaction = cls.objects.filter(post=post, user=user).first()
        if reaction is None:
            return cls.objects.create(post=post, user=user, type=reaction_type), "created"
        if reaction.type == reaction_type:
            reaction.delete()
            return None, "removed"
        reaction.type = reaction_type
        reaction.save(update_fields=["type"])
        return reaction, "changed"
