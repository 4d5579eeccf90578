"""
Author profile for django-blog-rpc.
"""
from django.conf import settings
from django.db import models


class Profile(models.Model):
    """
    Extra author details shown next to posts.

    Created automatically for every user (see ``blog_rpc.signals``).
    """

    GENDER_CHOICES = [
        ("Male", "Male"),
        ("Female", "Female"),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_profile",
    )
    image = models.URLField(max_length=500, blank=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True)

    def __str__(self):
        return f"Profile of {self.user}"


def display_name(user):
    """Return the full name of a user, falling back to the username."""
    return user.get_full_name() or user.get_username()


def get_profile(user):
    """Return the user's profile, or None if it has not been created."""
    try:
        return user.blog_profile
    except Profile.DoesNotExist:
        return None
