"""
Template tags for django-blog-rpc pages.

    {% load blog_ui %}
    {% image_container post.image "h-48 w-full" %}
    {% author_image post.author "h-10 w-10" %}
    {% category_nav %}
"""
from django import template

from ..conf import blog_settings
from ..models import get_profile

register = template.Library()


@register.inclusion_tag("blog_rpc/includes/image_container.html")
def image_container(image, css_class="", alt="Image"):
    """
    Render an image inside a figure.

    Empty URLs render the fallback avatar straight away; broken URLs are
    swapped for it in the browser.
    """
    fallback = blog_settings.FALLBACK_IMAGE_URL
    return {
        "src": image or fallback,
        "fallback": fallback,
        "css_class": css_class,
        "alt": alt,
    }


@register.inclusion_tag("blog_rpc/includes/image_container.html")
def author_image(user, css_class=""):
    """Render a user's profile image, falling back to the avatar."""
    profile = get_profile(user)
    image = profile.image if profile else ""
    return image_container(image, css_class, alt="Profile Image")


@register.inclusion_tag("blog_rpc/includes/category_nav.html")
def category_nav():
    """Render links to every configured category."""
    return {"categories": blog_settings.CATEGORY_CHOICES}
