"""
Tests for the blog_ui template tags.
"""
from django.template import Context, Template

from blog_rpc.templatetags.blog_ui import image_container

FALLBACK = "https://api.dicebear.com/6.x/adventurer-neutral/svg?seed=Tigger"


def render(template_string, **context):
    return Template("{% load blog_ui %}" + template_string).render(Context(context))


class TestImageContainer:
    def test_uses_image(self):
        context = image_container("https://example.com/cover.png", "cover")
        assert context["src"] == "https://example.com/cover.png"
        assert context["fallback"] == FALLBACK
        assert context["css_class"] == "cover"

    def test_empty_image_uses_fallback(self):
        assert image_container("")["src"] == FALLBACK
        assert image_container(None)["src"] == FALLBACK

    def test_fallback_setting(self, settings):
        settings.BLOG_RPC = {"FALLBACK_IMAGE_URL": "https://example.com/avatar.svg"}
        assert image_container("")["src"] == "https://example.com/avatar.svg"

    def test_renders_onerror_swap(self):
        html = render('{% image_container image "cover" %}', image="https://example.com/x.png")
        assert 'src="https://example.com/x.png"' in html
        assert "onerror=" in html
        assert "image-container cover" in html


class TestAuthorImage:
    def test_profile_image(self, db, user):
        user.blog_profile.image = "https://example.com/me.png"
        user.blog_profile.save()

        html = render('{% author_image author "avatar" %}', author=user)

        assert 'src="https://example.com/me.png"' in html
        assert 'alt="Profile Image"' in html

    def test_no_profile_image(self, db, user):
        html = render("{% author_image author %}", author=user)
        assert f'src="{FALLBACK}"' in html
