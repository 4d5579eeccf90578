"""
Input forms for django-blog-rpc.

Forms validate both procedure input (decoded JSON) and the HTML pages.
Field names follow the JSON API, hence ``userId`` and ``postId``.
"""
from django import forms

from .conf import blog_settings


def category_choices():
    return blog_settings.CATEGORY_CHOICES


def reaction_choices():
    return blog_settings.REACTION_CHOICES


class CreateNewBlogForm(forms.Form):
    """Create a post."""

    title = forms.CharField(max_length=blog_settings.TITLE_MAX_LENGTH)
    subtitle = forms.CharField(max_length=blog_settings.SUBTITLE_MAX_LENGTH)
    body = forms.CharField(
        min_length=blog_settings.BODY_MIN_LENGTH,
        widget=forms.Textarea,
    )
    image = forms.URLField(max_length=500, required=False)
    category = forms.ChoiceField(choices=category_choices)


class UpdateBlogForm(forms.Form):
    """
    Partially update a post.

    Only the fields present in the submitted data end up in
    ``cleaned_data`` (``id`` is always there).
    """

    OPTIONAL_FIELDS = ("title", "subtitle", "body", "image", "category")

    id = forms.UUIDField()
    title = forms.CharField(max_length=blog_settings.TITLE_MAX_LENGTH, required=False)
    subtitle = forms.CharField(
        max_length=blog_settings.SUBTITLE_MAX_LENGTH,
        required=False,
    )
    body = forms.CharField(min_length=blog_settings.BODY_MIN_LENGTH, required=False)
    image = forms.URLField(max_length=500, required=False)
    category = forms.ChoiceField(choices=category_choices, required=False)

    def clean(self):
        cleaned_data = super().clean()
        for field in ("title", "subtitle", "body", "category"):
            if field in self.data and field not in self.errors and not cleaned_data.get(field):
                self.add_error(field, "This field cannot be blank.")
        return {
            name: value
            for name, value in cleaned_data.items()
            if name == "id" or name in self.data
        }


class PostIdForm(forms.Form):
    id = forms.UUIDField()


class CategoryFilterForm(forms.Form):
    category_name = forms.ChoiceField(choices=category_choices)


class UserIdForm(forms.Form):
    userId = forms.IntegerField(min_value=1, max_value=2**63 - 1)


class CommentForm(forms.Form):
    postId = forms.UUIDField()
    body = forms.CharField(max_length=blog_settings.COMMENT_MAX_LENGTH, strip=True)


class CommentListForm(forms.Form):
    postId = forms.UUIDField()


class ReactionForm(forms.Form):
    postId = forms.UUIDField()
    type = forms.ChoiceField(choices=reaction_choices, required=False)

    def clean_type(self):
        return self.cleaned_data["type"] or "LIKE"
