"""
Django admin configuration for blog_rpc.
"""
from django.contrib import admin
from django.utils.html import format_html

from .models import Category, Comment, Post, Profile, Reaction, Tag


class TagInline(admin.TabularInline):
    """Title-word tags of a post."""

    model = Tag
    extra = 0
    fields = ["tag_name"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["category_name", "post_count", "created_at"]
    search_fields = ["category_name"]
    readonly_fields = ["created_at"]


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = [
        "title_preview",
        "author",
        "category",
        "image_preview",
        "created_at",
    ]
    list_filter = ["category", "created_at"]
    search_fields = ["title", "subtitle", "body", "author__username"]
    raw_id_fields = ["author", "category"]
    date_hierarchy = "created_at"
    inlines = [TagInline]
    readonly_fields = ["id", "slug", "created_at", "updated_at"]

    fieldsets = (
        (None, {
            "fields": ("title", "subtitle", "body", "image", "author")
        }),
        ("Taxonomy", {
            "fields": ("category",)
        }),
        ("Metadata", {
            "fields": ("id", "slug", "created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    @admin.display(description="Title")
    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    @admin.display(description="Image")
    def image_preview(self, obj):
        if obj.image:
            return format_html(
                '<img src="{}" style="max-width: 50px; max-height: 50px;" />',
                obj.image,
            )
        return "-"


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "user", "post", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["body", "user__username", "post__title"]
    raw_id_fields = ["post", "user"]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(Reaction)
class ReactionAdmin(admin.ModelAdmin):
    list_display = ["user", "post", "type", "emoji", "created_at"]
    list_filter = ["type", "created_at"]
    search_fields = ["user__username", "post__title"]
    raw_id_fields = ["user", "post"]


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "gender", "image"]
    list_filter = ["gender"]
    search_fields = ["user__username", "user__email"]
    raw_id_fields = ["user"]
