"""
Post, Category, and Tag models for django-blog-rpc.
"""
import uuid

from django.conf import settings
from django.db import models, transaction
from django.urls import reverse
from django.utils import timezone

from ..conf import blog_settings


def title_words(title):
    """Split a title on single spaces, dropping empty words."""
    return [word for word in title.split(" ") if word]


def build_slug(title, now=None):
    """
    Build a post slug from its title.

    The title words are joined with hyphens and suffixed with the creation
    time in epoch milliseconds, e.g. ``Hello-World-1700000000000``.
    """
    now = now or timezone.now()
    millis = int(now.timestamp() * 1000)
    return "-".join(title_words(title)) + "-" + str(millis)


class Category(models.Model):
    """
    Category for organizing posts.

    Categories are created on demand the first time a post is filed
    under a name.
    """

    category_name = models.CharField(
        max_length=50,
        unique=True,
        choices=blog_settings.CATEGORY_CHOICES,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["category_name"]
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.get_category_name_display()

    def get_absolute_url(self):
        return reverse("blog_rpc:category_posts", kwargs={"category_name": self.category_name})

    @property
    def post_count(self):
        """Return count of posts in this category."""
        return self.posts.count()


class PostQuerySet(models.QuerySet):
    def with_counts(self):
        """Annotate comment and reaction counts."""
        return self.annotate(
            comment_count=models.Count("comments", distinct=True),
            reaction_count=models.Count("reactions", distinct=True),
        )

    def by_author(self, user_id):
        return self.filter(author_id=user_id)

    def in_category(self, category_name):
        return self.filter(category__category_name=category_name)


class PostManager(models.Manager.from_queryset(PostQuerySet)):
    def create_post(self, author, title, subtitle, body, category, image=None):
        """
        Create a post, its category (if new) and one tag per title word.

        Returns the created Post.
        """
        with transaction.atomic():
            category_obj, _ = Category.objects.get_or_create(category_name=category)
            post = self.create(
                title=title,
                subtitle=subtitle,
                body=body,
                image=image or None,
                author=author,
                category=category_obj,
                slug=build_slug(title),
            )
            Tag.objects.bulk_create(
                [Tag(post=post, tag_name=word) for word in title_words(title)]
            )
        return post


class Post(models.Model):
    """
    Blog post.

    Deleting a post removes its tags, comments and reactions.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=blog_settings.TITLE_MAX_LENGTH)
    subtitle = models.CharField(max_length=blog_settings.SUBTITLE_MAX_LENGTH)
    slug = models.CharField(max_length=320, db_index=True)
    body = models.TextField()
    image = models.URLField(max_length=500, null=True, blank=True)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_posts",
    )
    category = models.ForeignKey(
        Category,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="posts",
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostManager()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["author", "-created_at"]),
        ]

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("blog_rpc:post_detail", kwargs={"pk": self.pk})

    @property
    def preview(self):
        """Return truncated body for list display."""
        if len(self.body) > 280:
            return self.body[:280] + "..."
        return self.body

    def is_authored_by(self, user):
        return user.is_authenticated and user.pk == self.author_id

    def apply_changes(self, changes):
        """
        Update only the supplied fields.

        ``changes`` may contain title, subtitle, body, image and category
        (a category name, connected or created on demand).
        """
        update_fields = ["updated_at"]
        for field in ("title", "subtitle", "body"):
            if field in changes:
                setattr(self, field, changes[field])
                update_fields.append(field)
        if "image" in changes:
            self.image = changes["image"] or None
            update_fields.append("image")
        if "category" in changes:
            self.category, _ = Category.objects.get_or_create(
                category_name=changes["category"]
            )
            update_fields.append("category")
        self.save(update_fields=update_fields)
        return self


class Tag(models.Model):
    """
    Tag attached to a single post.

    One tag is created per word of the post title.
    """

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name="tags",
    )
    tag_name = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.tag_name
