"""
Tests for the server-rendered pages.
"""
import pytest
from django.urls import reverse

from blog_rpc.models import Comment, Post


class TestRouteProtection:
    @pytest.mark.parametrize("name,kwargs", [
        ("blog_rpc:post_list", {}),
        ("blog_rpc:post_create", {}),
        ("blog_rpc:category_posts", {"category_name": "FOOD"}),
        ("blog_rpc:author_posts", {"user_id": 1}),
    ])
    def test_anonymous_redirected_to_login(self, client, db, name, kwargs):
        url = reverse(name, kwargs=kwargs)
        response = client.get(url)
        assert response.status_code == 302
        assert response.url.startswith("/accounts/login/")

    def test_post_detail_protected(self, client, post):
        response = client.get(post.get_absolute_url())
        assert response.status_code == 302


class TestPostList:
    def test_lists_posts(self, auth_client, post):
        response = auth_client.get(reverse("blog_rpc:post_list"))
        assert response.status_code == 200
        assert list(response.context["posts"]) == [post]
        assert b"Test Post" in response.content
        assert b"Log out" in response.content

    def test_category_page(self, auth_client, post):
        response = auth_client.get(
            reverse("blog_rpc:category_posts", kwargs={"category_name": "TECHNOLOGY"})
        )
        assert response.status_code == 200
        assert list(response.context["posts"]) == [post]

    def test_unknown_category_404(self, auth_client):
        response = auth_client.get(
            reverse("blog_rpc:category_posts", kwargs={"category_name": "NOPE"})
        )
        assert response.status_code == 404

    def test_author_page(self, auth_client, post, other_user):
        response = auth_client.get(
            reverse("blog_rpc:author_posts", kwargs={"user_id": other_user.pk})
        )
        assert response.status_code == 200
        assert list(response.context["posts"]) == []


class TestPostDetail:
    def test_detail(self, auth_client, post, other_user):
        Comment.objects.create(post=post, user=other_user, body="Lovely")

        response = auth_client.get(post.get_absolute_url())

        assert response.status_code == 200
        assert response.context["can_edit"]
        assert b"Lovely" in response.content
        assert b"#Test" in response.content

    def test_category_links_in_navbar(self, auth_client, post):
        response = auth_client.get(post.get_absolute_url())
        content = response.content.decode()
        assert 'href="/blog/category/FOOD/"' in content
        assert 'href="/blog/category/TECHNOLOGY/"' in content

    def test_not_editable_by_others(self, client, post, other_user):
        client.force_login(other_user)
        response = client.get(post.get_absolute_url())
        assert not response.context["can_edit"]


class TestPostForms:
    def test_create(self, auth_client, user):
        response = auth_client.post(reverse("blog_rpc:post_create"), {
            "title": "From the page",
            "subtitle": "Sub",
            "body": "Body text",
            "image": "",
            "category": "LIFESTYLE",
        })

        post = Post.objects.get()
        assert response.status_code == 302
        assert response.url == post.get_absolute_url()
        assert post.author == user
        assert post.tags.count() == 3

    def test_create_invalid(self, auth_client):
        response = auth_client.post(reverse("blog_rpc:post_create"), {"title": "x"})
        assert response.status_code == 200
        assert response.context["form"].errors
        assert not Post.objects.exists()

    def test_edit_prefilled(self, auth_client, post):
        response = auth_client.get(reverse("blog_rpc:post_update", kwargs={"pk": post.pk}))
        assert response.status_code == 200
        assert response.context["form"].initial["category"] == "TECHNOLOGY"

    def test_edit(self, auth_client, post):
        auth_client.post(reverse("blog_rpc:post_update", kwargs={"pk": post.pk}), {
            "title": "Edited",
            "subtitle": "New sub",
            "body": "New body",
            "image": "",
            "category": "SCIENCE",
        })
        post.refresh_from_db()
        assert post.title == "Edited"
        assert post.category.category_name == "SCIENCE"

    def test_edit_forbidden_for_others(self, client, post, other_user):
        client.force_login(other_user)
        response = client.get(reverse("blog_rpc:post_update", kwargs={"pk": post.pk}))
        assert response.status_code == 403

    def test_delete(self, auth_client, post, user):
        Comment.objects.create(post=post, user=user, body="Gone soon")

        response = auth_client.post(reverse("blog_rpc:post_delete", kwargs={"pk": post.pk}))

        assert response.status_code == 302
        assert response.url == reverse("blog_rpc:post_list")
        assert not Post.objects.exists()
        assert not Comment.objects.exists()

    def test_delete_forbidden_for_others(self, client, post, other_user):
        client.force_login(other_user)
        response = client.post(reverse("blog_rpc:post_delete", kwargs={"pk": post.pk}))
        assert response.status_code == 403
        assert Post.objects.exists()
