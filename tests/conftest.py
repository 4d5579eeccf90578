"""
Shared fixtures for django-blog-rpc tests.
"""
import json

import pytest
from django.contrib.auth import get_user_model
from django.test import Client
from django.urls import reverse

from blog_rpc.models import Post

User = get_user_model()


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
        first_name="Test",
        last_name="User",
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        username="other",
        email="other@example.com",
        password="pass",
    )


@pytest.fixture
def post(db, user):
    """Create a test post."""
    return Post.objects.create_post(
        author=user,
        title="Test Post",
        subtitle="A subtitle",
        body="This is a test post body.",
        category="TECHNOLOGY",
    )


@pytest.fixture
def auth_client(client, user):
    """Client with a signed-in session for ``user``."""
    client.force_login(user)
    return client


class RpcCaller:
    """Call procedures over HTTP the way a browser client would."""

    def __init__(self, client):
        self.client = client

    def url(self, name):
        return reverse("blog_rpc:rpc", kwargs={"name": name})

    def query(self, name, data=None):
        params = {"input": json.dumps(data)} if data is not None else {}
        return self.client.get(self.url(name), params)

    def mutation(self, name, data=None):
        return self.client.post(
            self.url(name),
            data=json.dumps(data or {}),
            content_type="application/json",
        )


@pytest.fixture
def rpc(auth_client):
    return RpcCaller(auth_client)


@pytest.fixture
def anon_rpc(client, db):
    return RpcCaller(client)


@pytest.fixture
def other_rpc(other_user):
    """Procedure caller signed in as ``other_user``."""
    other_client = Client()
    other_client.force_login(other_user)
    return RpcCaller(other_client)
