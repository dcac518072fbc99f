"""
Fixtures for API tests: the real application wired to in-memory repositories.
"""
import pytest
from fastapi.testclient import TestClient

from bloglist.core.config import Settings
from bloglist.di.base_container import BaseContainer
from bloglist.di.container import register_application, set_container
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.user_repository import UserRepository


@pytest.fixture
def test_container(mock_settings, user_store, blog_store):
    container = BaseContainer()
    container.register_singleton(Settings, mock_settings)
    container.register_singleton(UserRepository, user_store)
    container.register_singleton(BlogRepository, blog_store)
    register_application(container)
    return container


@pytest.fixture
def client(test_container):
    """Create test client backed by the in-memory container."""
    from bloglist.main import app

    set_container(test_container)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        set_container(None)


@pytest.fixture
def register(client):
    """Register a user through the API and return the response body"""
    def _register(username="root", name="Superuser", password="sekret"):
        response = client.post(
            "/api/users",
            json={"username": username, "name": name, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_header(client, register):
    """Register and log in a user, returning an Authorization header for them"""
    def _auth_header(username="root", password="sekret"):
        register(username=username, password=password)
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _auth_header
