"""
Unit tests for the dependency injection container.
"""
import pytest
from bloglist.application.services.ownership_enforcer import OwnershipEnforcer
from bloglist.application.use_cases.blog.create_blog import CreateBlogUseCase
from bloglist.core.config import Settings
from bloglist.core.security import TokenAuthority
from bloglist.di.base_container import BaseContainer
from bloglist.di.container import register_application
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.user_repository import UserRepository


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="No dependency registered"):
            BaseContainer().get("missing")

    def test_singleton_is_shared(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is container.get("thing") is instance

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_later_registration_replaces_earlier(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        container.register_singleton("thing", 42)
        assert container.get("thing") == 42


class TestRegisterApplication:
    """Tests for wiring the application layer on top of given repositories"""

    def test_wires_security_and_use_cases(self, mock_settings, user_store, blog_store):
        container = BaseContainer()
        container.register_singleton(Settings, mock_settings)
        container.register_singleton(UserRepository, user_store)
        container.register_singleton(BlogRepository, blog_store)

        register_application(container)

        authority = container.get(TokenAuthority)
        assert authority.ttl_seconds == 3600
        assert container.get(OwnershipEnforcer).user_repository is user_store
        assert container.get(CreateBlogUseCase).blog_repository is blog_store
