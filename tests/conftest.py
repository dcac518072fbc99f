"""
Shared pytest fixtures for blog list tests.
"""
import itertools
from typing import Any, Dict, Iterable, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from bloglist.core.config import Settings
from bloglist.core.security import TokenAuthority, hash_password
from bloglist.domain.exceptions import DuplicateKeyError
from bloglist.domain.models.blog import Blog
from bloglist.domain.models.user import User
from bloglist.domain.repositories.blog_repository import BlogRepository
from bloglist.domain.repositories.user_repository import UserRepository

TEST_SECRET = "test_jwt_secret"
# Lowest cost bcrypt accepts; keeps tests fast
TEST_BCRYPT_ROUNDS = 4


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, enforcing username uniqueness like the unique index"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        return {user_id: self.users[user_id] for user_id in user_ids if user_id in self.users}

    async def find_all(self) -> List[User]:
        return list(self.users.values())

    async def save(self, user: User) -> User:
        if await self.find_by_username(user.username) is not None:
            raise DuplicateKeyError("username")
        saved = User(
            id=str(ObjectId()),
            username=user.username,
            name=user.name,
            password_hash=user.password_hash,
        )
        self.users[saved.id] = saved
        return saved


class InMemoryBlogRepository(BlogRepository):
    """BlogRepository backed by an insertion-ordered dict"""

    def __init__(self) -> None:
        self.blogs: Dict[str, Blog] = {}
        self._ids = itertools.count(1)

    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        return self.blogs.get(blog_id)

    async def find_all(self) -> List[Blog]:
        return list(self.blogs.values())

    async def create(self, blog: Blog) -> Blog:
        saved = Blog(
            id=f"blog-{next(self._ids)}",
            title=blog.title,
            url=blog.url,
            owner=blog.owner,
            author=blog.author,
            likes=blog.likes,
        )
        self.blogs[saved.id] = saved
        return saved

    async def update_owned(self, blog_id: str, owner_id: str, changes: Dict[str, Any]) -> Optional[Blog]:
        blog = self.blogs.get(blog_id)
        if blog is None or blog.owner != owner_id:
            return None
        for field, value in changes.items():
            setattr(blog, field, value)
        return blog

    async def delete_owned(self, blog_id: str, owner_id: str) -> bool:
        blog = self.blogs.get(blog_id)
        if blog is None or blog.owner != owner_id:
            return False
        del self.blogs[blog_id]
        return True


@pytest.fixture
def mock_settings():
    """Settings stand-in with test values"""
    mock = MagicMock(spec=Settings)
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_bloglist"
    mock.jwt_secret_key = TEST_SECRET
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = TEST_BCRYPT_ROUNDS
    mock.log_level = "INFO"
    mock.cors_origins = []
    return mock


@pytest.fixture
def token_authority():
    return TokenAuthority(secret_key=TEST_SECRET, algorithm="HS256", ttl_seconds=3600)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_blog_repo():
    """Mock BlogRepository with async methods."""
    return AsyncMock(spec=BlogRepository)


@pytest.fixture
def user_store():
    return InMemoryUserRepository()


@pytest.fixture
def blog_store():
    return InMemoryBlogRepository()


def _make_user(user_id: str = "665f1c2e9b1e8a3d4c5b6a70", username: str = "root",
               name: str = "Superuser", password: str = "sekret") -> User:
    return User(
        id=user_id,
        username=username,
        name=name,
        password_hash=hash_password(password, rounds=TEST_BCRYPT_ROUNDS),
    )


def _make_blog(blog_id: str = "blog-1", owner: str = "665f1c2e9b1e8a3d4c5b6a70",
               likes: int = 0, title: str = "React patterns") -> Blog:
    return Blog(
        id=blog_id,
        title=title,
        url="https://reactpatterns.com/",
        owner=owner,
        author="Michael Chan",
        likes=likes,
    )


@pytest.fixture
def make_user():
    """Factory for User entities with a real (cheap) bcrypt hash"""
    return _make_user


@pytest.fixture
def make_blog():
    """Factory for Blog entities"""
    return _make_blog
