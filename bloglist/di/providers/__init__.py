from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .security_provider import SecurityProvider
from .auth_provider import AuthProvider
from .blog_provider import BlogProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "SecurityProvider",
    "AuthProvider",
    "BlogProvider",
]
