# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    BlogProvider,
    DatabaseProvider,
    RepositoryProvider,
    SecurityProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Security services (SecurityProvider) - depends on repositories and settings
    4. Use cases (AuthProvider, BlogProvider) - depend on all of the above
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → security → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        register_application(self)


def register_application(container: BaseContainer) -> None:
    """
    Register everything above the repository layer.

    Expects UserRepository and BlogRepository to be registered already, which
    lets tests supply in-memory repositories.
    """
    SecurityProvider.register(container)
    AuthProvider.register(container)
    BlogProvider.register(container)


# Global container instance (singleton pattern)
_container: Optional[BaseContainer] = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        Container with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[BaseContainer]) -> None:
    """Replace the global container; None resets it to be rebuilt lazily"""
    global _container
    _container = container
