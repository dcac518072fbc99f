from typing import TYPE_CHECKING
from ...core.config import Settings, get_settings
from ...core.security import TokenAuthority
from ...domain.repositories.user_repository import UserRepository
from ...application.services.ownership_enforcer import OwnershipEnforcer

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Security provider - registers the token authority and ownership enforcer"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register security services as singletons.
        Settings are taken from the container when present, so tests can
        supply their own.
        """
        if not container.is_registered(Settings):
            container.register_singleton(Settings, get_settings())
        settings = container.get(Settings)

        token_authority = TokenAuthority(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            ttl_seconds=settings.access_token_expire_minutes * 60,
        )
        container.register_singleton(TokenAuthority, token_authority)

        container.register_singleton(
            OwnershipEnforcer,
            OwnershipEnforcer(
                token_authority=token_authority,
                user_repository=container.get(UserRepository),
            )
        )
