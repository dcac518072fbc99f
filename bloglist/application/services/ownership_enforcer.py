# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...core.security import TokenAuthority
from ...domain.exceptions import AuthorizationError, TokenError
from ...domain.models.blog import Blog
from ...domain.models.token import Identity
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class OwnershipEnforcer:
    """Authenticates bearer tokens and checks blog ownership before writes"""

    def __init__(self, token_authority: TokenAuthority, user_repository: UserRepository) -> None:
        self.token_authority = token_authority
        self.user_repository = user_repository

    async def authenticate(self, token: Optional[str]) -> Identity:
        """
        Resolve the caller from a bearer token

        Args:
            token: Raw token taken from the Authorization header, None if
                the request carried none

        Returns:
            Identity of the caller

        Raises:
            TokenError: If the token is missing, invalid or expired, or its
                subject no longer exists
        """
        if token is None or not token.strip():
            raise TokenError(TokenError.MISSING)

        claims = self.token_authority.verify(token.strip())

        user = await self.user_repository.find_by_id(claims.subject_id)
        if user is None or user.id is None:
            logger.warning(f"Token subject {claims.subject_id} does not exist")
            raise TokenError(TokenError.INVALID)

        return Identity(id=user.id, username=user.username)

    @staticmethod
    def authorize_mutation(identity: Identity, blog: Blog) -> None:
        """
        Ensure the caller owns the blog about to be changed

        Must be called after the blog was fetched and before any write.

        Raises:
            AuthorizationError: If the caller is not the owner
        """
        if blog.owner is None or blog.owner != identity.id:
            logger.warning(f"User {identity.id} denied write access to blog {blog.id}")
            raise AuthorizationError()
