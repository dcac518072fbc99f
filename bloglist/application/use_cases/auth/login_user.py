# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthenticationError
from ....core.security import TokenAuthority, verify_password
from ...dto.auth_dto import UserLoginRequest, LoginResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid username or password"


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a bearer token"""

    def __init__(self, user_repository: UserRepository, token_authority: TokenAuthority) -> None:
        self.user_repository = user_repository
        self.token_authority = token_authority

    async def execute(self, request: UserLoginRequest) -> LoginResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username and password

        Returns:
            LoginResponse with the token and public profile

        Raises:
            AuthenticationError: Unknown user or wrong password (same message
                for both)
        """
        user = await self.user_repository.find_by_username(request.username)
        if user is None or not verify_password(request.password, user.password_hash):
            logger.info(f"Failed login attempt for username {request.username!r}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.token_authority.sign(subject_id=user.id or "", username=user.username)

        return LoginResponse(token=token, username=user.username, name=user.name)
