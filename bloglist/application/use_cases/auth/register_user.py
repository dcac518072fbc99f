# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.validation import validate_password, validate_username
from ....core.security import DEFAULT_BCRYPT_ROUNDS, hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self.user_repository = user_repository
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Length rules are checked before hashing or touching the store, so a
        rejected request leaves the store unchanged.

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If username or password is too short
            DuplicateKeyError: If the username is already taken
        """
        validate_username(request.username).raise_if_invalid()
        validate_password(request.password).raise_if_invalid()

        # Hash password
        password_hash = hash_password(request.password, rounds=self.bcrypt_rounds)

        # Create domain user entity
        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            name=request.name,
            password_hash=password_hash,
        )

        # Uniqueness is enforced by the store
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.username} ({saved_user.id})")

        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            name=saved_user.name,
        )
