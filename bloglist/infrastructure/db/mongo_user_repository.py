# Standard library imports
import logging
from typing import Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateKeyError
from .mongo_connection import get_user_collection
from .object_ids import parse_object_id

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique index that backs username uniqueness"""
        await self.user_collection.create_index(UserFields.USERNAME, unique=True)
        logger.info("Ensured unique index on users.username")

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = parse_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        object_ids = {parse_object_id(user_id) for user_id in user_ids}
        object_ids.discard(None)
        if not object_ids:
            return {}

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": list(object_ids)}})
            users = {}
            async for document in cursor:
                user = self._document_to_user(document)
                users[user.id] = user
            return users
        except Exception as e:
            raise RuntimeError(f"Error finding users by ID: {str(e)}")

    async def find_all(self) -> List[User]:
        try:
            cursor = self.user_collection.find({})
            return [self._document_to_user(document) async for document in cursor]
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to save (without ID)

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateKeyError: If the username is already taken
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except MongoDuplicateKeyError:
            raise DuplicateKeyError(UserFields.USERNAME)
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        return User(
            id=str(result.inserted_id),
            username=user.username,
            name=user.name,
            password_hash=user.password_hash,
        )

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            name=document.get(UserFields.NAME, ""),
            password_hash=document.get(UserFields.PASSWORD_HASH, ""),
        )

    def _user_to_dict(self, user: User) -> dict:
        return {
            UserFields.USERNAME: user.username,
            UserFields.NAME: user.name,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
