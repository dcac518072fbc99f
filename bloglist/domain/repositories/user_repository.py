from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Find several users at once, keyed by ID; unknown IDs are omitted"""
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """List every user"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist a new user.

        Raises DuplicateKeyError when the username is already taken.
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create storage-level constraints; no-op by default"""
        return None
