from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.blog import Blog


class BlogRepository(ABC):
    """Repository interface - defines contract for blog data access"""

    @abstractmethod
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """Find blog by ID; malformed IDs behave like unknown ones"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Blog]:
        """List every blog in insertion order"""
        pass

    @abstractmethod
    async def create(self, blog: Blog) -> Blog:
        """Persist a new blog and return it with its ID set"""
        pass

    @abstractmethod
    async def update_owned(self, blog_id: str, owner_id: str, changes: Dict[str, Any]) -> Optional[Blog]:
        """
        Apply changes only if the blog exists and belongs to owner_id.

        Returns the updated blog, or None when nothing matched.
        """
        pass

    @abstractmethod
    async def delete_owned(self, blog_id: str, owner_id: str) -> bool:
        """Delete only if the blog exists and belongs to owner_id; True if deleted"""
        pass
