# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

# Local application imports
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.models.blog import Blog
from ...domain.constants import BlogFields
from ...domain.exceptions import ValidationError
from .mongo_connection import get_blog_collection
from .object_ids import parse_object_id

logger = logging.getLogger(__name__)


class MongoBlogRepository(BlogRepository):
    """
    MongoDB implementation of BlogRepository.

    ``owner`` is stored as the user's ObjectId. Updates and deletes filter on
    both ``_id`` and ``owner`` so a write can never land on a blog the caller
    does not own, even if ownership was checked against a stale read.
    """

    def __init__(self, blog_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.blog_collection = blog_collection if blog_collection is not None else get_blog_collection()

    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """
        Find blog by ID

        Args:
            blog_id: The blog ID to find

        Returns:
            Blog domain model if found, None otherwise
        """
        object_id = parse_object_id(blog_id)
        if object_id is None:
            return None

        try:
            document = await self.blog_collection.find_one({BlogFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding blog by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_blog(document)

    async def find_all(self) -> List[Blog]:
        """
        List every blog in natural (insertion) order

        Documents missing a title or url are logged and skipped.

        Returns:
            List of Blog domain models
        """
        try:
            cursor = self.blog_collection.find({})
            documents = [document async for document in cursor]
        except Exception as e:
            raise RuntimeError(f"Error listing blogs: {str(e)}")

        blogs = []
        for document in documents:
            try:
                blogs.append(self._document_to_blog(document))
            except ValidationError as e:
                logger.warning(f"Skipping malformed blog document {document.get(BlogFields.MONGO_ID)}: {e.message}")
        return blogs

    async def create(self, blog: Blog) -> Blog:
        """
        Insert a new blog

        Args:
            blog: Blog domain model to save (without ID)

        Returns:
            Saved Blog domain model with ID set
        """
        if not blog:
            raise ValueError("Blog cannot be None")

        blog_dict = self._blog_to_dict(blog)
        try:
            result = await self.blog_collection.insert_one(blog_dict)
        except Exception as e:
            raise RuntimeError(f"Error saving blog: {str(e)}")

        return Blog(
            id=str(result.inserted_id),
            title=blog.title,
            url=blog.url,
            owner=blog.owner,
            author=blog.author,
            likes=blog.likes,
        )

    async def update_owned(self, blog_id: str, owner_id: str, changes: Dict[str, Any]) -> Optional[Blog]:
        """
        Update a blog only if it belongs to owner_id

        Args:
            blog_id: ID of the blog to update
            owner_id: ID of the user that must own it
            changes: Field values to set

        Returns:
            Updated Blog domain model, or None if nothing matched
        """
        object_id = parse_object_id(blog_id)
        owner_object_id = parse_object_id(owner_id)
        if object_id is None or owner_object_id is None:
            return None

        update_fields = {k: v for k, v in changes.items() if k in BlogFields.MUTABLE}
        query = {BlogFields.MONGO_ID: object_id, BlogFields.OWNER: owner_object_id}

        try:
            if update_fields:
                document = await self.blog_collection.find_one_and_update(
                    query,
                    {"$set": update_fields},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                document = await self.blog_collection.find_one(query)
        except Exception as e:
            raise RuntimeError(f"Error updating blog: {str(e)}")

        if document is None:
            return None
        return self._document_to_blog(document)

    async def delete_owned(self, blog_id: str, owner_id: str) -> bool:
        """
        Delete a blog only if it belongs to owner_id

        Returns:
            True if a document was deleted
        """
        object_id = parse_object_id(blog_id)
        owner_object_id = parse_object_id(owner_id)
        if object_id is None or owner_object_id is None:
            return False

        try:
            result = await self.blog_collection.delete_one(
                {BlogFields.MONGO_ID: object_id, BlogFields.OWNER: owner_object_id}
            )
        except Exception as e:
            raise RuntimeError(f"Error deleting blog: {str(e)}")
        return result.deleted_count == 1

    def _document_to_blog(self, document: dict) -> Blog:
        """
        Convert MongoDB document to Blog domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Blog domain model
        """
        if not document or BlogFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        owner = document.get(BlogFields.OWNER)
        return Blog(
            id=str(document[BlogFields.MONGO_ID]),
            title=document.get(BlogFields.TITLE, ""),
            url=document.get(BlogFields.URL, ""),
            owner=str(owner) if owner is not None else None,
            author=document.get(BlogFields.AUTHOR),
            likes=document.get(BlogFields.LIKES, 0),
        )

    def _blog_to_dict(self, blog: Blog) -> dict:
        """
        Convert Blog domain model to MongoDB document

        Args:
            blog: Blog domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        owner_object_id = parse_object_id(blog.owner)
        if owner_object_id is None:
            raise ValueError(f"Invalid owner ID format: {blog.owner}")

        return {
            BlogFields.TITLE: blog.title,
            BlogFields.AUTHOR: blog.author,
            BlogFields.URL: blog.url,
            BlogFields.LIKES: blog.likes,
            BlogFields.OWNER: owner_object_id,
        }
