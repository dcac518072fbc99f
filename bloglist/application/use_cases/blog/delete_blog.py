# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.exceptions import NotFoundError
from ....domain.models.token import Identity
from ...services.ownership_enforcer import OwnershipEnforcer

logger = logging.getLogger(__name__)


class DeleteBlogUseCase:
    """Use case for deleting a blog; only its owner may do so"""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def execute(self, blog_id: str, identity: Identity) -> None:
        """
        Delete a blog

        Raises:
            NotFoundError: If the blog does not exist
            AuthorizationError: If the caller is not the owner
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError("blog not found")

        OwnershipEnforcer.authorize_mutation(identity, blog)

        deleted = await self.blog_repository.delete_owned(blog_id, identity.id)
        if not deleted:
            raise NotFoundError("blog not found")

        logger.info(f"User {identity.id} deleted blog {blog_id}")
