# Standard library imports
import dataclasses
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.constants import BlogFields
from ....domain.exceptions import NotFoundError
from ....domain.models.token import Identity
from ...dto.blog_dto import BlogResponse, BlogUpdateRequest
from ...services.blog_presenter import BlogPresenter
from ...services.ownership_enforcer import OwnershipEnforcer

logger = logging.getLogger(__name__)


class UpdateBlogUseCase:
    """Use case for changing a blog; only its owner may do so"""

    def __init__(self, blog_repository: BlogRepository, presenter: BlogPresenter) -> None:
        self.blog_repository = blog_repository
        self.presenter = presenter

    async def execute(self, blog_id: str, patch: BlogUpdateRequest, identity: Identity) -> BlogResponse:
        """
        Apply a partial update to a blog

        Fields the client did not send are left unchanged.

        Args:
            blog_id: ID of the blog
            patch: Fields to change
            identity: Authenticated caller

        Returns:
            BlogResponse with the updated values

        Raises:
            NotFoundError: If the blog does not exist
            AuthorizationError: If the caller is not the owner
            ValidationError: If the patched blog would be invalid
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError("blog not found")

        OwnershipEnforcer.authorize_mutation(identity, blog)

        changes = {
            field: value
            for field, value in patch.model_dump(exclude_unset=True).items()
            if field in BlogFields.MUTABLE
        }
        # Re-running the model validation on the merged entry rejects bad values
        dataclasses.replace(blog, **changes)

        updated_blog = await self.blog_repository.update_owned(blog_id, identity.id, changes)
        if updated_blog is None:
            # Deleted between the read and the write
            raise NotFoundError("blog not found")

        logger.info(f"User {identity.id} updated blog {blog_id}: {sorted(changes)}")
        return await self.presenter.present(updated_blog)
