# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.models.blog import Blog
from ....domain.models.token import Identity
from ...dto.blog_dto import BlogCreateRequest, BlogResponse
from ...services.blog_presenter import BlogPresenter

logger = logging.getLogger(__name__)


class CreateBlogUseCase:
    """Use case for creating a blog owned by the caller"""

    def __init__(self, blog_repository: BlogRepository, presenter: BlogPresenter) -> None:
        self.blog_repository = blog_repository
        self.presenter = presenter

    async def execute(self, request: BlogCreateRequest, identity: Identity) -> BlogResponse:
        """
        Create a new blog

        Args:
            request: Blog creation request
            identity: Authenticated caller, who becomes the owner

        Returns:
            BlogResponse with the owner expanded

        Raises:
            ValidationError: If title or url is missing, or likes is negative
        """
        # Domain model validates before anything is written
        new_blog = Blog(
            id=None,
            title=request.title,
            url=request.url,
            owner=identity.id,
            author=request.author,
            likes=0 if request.likes is None else request.likes,
        )

        saved_blog = await self.blog_repository.create(new_blog)
        logger.info(f"User {identity.id} created blog {saved_blog.id}")

        return await self.presenter.present(saved_blog)
