# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.exceptions import NotFoundError
from ...dto.blog_dto import BlogResponse
from ...services.blog_presenter import BlogPresenter


class GetBlogUseCase:
    """Use case for getting a blog by ID"""

    def __init__(self, blog_repository: BlogRepository, presenter: BlogPresenter) -> None:
        self.blog_repository = blog_repository
        self.presenter = presenter

    async def execute(self, blog_id: str) -> BlogResponse:
        """
        Raises:
            NotFoundError: If no blog has this ID
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError("blog not found")
        return await self.presenter.present(blog)
