# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogResponse
from ...services.blog_presenter import BlogPresenter


class ListBlogsUseCase:
    """Use case for listing every blog in insertion order"""

    def __init__(self, blog_repository: BlogRepository, presenter: BlogPresenter) -> None:
        self.blog_repository = blog_repository
        self.presenter = presenter

    async def execute(self) -> List[BlogResponse]:
        blogs = await self.blog_repository.find_all()
        return await self.presenter.present_many(blogs)
