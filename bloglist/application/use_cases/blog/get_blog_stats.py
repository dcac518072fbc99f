# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.aggregation import favorite_blog, total_likes
from ...dto.blog_dto import BlogStatsResponse
from ...services.blog_presenter import BlogPresenter


class GetBlogStatsUseCase:
    """Use case for aggregate statistics over all blogs"""

    def __init__(self, blog_repository: BlogRepository, presenter: BlogPresenter) -> None:
        self.blog_repository = blog_repository
        self.presenter = presenter

    async def execute(self) -> BlogStatsResponse:
        blogs = await self.blog_repository.find_all()

        favorite = favorite_blog(blogs)
        return BlogStatsResponse(
            total_likes=total_likes(blogs),
            favorite_blog=await self.presenter.present(favorite) if favorite is not None else None,
        )
