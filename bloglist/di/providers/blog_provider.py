from typing import TYPE_CHECKING
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.blog_presenter import BlogPresenter
from ...application.use_cases.blog.create_blog import CreateBlogUseCase
from ...application.use_cases.blog.list_blogs import ListBlogsUseCase
from ...application.use_cases.blog.get_blog import GetBlogUseCase
from ...application.use_cases.blog.update_blog import UpdateBlogUseCase
from ...application.use_cases.blog.delete_blog import DeleteBlogUseCase
from ...application.use_cases.blog.get_blog_stats import GetBlogStatsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class BlogProvider:
    """Blog use case provider - registers all blog-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all blog use cases.
        Use cases are created on-demand via factories.
        """
        container.register_singleton(
            BlogPresenter,
            BlogPresenter(user_repository=container.get(UserRepository))
        )

        container.register_factory(
            CreateBlogUseCase,
            lambda: CreateBlogUseCase(
                blog_repository=container.get(BlogRepository),
                presenter=container.get(BlogPresenter),
            )
        )

        container.register_factory(
            ListBlogsUseCase,
            lambda: ListBlogsUseCase(
                blog_repository=container.get(BlogRepository),
                presenter=container.get(BlogPresenter),
            )
        )

        container.register_factory(
            GetBlogUseCase,
            lambda: GetBlogUseCase(
                blog_repository=container.get(BlogRepository),
                presenter=container.get(BlogPresenter),
            )
        )

        container.register_factory(
            UpdateBlogUseCase,
            lambda: UpdateBlogUseCase(
                blog_repository=container.get(BlogRepository),
                presenter=container.get(BlogPresenter),
            )
        )

        container.register_factory(
            DeleteBlogUseCase,
            lambda: DeleteBlogUseCase(
                blog_repository=container.get(BlogRepository)
            )
        )

        container.register_factory(
            GetBlogStatsUseCase,
            lambda: GetBlogStatsUseCase(
                blog_repository=container.get(BlogRepository),
                presenter=container.get(BlogPresenter),
            )
        )
