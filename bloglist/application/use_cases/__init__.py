from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    ListUsersUseCase,
)
from .blog import (
    CreateBlogUseCase,
    ListBlogsUseCase,
    GetBlogUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogStatsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ListUsersUseCase",
    "CreateBlogUseCase",
    "ListBlogsUseCase",
    "GetBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "GetBlogStatsUseCase",
]
