from .auth_dto import UserRegistrationRequest, UserLoginRequest, LoginResponse
from .user_dto import UserResponse
from .blog_dto import (
    BlogCreateRequest,
    BlogUpdateRequest,
    BlogResponse,
    BlogStatsResponse,
    OwnerProfile,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "LoginResponse",
    "UserResponse",
    "BlogCreateRequest",
    "BlogUpdateRequest",
    "BlogResponse",
    "BlogStatsResponse",
    "OwnerProfile",
]
