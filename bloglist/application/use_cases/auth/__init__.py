from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .list_users import ListUsersUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ListUsersUseCase",
]
