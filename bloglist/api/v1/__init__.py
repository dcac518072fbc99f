"""
API layer for the blog list service.

Exposes JSON endpoints under /api: user registration, login and the blog
collection with its statistics.
"""
from .users_controller import router as users_router
from .login_controller import router as login_router
from .blogs_controller import router as blogs_router
from .error_handlers import register_exception_handlers


__all__ = ["users_router", "login_router", "blogs_router", "register_exception_handlers"]
