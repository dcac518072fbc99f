from .user import User
from .blog import Blog
from .token import TokenClaims, Identity

__all__ = ["User", "Blog", "TokenClaims", "Identity"]
