"""Constants for domain model field names"""

from .user_fields import UserFields
from .blog_fields import BlogFields

__all__ = [
    "UserFields",
    "BlogFields",
]
