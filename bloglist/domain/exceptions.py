"""Domain error taxonomy. The API layer maps each class to an HTTP status."""
from typing import Optional


class BlogListError(Exception):
    """Base class for every expected failure of the service"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BlogListError):
    """Malformed or missing required input"""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class DuplicateKeyError(BlogListError):
    """A value that must be unique is already taken"""

    def __init__(self, field: str) -> None:
        super().__init__(f"expected `{field}` to be unique")
        self.field = field


class AuthenticationError(BlogListError):
    """Missing or invalid credentials"""


class TokenError(AuthenticationError):
    """Bearer token missing, invalid or expired"""

    MISSING = "token missing"
    INVALID = "token invalid"
    EXPIRED = "token expired"


class AuthorizationError(BlogListError):
    """Valid caller, but not the owner of the target resource"""

    def __init__(self, message: str = "operation not authorized") -> None:
        super().__init__(message)


class NotFoundError(BlogListError):
    """Requested resource does not exist"""
