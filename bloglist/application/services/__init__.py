from .ownership_enforcer import OwnershipEnforcer
from .blog_presenter import BlogPresenter

__all__ = ["OwnershipEnforcer", "BlogPresenter"]
