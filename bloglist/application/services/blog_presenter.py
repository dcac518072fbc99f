# Standard library imports
from typing import Dict, List, Optional, Sequence

# Local application imports
from ...domain.models.blog import Blog
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from ..dto.blog_dto import BlogResponse, OwnerProfile


class BlogPresenter:
    """Turns Blog entities into responses, expanding owner IDs into profiles"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def present(self, blog: Blog) -> BlogResponse:
        owner = None
        if blog.owner is not None:
            owner = await self.user_repository.find_by_id(blog.owner)
        return self.to_response(blog, owner)

    async def present_many(self, blogs: Sequence[Blog]) -> List[BlogResponse]:
        """Present several blogs with one batched owner lookup, keeping order"""
        if not blogs:
            return []
        owners: Dict[str, User] = await self.user_repository.find_by_ids(
            {blog.owner for blog in blogs if blog.owner is not None}
        )
        return [self.to_response(blog, owners.get(blog.owner)) for blog in blogs]

    @staticmethod
    def to_response(blog: Blog, owner: Optional[User]) -> BlogResponse:
        owner_profile = None
        if owner is not None and owner.id:
            owner_profile = OwnerProfile(id=owner.id, username=owner.username, name=owner.name)

        return BlogResponse(
            id=blog.id or "",
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            owner=owner_profile,
        )
