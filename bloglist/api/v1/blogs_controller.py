# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.blog_dto import (
    BlogCreateRequest,
    BlogResponse,
    BlogStatsResponse,
    BlogUpdateRequest,
)
from ...application.use_cases.blog.create_blog import CreateBlogUseCase
from ...application.use_cases.blog.list_blogs import ListBlogsUseCase
from ...application.use_cases.blog.get_blog import GetBlogUseCase
from ...application.use_cases.blog.update_blog import UpdateBlogUseCase
from ...application.use_cases.blog.delete_blog import DeleteBlogUseCase
from ...application.use_cases.blog.get_blog_stats import GetBlogStatsUseCase
from ...domain.models.token import Identity
from ...di.container import get_container
from .dependencies import get_current_identity


router = APIRouter(tags=["blogs"])


@router.get("", response_model=List[BlogResponse])
async def list_blogs() -> List[BlogResponse]:
    """
    List every blog with its owner's profile

    Returns:
        List of BlogResponse objects in insertion order
    """
    container = get_container()
    return await container.get(ListBlogsUseCase).execute()


@router.get("/stats", response_model=BlogStatsResponse)
async def get_blog_stats() -> BlogStatsResponse:
    """Total likes and the most-liked blog"""
    container = get_container()
    return await container.get(GetBlogStatsUseCase).execute()


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str) -> BlogResponse:
    container = get_container()
    return await container.get(GetBlogUseCase).execute(blog_id)


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: BlogCreateRequest,
    identity: Identity = Depends(get_current_identity),
) -> BlogResponse:
    """
    Create a blog owned by the caller

    Args:
        request: Blog creation request
        identity: Authenticated caller (from dependency)

    Returns:
        BlogResponse with created blog information
    """
    container = get_container()
    create_blog_use_case = container.get(CreateBlogUseCase)
    return await create_blog_use_case.execute(request=request, identity=identity)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: str,
    request: BlogUpdateRequest,
    identity: Identity = Depends(get_current_identity),
) -> BlogResponse:
    """
    Update fields of a blog owned by the caller

    Args:
        blog_id: ID of the blog
        request: Fields to change; anything not sent stays as it is
        identity: Authenticated caller (from dependency)

    Returns:
        BlogResponse with updated blog information
    """
    container = get_container()
    update_blog_use_case = container.get(UpdateBlogUseCase)
    return await update_blog_use_case.execute(blog_id=blog_id, patch=request, identity=identity)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Response:
    """
    Delete a blog owned by the caller

    Args:
        blog_id: ID of the blog
        identity: Authenticated caller (from dependency)
    """
    container = get_container()
    delete_blog_use_case = container.get(DeleteBlogUseCase)
    await delete_blog_use_case.execute(blog_id=blog_id, identity=identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
