from typing import Optional
from pydantic import BaseModel, StrictInt


class BlogCreateRequest(BaseModel):
    """DTO for blog creation request"""
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[StrictInt] = None


class BlogUpdateRequest(BaseModel):
    """DTO for a partial blog update; only fields sent by the client are applied"""
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[StrictInt] = None


class OwnerProfile(BaseModel):
    """Minimal public profile of a blog's owner"""
    id: str
    username: str
    name: str


class BlogResponse(BaseModel):
    """DTO for blog response"""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int
    owner: Optional[OwnerProfile] = None  # None if the owner account no longer exists


class BlogStatsResponse(BaseModel):
    """DTO for aggregate statistics over all blogs"""
    total_likes: int
    favorite_blog: Optional[BlogResponse] = None
