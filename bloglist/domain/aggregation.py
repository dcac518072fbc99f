"""
Statistics over an already-fetched collection of blogs.

These functions do no I/O and never mutate their input.
"""
# Standard library imports
from typing import Iterable, Optional

# Local application imports
from .models.blog import Blog


def total_likes(blogs: Iterable[Blog]) -> int:
    """
    Sum of likes over every blog

    Args:
        blogs: Blogs to aggregate

    Returns:
        Total number of likes, 0 for an empty collection
    """
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Iterable[Blog]) -> Optional[Blog]:
    """
    Blog with the most likes

    Ties go to the entry that comes first in the input.

    Args:
        blogs: Blogs to search

    Returns:
        The most-liked blog, or None for an empty collection
    """
    favorite: Optional[Blog] = None
    for blog in blogs:
        if favorite is None or blog.likes > favorite.likes:
            favorite = blog
    return favorite
