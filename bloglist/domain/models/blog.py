# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..validation import validate_likes, validate_required_text


@dataclass
class Blog:
    """
    Pure domain model for a blog entry.

    ``owner`` holds the id of the user who created the entry. The user's
    profile is never copied in here; it is expanded at read time. Entries
    stored without an owner load with ``owner=None`` and cannot be changed
    through the API.
    """
    id: Optional[str]
    title: str
    url: str
    owner: Optional[str] = None
    author: Optional[str] = None
    likes: int = 0

    def __post_init__(self) -> None:
        """Business validations"""
        validate_required_text("title", self.title).raise_if_invalid()
        validate_required_text("url", self.url).raise_if_invalid()
        validate_likes(self.likes).raise_if_invalid()
