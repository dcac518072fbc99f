from dataclasses import dataclass
from typing import Optional

from ..exceptions import ValidationError
from ..validation import validate_username


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    name: str
    password_hash: str

    def __post_init__(self) -> None:
        """Business validations"""
        validate_username(self.username).raise_if_invalid()
        if not self.password_hash:
            raise ValidationError("Password hash is required", field="password")
