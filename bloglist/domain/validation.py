"""
Input validation rules for user accounts and blog entries.

Each rule is a pure function returning a ``ValidationResult`` rather than
raising, so callers decide how a failure surfaces and no rule depends on a
storage backend.
"""
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import ValidationError

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 3
PASSWORD_MAX_BYTES = 72
# Largest value a BSON int64 can hold
LIKES_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation rule"""
    is_valid: bool
    field: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def failure(cls, field: str, message: str) -> "ValidationResult":
        return cls(is_valid=False, field=field, message=message)

    def raise_if_invalid(self) -> None:
        """Raise ValidationError when this result is a failure"""
        if not self.is_valid:
            raise ValidationError(self.message or "validation failed", field=self.field)


def validate_min_length(field: str, value: Optional[str], min_length: int) -> ValidationResult:
    if value is None or len(value) < min_length:
        return ValidationResult.failure(
            field,
            f"`{field}` must be at least {min_length} characters long",
        )
    return ValidationResult.ok()


def validate_username(username: Optional[str]) -> ValidationResult:
    return validate_min_length("username", username, USERNAME_MIN_LENGTH)


def validate_password(password: Optional[str]) -> ValidationResult:
    result = validate_min_length("password", password, PASSWORD_MIN_LENGTH)
    if not result.is_valid:
        return result
    # bcrypt only accepts 72 bytes of input
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return ValidationResult.failure(
            "password",
            f"`password` must be at most {PASSWORD_MAX_BYTES} bytes long",
        )
    return ValidationResult.ok()


def validate_required_text(field: str, value: Optional[str]) -> ValidationResult:
    if value is None or not value.strip():
        return ValidationResult.failure(field, f"`{field}` is required")
    return ValidationResult.ok()


def validate_likes(likes: Any) -> ValidationResult:
    # bool is an int subclass; reject it explicitly
    if isinstance(likes, bool) or not isinstance(likes, int):
        return ValidationResult.failure("likes", "`likes` must be an integer")
    if likes < 0:
        return ValidationResult.failure("likes", "`likes` must not be negative")
    if likes > LIKES_MAX:
        return ValidationResult.failure("likes", f"`likes` must be at most {LIKES_MAX}")
    return ValidationResult.ok()
