from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    name: str
