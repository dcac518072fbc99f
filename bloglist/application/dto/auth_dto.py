from pydantic import BaseModel


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request; length rules are enforced by the use case"""
    username: str
    name: str = ""
    password: str


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str
    password: str


class LoginResponse(BaseModel):
    """DTO for a successful login"""
    token: str
    username: str
    name: str
