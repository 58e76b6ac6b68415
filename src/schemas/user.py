"""User and login schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """User signup request."""

    username: str | None = Field(None, max_length=255)
    name: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class UserBlog(BaseModel):
    """Blog summary joined into a user."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None
    blogs: list[UserBlog] = []


class LoginRequest(BaseModel):
    """Login request."""

    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Login response with the signed token."""

    token: str
    username: str
    name: str | None
