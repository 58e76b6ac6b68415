"""Pydantic schemas for API requests and responses."""

from src.schemas.blog import BlogCreate, BlogOwner, BlogResponse, BlogUpdate
from src.schemas.user import LoginRequest, LoginResponse, UserBlog, UserCreate, UserResponse

__all__ = [
    "BlogCreate",
    "BlogUpdate",
    "BlogOwner",
    "BlogResponse",
    "UserCreate",
    "UserBlog",
    "UserResponse",
    "LoginRequest",
    "LoginResponse",
]
