"""SQLAlchemy models."""

from src.models.blog import Blog
from src.models.user import User

__all__ = [
    "User",
    "Blog",
]
