"""Shared test data and database helpers."""

from src.models.blog import Blog
from src.models.user import User
from src.services.auth import create_access_token

INITIAL_BLOGS = [
    {
        "title": "Introduction to Unit Testing",
        "author": "Test Writer",
        "url": "http://example.com/unit-testing",
        "likes": 10,
    },
    {
        "title": "Middleware Deep Dive",
        "author": "API Guru",
        "url": "http://example.com/middleware",
        "likes": 20,
    },
    {
        "title": "Learning Testing Basics",
        "author": "Dev Student",
        "url": "http://example.com/testing-basics",
        "likes": 5,
    },
    {
        "title": "API Design Patterns",
        "author": "Senior Engineer",
        "url": "http://example.com/api-patterns",
        "likes": 15,
    },
]


class AuthHeaders(dict):
    """Dict subclass that also stores the user the token belongs to."""

    def __init__(self, *args, user_id: str | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


def headers_for(user: User) -> AuthHeaders:
    """Bearer headers carrying a freshly signed token for ``user``."""
    token = create_access_token(user.id, user.username)
    return AuthHeaders(
        {"Authorization": f"Bearer {token}"}, user_id=str(user.id), username=user.username
    )


def blogs_in_db(db) -> list[Blog]:
    return db.query(Blog).all()


def users_in_db(db) -> list[User]:
    return db.query(User).all()
