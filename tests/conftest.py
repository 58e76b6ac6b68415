"""Pytest configuration and fixtures."""

import os

os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from helper import INITIAL_BLOGS, headers_for  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.config import get_settings  # noqa: E402
from src.database import Base, build_engine, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.models.blog import Blog  # noqa: E402
from src.models.user import User  # noqa: E402
from src.services.auth import get_password_hash  # noqa: E402

# Test database comes from TEST_DATABASE_URL, SQLite by default
SQLALCHEMY_DATABASE_URL = get_settings().test_database_url
engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop tables - each test cleans up after itself


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory that stores a user with a hashed password."""

    def _make_user(username: str, password: str = "secretpass", name: str | None = None) -> User:
        user = User(username=username, name=name, password_hash=get_password_hash(password))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def test_user(make_user):
    """Main user; owns the initial blogs."""
    return make_user("testuser", "secretpass", "Test User")


@pytest.fixture
def other_user(make_user):
    """A second user who owns nothing."""
    return make_user("otheruser", "otherpass", "Other User")


@pytest.fixture
def auth_headers(test_user):
    return headers_for(test_user)


@pytest.fixture
def other_headers(other_user):
    return headers_for(other_user)


@pytest.fixture
def initial_blogs(db, test_user):
    """Store the initial blogs owned by the main user."""
    blogs = [Blog(**data) for data in INITIAL_BLOGS]
    test_user.blogs.extend(blogs)
    db.commit()
    return blogs
