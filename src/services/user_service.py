"""User store: signup, lookup and credential checks."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.database import commit_or_rollback
from src.errors import DuplicateKeyError
from src.models.mixins import parse_id
from src.models.user import User
from src.services.auth import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Service for user records."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: object) -> User | None:
        """Get a user by id; a malformed id raises MalformedIdError."""
        return self.db.get(User, parse_id(user_id))

    def get_by_username(self, username: str | None) -> User | None:
        if username is None:
            return None
        return self.db.query(User).filter(User.username == username).first()

    def list_users(self) -> list[User]:
        """All users with their blogs loaded."""
        return self.db.query(User).options(selectinload(User.blogs)).all()

    def create(self, username: str | None, name: str | None, password: str) -> User:
        """Create a user, storing only the bcrypt hash of the password."""
        user = User(username=username, name=name, password_hash=get_password_hash(password))
        self.db.add(user)
        try:
            commit_or_rollback(self.db)
        except IntegrityError as e:
            raise DuplicateKeyError("username") from e
        self.db.refresh(user)
        logger.info(f"Created user '{user.username}'")
        return user

    def authenticate(self, username: str | None, password: str | None) -> User | None:
        """Return the user when the credentials match, otherwise None."""
        user = self.get_by_username(username)
        if user is None or password is None:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user
