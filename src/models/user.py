"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.errors import ValidationError
from src.models.mixins import IdentifierMixin, TimestampMixin, required

USERNAME_MIN_LENGTH = 3


class User(Base, IdentifierMixin, TimestampMixin):
    """User model for authentication and blog ownership."""

    __tablename__ = "users"

    username = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)

    # Reverse collection of the blogs this user owns
    blogs = relationship("Blog", back_populates="user")

    def validate(self) -> None:
        """Check field constraints before the record is written."""
        errors = {}
        if not required(self.username):
            errors["username"] = "field `username` is required"
        elif len(self.username) < USERNAME_MIN_LENGTH:
            errors["username"] = (
                f"field `username` (`{self.username}`) is shorter than the minimum "
                f"allowed length ({USERNAME_MIN_LENGTH})"
            )
        if errors:
            raise ValidationError("User", errors)
