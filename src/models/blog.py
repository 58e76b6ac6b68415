"""Blog model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from src.database import Base
from src.errors import ValidationError
from src.models.mixins import IdentifierMixin, TimestampMixin, required


class Blog(Base, IdentifierMixin, TimestampMixin):
    """A bookmarked blog post, optionally owned by the user who added it."""

    __tablename__ = "blogs"

    title = Column(String(500), nullable=False)
    author = Column(String(255), nullable=False)
    url = Column(String(2000), nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=True, index=True)

    user = relationship("User", back_populates="blogs")

    def validate(self) -> None:
        """Check required fields before the record is written."""
        if self.likes is None:
            self.likes = 0
        errors = {}
        for field in ("title", "author", "url"):
            if not required(getattr(self, field)):
                errors[field] = f"field `{field}` is required"
        if errors:
            raise ValidationError("Blog", errors)
