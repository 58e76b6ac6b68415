"""Blog store: persistence of blogs and their owner back-references."""

import logging

from sqlalchemy.orm import Session, joinedload

from src.database import commit_or_rollback
from src.models.blog import Blog
from src.models.mixins import parse_id
from src.models.user import User
from src.schemas.blog import BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)


class BlogService:
    """Service for blog records.

    Writes that touch both a blog and its owner's ``blogs`` collection are
    committed together, so either both sides change or neither does.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_blogs(self) -> list[Blog]:
        """All blogs with their owner loaded."""
        return self.db.query(Blog).options(joinedload(Blog.user)).all()

    def get(self, blog_id: object) -> Blog | None:
        """Get a blog by id; a malformed id raises MalformedIdError."""
        return self.db.get(Blog, parse_id(blog_id))

    def create(self, blog_data: BlogCreate, owner: User) -> Blog:
        """Create a blog owned by ``owner`` and add it to the owner's collection."""
        blog = Blog(
            title=blog_data.title,
            author=blog_data.author,
            url=blog_data.url,
            likes=blog_data.likes or 0,
        )
        owner.blogs.append(blog)
        self.db.add(blog)
        commit_or_rollback(self.db)
        self.db.refresh(blog)
        logger.info(f"User '{owner.username}' added blog {blog.id}")
        return blog

    def delete(self, blog: Blog, owner: User) -> None:
        """Delete a blog and drop it from the owner's collection."""
        if blog in owner.blogs:
            owner.blogs.remove(blog)
        self.db.delete(blog)
        commit_or_rollback(self.db)
        logger.info(f"User '{owner.username}' deleted blog {blog.id}")

    def update(self, blog_id: object, blog_data: BlogUpdate) -> Blog | None:
        """Apply the supplied fields to a blog.

        Returns None when no blog has the given id. Fields left out of the
        request body keep their stored value.
        """
        blog = self.get(blog_id)
        if blog is None:
            return None

        for field, value in blog_data.model_dump(exclude_unset=True).items():
            if field == "user":
                blog.user_id = parse_id(value) if value else None
            else:
                setattr(blog, field, value)

        commit_or_rollback(self.db)
        self.db.refresh(blog)
        return blog

    def reset(self) -> None:
        """Remove every blog and user."""
        self.db.query(Blog).delete()
        self.db.query(User).delete()
        commit_or_rollback(self.db)
        logger.warning("Cleared all blogs and users")
