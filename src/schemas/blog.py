"""Blog schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BlogCreate(BaseModel):
    """Create a new blog.

    Required fields are checked by the model layer so that a missing title,
    author or url is reported as a blog validation failure.
    """

    title: str | None = Field(None, max_length=500)
    author: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=2000)
    likes: int | None = None


class BlogUpdate(BaseModel):
    """Replace the fields of a blog; omitted fields keep their value."""

    title: str | None = Field(None, max_length=500)
    author: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=2000)
    likes: int | None = None
    user: str | None = None  # owner id


class BlogOwner(BaseModel):
    """Owner identity joined into a blog."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None


class BlogResponse(BaseModel):
    """Blog response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int
    user: BlogOwner | None = None
