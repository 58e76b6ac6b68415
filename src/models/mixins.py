"""Mixins for SQLAlchemy models."""

import uuid

from sqlalchemy import Column, DateTime, Uuid, func

from src.errors import MalformedIdError


class IdentifierMixin:
    """Mixin to add a UUID primary key, exposed to clients as a string."""

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


def required(value: object) -> bool:
    """Check that a required field carries a non-blank value."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def parse_id(value: object) -> uuid.UUID:
    """Parse a client-supplied record identifier."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError) as e:
        raise MalformedIdError(value) from e
