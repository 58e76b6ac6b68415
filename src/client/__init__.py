"""Python data layer for consumers of the bloglist API."""

from src.client.api import ApiError, BloglistClient
from src.client.resource import ResourceClient
from src.client.store import BlogStore, Notification

__all__ = [
    "ApiError",
    "BloglistClient",
    "BlogStore",
    "Notification",
    "ResourceClient",
]
