"""Endpoints for end-to-end test runs. Never mounted in production."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_blog_service
from src.services.blog_service import BlogService

router = APIRouter(prefix="/api/testing", tags=["testing"])


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
async def reset(
    blogs: Annotated[BlogService, Depends(get_blog_service)],
):
    """Wipe all blogs and users."""
    blogs.reset()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
