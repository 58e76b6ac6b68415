"""Blog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import CurrentUser, get_blog_service, user_extractor
from src.schemas.blog import BlogCreate, BlogResponse, BlogUpdate
from src.services.blog_service import BlogService

router = APIRouter(prefix="/api/blogs", tags=["blogs"], dependencies=[Depends(user_extractor)])

TOKEN_MISSING = "token invalid or missing"  # noqa: S105
NOT_OWNER = "user not authorized to delete this blog"


@router.get("", response_model=list[BlogResponse])
async def get_blogs(
    blogs: Annotated[BlogService, Depends(get_blog_service)],
):
    """Get all blogs with their owners."""
    return blogs.list_blogs()


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    blog_data: BlogCreate,
    current_user: CurrentUser,
    blogs: Annotated[BlogService, Depends(get_blog_service)],
):
    """Create a blog owned by the current user."""
    if current_user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=TOKEN_MISSING)

    return blogs.create(blog_data, current_user)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    current_user: CurrentUser,
    blogs: Annotated[BlogService, Depends(get_blog_service)],
):
    """Delete a blog (owner only). Deleting an unknown blog succeeds."""
    if current_user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=TOKEN_MISSING)

    blog = blogs.get(blog_id)
    if blog is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if str(blog.user_id) != str(current_user.id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NOT_OWNER)

    blogs.delete(blog, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: str,
    blog_data: BlogUpdate,
    blogs: Annotated[BlogService, Depends(get_blog_service)],
):
    """Update a blog. Any caller may update; ownership is not checked."""
    blog = blogs.update(blog_id, blog_data)
    if blog is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return blog
