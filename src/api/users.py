"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_user_service
from src.schemas.user import UserCreate, UserResponse
from src.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])

PASSWORD_MIN_LENGTH = 3


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Sign up a new user."""
    if not user_data.password or len(user_data.password) < PASSWORD_MIN_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"password must be at least {PASSWORD_MIN_LENGTH} characters long",
        )

    return users.create(user_data.username, user_data.name, user_data.password)


@router.get("", response_model=list[UserResponse])
async def get_users(
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get all users with the blogs they created."""
    return users.list_users()
