"""Login API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_user_service
from src.schemas.user import LoginRequest, LoginResponse
from src.services.auth import create_access_token
from src.services.user_service import UserService

router = APIRouter(prefix="/api/login", tags=["auth"])


@router.post("", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Login with username and password."""
    user = users.authenticate(credentials.username, credentials.password)

    # Same message for unknown user and wrong password
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid username or password",
        )

    token = create_access_token(user.id, user.username)

    return LoginResponse(token=token, username=user.username, name=user.name)
