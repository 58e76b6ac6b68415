"""FastAPI dependencies for authentication and database.

Requests pass through an ordered chain of dependencies: ``token_extractor``
runs for every route, ``user_extractor`` for the blog routes. Each stage
either returns its value to the next one or raises, which ends the request
through the centralized error handlers. FastAPI caches dependency results
per request, so the user lookup happens at most once.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from src.database import get_db
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.blog_service import BlogService
from src.services.user_service import UserService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_blog_service(
    db: Annotated[Session, Depends(get_db)],
) -> BlogService:
    """Get blog service with dependencies."""
    return BlogService(db)


def token_extractor(request: Request) -> str | None:
    """Extract the bearer token from the Authorization header, if any.

    An empty token after the prefix counts as no token.
    """
    authorization = request.headers.get("Authorization")
    token = None
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip() or None
    request.state.token = token
    return token


def user_extractor(
    request: Request,
    token: Annotated[str | None, Depends(token_extractor)],
    users: Annotated[UserService, Depends(get_user_service)],
) -> User | None:
    """Resolve the bearer token to a user.

    A missing token, or a token without a user id, yields None and leaves
    the decision to the route. A token that fails verification raises
    TokenInvalidError.
    """
    request.state.user = None
    if not token:
        return None

    payload = decode_access_token(token)
    user_id = payload.get("id")
    if not user_id:
        logger.warning("Token verified but carries no user id")
        return None

    user = users.get(user_id)
    request.state.user = user
    return user


CurrentUser = Annotated[User | None, Depends(user_extractor)]
