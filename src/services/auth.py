"""Authentication service for JWT and password handling."""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import get_settings
from src.errors import TokenInvalidError

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: object, username: str) -> str:
    """Create a JWT access token carrying the username and user id."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "username": username,
        "id": str(user_id),
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT token.

    Raises TokenInvalidError when the signature does not match or the token
    has expired.
    """
    try:
        return jwt.decode(token, settings.secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise TokenInvalidError() from e
