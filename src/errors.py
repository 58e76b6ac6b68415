"""Application errors and the handlers that turn them into JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = "unknown endpoint"


class AppError(Exception):
    """Base class for errors mapped to a client response."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


class ValidationError(AppError):
    """Raised by the model layer when a record fails schema validation."""

    def __init__(self, model: str, errors: dict[str, str]) -> None:
        self.model = model
        self.errors = errors
        reasons = ", ".join(f"{path}: {message}" for path, message in errors.items())
        super().__init__(f"{model} validation failed: {reasons}")


class MalformedIdError(AppError):
    """Raised when a record identifier cannot be parsed."""

    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__("malformed id")


class DuplicateKeyError(AppError):
    """Raised when a unique field already holds the given value."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"expected `{field}` to be unique")


class TokenInvalidError(AppError):
    """Raised when a bearer token fails signature or expiry verification."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "token invalid") -> None:
        super().__init__(detail)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError with its own status code."""
    logger.warning(f"{exc.detail} for endpoint {request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render handler-raised HTTP errors as ``{"error": ...}`` bodies.

    Routing misses, by path or by method, are reported as 404 unknown endpoint.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED or (
        exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found"
    ):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": UNKNOWN_ENDPOINT}
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report the first body or parameter error as a 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        path = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{path}: {first.get('msg')}" if path else str(first.get("msg"))
    else:
        message = "invalid request"
    logger.warning(f"{message} for endpoint {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the centralized error mapping on an application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
