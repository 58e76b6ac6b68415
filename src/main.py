"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import auth, blogs, testing, users
from src.api.dependencies import token_extractor
from src.config import Settings, get_settings
from src.database import init_db
from src.errors import register_exception_handlers

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging once; test runs only report warnings."""
    level = logging.WARNING if settings.is_test else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging()
    logger.info(f"Connecting to {settings.sqlalchemy_database_url.split('://')[0]} database")
    init_db()
    yield


def create_app(app_settings: Settings) -> FastAPI:
    """Build the application; the testing router is only mounted outside production."""
    app = FastAPI(
        title="Bloglist API",
        description="Blog listing service with token-based authentication",
        version="0.1.0",
        lifespan=lifespan,
        dependencies=[Depends(token_extractor)],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers
    app.include_router(users.router)
    app.include_router(auth.router)
    app.include_router(blogs.router)

    if not app_settings.is_production:
        logger.info("Enabling testing router")
        app.include_router(testing.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": app_settings.environment}

    return app


app = create_app(settings)


def run() -> None:
    """Serve the application with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.port)  # noqa: S104


if __name__ == "__main__":
    run()
