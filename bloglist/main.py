# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import blogs_router, login_router, users_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures storage-level constraints exist before serving requests and
    closes the database client on shutdown.
    """
    user_repository = get_container().get(UserRepository)
    await user_repository.ensure_indexes()
    logger.info("Application startup complete")

    yield

    close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Error handlers rendering ``{"error": ...}`` bodies
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Blog List API",
        version="1.0.0",
        description="Blog catalog with owner-scoped editing",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(users_router, prefix="/api/users")
    application.include_router(login_router, prefix="/api/login")
    application.include_router(blogs_router, prefix="/api/blogs")

    return application


# Create application instance
app = create_application()
