"""FastAPI application entry point."""

import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before settings are read
load_dotenv()

# Allow `python src/api/main.py`; main.py is at <root>/src/api/main.py
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import register_exception_handlers
from api.routes import auth, health
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.indexes import ensure_all_indexes
from utils.logging import setup_structured_logging
from utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Auth API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: ensure the unique email index before serving."""
    settings = app.state.settings
    if settings.mongo_url:
        client = get_mongodb_client(settings.mongo_url)
        if client:
            if ensure_all_indexes(client[settings.database_name]):
                logger.info("MongoDB indexes verified/created successfully")
            else:
                logger.warning("Failed to create some MongoDB indexes")
        else:
            logger.warning("MongoDB unavailable, skipping index creation")

    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Without explicit settings they are loaded from the environment, which fails
    fast when the signing key is not configured.
    """
    injected = settings is not None
    settings = settings or get_settings()
    setup_structured_logging(settings.log_level)

    app = FastAPI(
        title=SERVICE_NAME,
        description="User registration, login and bearer-token protected profile",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if injected:
        app.dependency_overrides[get_settings] = lambda: settings

    # Browsers reject credentials with a wildcard origin
    allow_credentials = settings.cors_origins != ["*"]
    if not allow_credentials:
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
        )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(auth.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=get_settings().port,
        access_log=False  # structured logging covers requests
    )
