"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from userbio.services.bio_generator import OpenAIBioGenerator
from userbio_api.config import Settings, get_settings
from userbio_api.errors import register_exception_handlers
from userbio_api.middleware import setup_middleware
from userbio_api.routes import api_router, info_router
from userbio_api.services import build_bio_generator
from userbio_api.services.cosmos_db_init import open_user_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the user store and bio generator once for the process lifetime."""
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log level: {settings.log_level}")

    with open_user_store(settings) as store:
        logger.info("User store backend: %s", store.backend)
        app.state.user_store = store
        app.state.bio_generator = build_bio_generator(settings)

        yield

        # Shutdown
        logger.info(f"{settings.app_name} shutting down")
        if isinstance(app.state.bio_generator, OpenAIBioGenerator):
            await app.state.bio_generator.client.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings; loaded from the environment when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="User Bio API - user records with generated biographies",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings

    setup_middleware(app, settings.cors_origins)
    register_exception_handlers(app, settings)

    app.include_router(info_router)
    app.include_router(api_router)
    return app


settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "userbio_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
