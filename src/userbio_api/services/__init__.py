"""Service initialization and dependency injection."""

import logging

from fastapi import Depends, Request
from openai import AsyncOpenAI
from userbio.services.bio_generator import BioGenerator, OpenAIBioGenerator, TemplateBioGenerator
from userbio.services.user_service import UserRecordService
from userbio.services.user_store import UserStore
from userbio_api.config import Settings

logger = logging.getLogger(__name__)


def build_bio_generator(settings: Settings) -> BioGenerator | None:
    """Create the bio generator for the application lifetime.

    Args:
        settings: Application settings

    Returns:
        OpenAIBioGenerator when an API key is configured, TemplateBioGenerator
        when enrichment is enabled without one, None when enrichment is disabled
    """
    if not settings.bio_enrichment_enabled:
        logger.info("Bio enrichment disabled")
        return None

    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not set. Bios will use the fallback template.")
        return TemplateBioGenerator()

    client = AsyncOpenAI(api_key=settings.openai_api_key)
    logger.info("Initialized OpenAIBioGenerator with model %s", settings.openai_model)
    return OpenAIBioGenerator(client=client, model=settings.openai_model)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_bio_generator(request: Request) -> BioGenerator | None:
    return request.app.state.bio_generator


def get_user_service(
    store: UserStore = Depends(get_user_store),
    bio_generator: BioGenerator | None = Depends(get_bio_generator),
    settings: Settings = Depends(get_app_settings),
) -> UserRecordService:
    """Get the user record service for a request.

    Args:
        store: Process-wide user store
        bio_generator: Process-wide bio generator
        settings: Application settings

    Returns:
        UserRecordService instance
    """
    return UserRecordService(
        store=store,
        bio_generator=bio_generator,
        email_required_suffix=settings.email_required_suffix,
        default_location=settings.bio_default_location,
    )
