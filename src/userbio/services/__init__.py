"""Domain services package."""

from userbio.services.bio_generator import (
    BioGenerator,
    OpenAIBioGenerator,
    TemplateBioGenerator,
    build_bio_prompt,
    fallback_bio,
)
from userbio.services.user_service import UserRecordService
from userbio.services.user_store import CosmosUserStore, InMemoryUserStore, UserStore

__all__ = [
    "BioGenerator",
    "CosmosUserStore",
    "InMemoryUserStore",
    "OpenAIBioGenerator",
    "TemplateBioGenerator",
    "UserRecordService",
    "UserStore",
    "build_bio_prompt",
    "fallback_bio",
]
