"""Short biography generation backed by the OpenAI Responses API."""

import logging
from abc import ABC, abstractmethod

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

MAX_BIO_WORDS = 15


def build_bio_prompt(name: str, age: int | float, location_hint: str) -> str:
    """Build the instruction sent to the model for a single user."""
    return (
        f"Write one short, casual biography sentence of at most {MAX_BIO_WORDS} words "
        f"about a person named {name}, who is {age} years old and lives in {location_hint}. "
        f"Write it in the language most commonly spoken in {location_hint}. "
        "Reply with the sentence only, without quotes, explanations or any other text."
    )


def fallback_bio(name: str, age: int | float, location_hint: str) -> str:
    return f"{name} is a {age}-year-old from {location_hint}."


class BioGenerator(ABC):
    """Abstract interface for bio generation."""

    @abstractmethod
    async def generate(self, name: str, age: int | float, location_hint: str) -> str:
        """Generate a bio. Implementations never raise; they fall back to ``fallback_bio``."""


class TemplateBioGenerator(BioGenerator):
    """Bio generator that always returns the deterministic template."""

    async def generate(self, name: str, age: int | float, location_hint: str) -> str:
        return fallback_bio(name, age, location_hint)


class OpenAIBioGenerator(BioGenerator):
    """Generates bios with an OpenAI model, falling back to the template on any failure."""

    def __init__(self, client: AsyncOpenAI, model: str) -> None:
        """Initialize the generator.

        Args:
            client: Async OpenAI client, shared for the lifetime of the process
            model: Model name used for the Responses API call
        """
        self.client = client
        self.model = model

    async def generate(self, name: str, age: int | float, location_hint: str) -> str:
        prompt = build_bio_prompt(name, age, location_hint)
        try:
            response = await self.client.responses.create(
                model=self.model,
                input=prompt,
                store=False,
            )
            bio = (response.output_text or "").strip().strip('"')
            if not bio:
                raise ValueError("Model returned an empty bio")
            return bio
        except Exception as e:
            logger.error("Error generating bio for %s, using fallback: %s", name, e, exc_info=True)
            return fallback_bio(name, age, location_hint)
