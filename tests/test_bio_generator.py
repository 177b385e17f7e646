"""Unit tests for bio generation."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
from userbio.services.bio_generator import (
    MAX_BIO_WORDS,
    OpenAIBioGenerator,
    TemplateBioGenerator,
    build_bio_prompt,
    fallback_bio,
)


def make_client(**create_kwargs) -> MagicMock:
    client = MagicMock()
    client.responses.create = AsyncMock(**create_kwargs)
    return client


@pytest.mark.unit
def test_prompt_mentions_person_language_and_length() -> None:
    prompt = build_bio_prompt("Budi", 27, "Bandung")

    assert "Budi" in prompt
    assert "27 years old" in prompt
    assert "language most commonly spoken in Bandung" in prompt
    assert f"at most {MAX_BIO_WORDS} words" in prompt
    assert "sentence only" in prompt


@pytest.mark.unit
def test_fallback_is_deterministic() -> None:
    assert fallback_bio("Budi", 27, "Bandung") == "Budi is a 27-year-old from Bandung."
    assert fallback_bio("Budi", 27, "Bandung") == fallback_bio("Budi", 27, "Bandung")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_template_generator_returns_fallback() -> None:
    assert await TemplateBioGenerator().generate("Siti", 22, "Jakarta") == fallback_bio("Siti", 22, "Jakarta")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_openai_generator_returns_model_text() -> None:
    client = make_client(return_value=SimpleNamespace(output_text=' "Budi, 27, pecinta kopi dari Bandung." \n'))
    generator = OpenAIBioGenerator(client=client, model="gpt-4o-mini")

    bio = await generator.generate("Budi", 27, "Bandung")

    assert bio == "Budi, 27, pecinta kopi dari Bandung."
    client.responses.create.assert_awaited_once_with(
        model="gpt-4o-mini",
        input=build_bio_prompt("Budi", 27, "Bandung"),
        store=False,
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_openai_generator_falls_back_on_api_error() -> None:
    request = httpx.Request("POST", "https://api.openai.com/v1/responses")
    client = make_client(side_effect=openai.APIConnectionError(request=request))
    generator = OpenAIBioGenerator(client=client, model="gpt-4o-mini")

    bio = await generator.generate("Budi", 27, "Bandung")

    assert bio == "Budi is a 27-year-old from Bandung."


@pytest.mark.unit
@pytest.mark.asyncio
async def test_openai_generator_falls_back_on_empty_output() -> None:
    client = make_client(return_value=SimpleNamespace(output_text="   "))
    generator = OpenAIBioGenerator(client=client, model="gpt-4o-mini")

    assert await generator.generate("Siti", 22, "Jakarta") == "Siti is a 22-year-old from Jakarta."


@pytest.mark.unit
@pytest.mark.asyncio
async def test_openai_generator_falls_back_on_malformed_response() -> None:
    client = make_client(return_value=SimpleNamespace())
    generator = OpenAIBioGenerator(client=client, model="gpt-4o-mini")

    assert await generator.generate("Siti", 22, "Jakarta") == fallback_bio("Siti", 22, "Jakarta")
