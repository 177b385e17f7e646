"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from userbio.services.bio_generator import BioGenerator
from userbio.services.user_store import InMemoryUserStore
from userbio_api.config import Settings
from userbio_api.main import create_app
from userbio_api.services import get_bio_generator


class StubBioGenerator(BioGenerator):
    """Deterministic bio generator that records its calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int | float, str]] = []

    async def generate(self, name: str, age: int | float, location_hint: str) -> str:
        self.calls.append((name, age, location_hint))
        return f"{name}, {age}, enjoys life in {location_hint}."


@pytest.fixture
def settings() -> Settings:
    """Settings with no env file, no Cosmos DB and no OpenAI key."""
    return Settings(
        _env_file=None,
        environment="test",
        cosmos_connection_string=None,
        azure_cosmosdb_endpoint=None,
        azure_cosmosdb_key=None,
        openai_api_key=None,
    )


@pytest.fixture
def bio_generator() -> StubBioGenerator:
    return StubBioGenerator()


@pytest.fixture
def app(settings: Settings, bio_generator: StubBioGenerator) -> FastAPI:
    """Create the application with the stub bio generator."""
    application = create_app(settings)
    application.dependency_overrides[get_bio_generator] = lambda: bio_generator
    return application


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a FastAPI test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(app: FastAPI, client: TestClient) -> InMemoryUserStore:
    """The in-memory store opened by the application lifespan."""
    return app.state.user_store


@pytest.fixture
def user_payload() -> dict:
    return {
        "name": "Budi Santoso",
        "email": "budi.santoso@gmail.com",
        "age": 27,
        "address": "Bandung",
    }
