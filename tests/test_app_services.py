"""Tests for store lifecycle and service wiring."""

from unittest.mock import MagicMock

import pytest
from userbio.services.bio_generator import OpenAIBioGenerator, TemplateBioGenerator
from userbio.services.user_service import DEFAULT_LOCATION, UserRecordService
from userbio.services.user_store import CosmosUserStore, InMemoryUserStore
from userbio_api.config import Settings
from userbio_api.services import build_bio_generator
from userbio_api.services.cosmos_db_init import USERS_UNIQUE_KEY_POLICY, CosmosDbInitializer, open_user_store


@pytest.mark.unit
def test_build_bio_generator_disabled(settings: Settings) -> None:
    settings.bio_enrichment_enabled = False
    assert build_bio_generator(settings) is None


@pytest.mark.unit
def test_build_bio_generator_without_key_uses_template(settings: Settings) -> None:
    assert isinstance(build_bio_generator(settings), TemplateBioGenerator)


@pytest.mark.unit
def test_build_bio_generator_with_key(settings: Settings) -> None:
    settings.openai_api_key = "sk-test"
    settings.openai_model = "gpt-4o-mini"

    generator = build_bio_generator(settings)

    assert isinstance(generator, OpenAIBioGenerator)
    assert generator.model == "gpt-4o-mini"


@pytest.mark.unit
def test_open_user_store_without_cosmos_uses_memory(settings: Settings) -> None:
    with open_user_store(settings) as store:
        assert isinstance(store, InMemoryUserStore)
        assert store.connected is True


@pytest.mark.unit
def test_open_user_store_with_cosmos(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    settings.cosmos_connection_string = "AccountEndpoint=https://example.documents.azure.com:443/;AccountKey=a2V5;"
    container = MagicMock()
    monkeypatch.setattr(CosmosDbInitializer, "initialize", lambda self: container)

    with open_user_store(settings) as store:
        assert isinstance(store, CosmosUserStore)
        assert store.container is container
        assert store.connected is True

    assert store.connected is False


@pytest.mark.unit
def test_open_user_store_falls_back_outside_production(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    settings.azure_cosmosdb_endpoint = "https://example.documents.azure.com:443/"

    def fail(self):
        raise ConnectionError("unreachable")

    monkeypatch.setattr(CosmosDbInitializer, "initialize", fail)

    with open_user_store(settings) as store:
        assert isinstance(store, InMemoryUserStore)


@pytest.mark.unit
def test_open_user_store_fails_in_production(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    settings.environment = "production"
    settings.azure_cosmosdb_endpoint = "https://example.documents.azure.com:443/"

    def fail(self):
        raise ConnectionError("unreachable")

    monkeypatch.setattr(CosmosDbInitializer, "initialize", fail)

    with pytest.raises(ConnectionError):
        with open_user_store(settings):
            pass


@pytest.mark.unit
def test_initializer_creates_users_container(settings: Settings) -> None:
    settings.cosmos_connection_string = "AccountEndpoint=https://localhost:8081/;AccountKey=a2V5;"
    initializer = CosmosDbInitializer(settings)
    initializer.client = MagicMock()

    database = initializer.initialize_database()
    initializer.initialize_users_container()

    initializer.client.create_database_if_not_exists.assert_called_once_with(id="userbio")
    kwargs = database.create_container_if_not_exists.call_args.kwargs
    assert kwargs["id"] == "users"
    assert kwargs["unique_key_policy"] == USERS_UNIQUE_KEY_POLICY
    assert kwargs["offer_throughput"] == 400


@pytest.mark.unit
def test_initializer_requires_connection(settings: Settings) -> None:
    with pytest.raises(RuntimeError):
        CosmosDbInitializer(settings).initialize_database()


@pytest.mark.unit
def test_default_location_matches_service_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BIO_DEFAULT_LOCATION", raising=False)

    settings = Settings(_env_file=None)

    assert settings.bio_default_location == DEFAULT_LOCATION
    assert UserRecordService(store=InMemoryUserStore()).default_location == settings.bio_default_location
