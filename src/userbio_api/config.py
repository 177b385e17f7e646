"""Configuration management for the User Bio API."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from userbio.services.user_service import DEFAULT_LOCATION


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the project root.

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # src/userbio_api/config.py -> project root
    project_dir = Path(__file__).parent.parent.parent
    return str(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "user-bio-api"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 4000

    # Azure Cosmos DB
    cosmos_connection_string: str | None = None
    azure_cosmosdb_endpoint: str | None = None
    azure_cosmosdb_key: str | None = None
    database_name: str = "userbio"
    users_container: str = "users"

    # OpenAI
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"

    # Users
    bio_enrichment_enabled: bool = True
    bio_default_location: str = DEFAULT_LOCATION
    email_required_suffix: str | None = "@gmail.com"

    # Browser origins allowed to call the API (JSON list in the environment)
    cors_origins: list[str] = []

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    @property
    def cosmos_configured(self) -> bool:
        return bool(self.cosmos_connection_string or self.azure_cosmosdb_endpoint)


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
