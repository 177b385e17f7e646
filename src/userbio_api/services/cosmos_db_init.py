"""Cosmos DB initialization and user store lifecycle."""

import logging
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from typing import Any

from azure.cosmos import ContainerProxy, CosmosClient, DatabaseProxy, PartitionKey
from azure.identity import DefaultAzureCredential
from userbio.services.user_store import CosmosUserStore, InMemoryUserStore, UserStore
from userbio_api.config import Settings

logger = logging.getLogger(__name__)

USERS_PARTITION_KEY_PATH = "/pk"
USERS_UNIQUE_KEY_POLICY = {"uniqueKeys": [{"paths": ["/email"]}]}


class CosmosDbInitializer:
    """Connect to Cosmos DB and create the database and users container if they don't exist."""

    def __init__(self, settings: Settings):
        """Initialize the Cosmos DB initializer.

        Args:
            settings: Application settings with Cosmos DB configuration
        """
        self.settings = settings
        self.client: CosmosClient | None = None
        self.database: DatabaseProxy | None = None
        self._exit_stack = ExitStack()

    @property
    def is_emulator(self) -> bool:
        target = self.settings.cosmos_connection_string or self.settings.azure_cosmosdb_endpoint or ""
        return "localhost" in target.lower() or "127.0.0.1" in target

    def connect(self) -> CosmosClient:
        """Create connection to Cosmos DB.

        Prefers the connection string, then endpoint + key, then endpoint with
        managed identity.
        """
        if self.settings.cosmos_connection_string:
            client = CosmosClient.from_connection_string(self.settings.cosmos_connection_string)
            logger.info("Connecting to Cosmos DB using connection string")
        elif self.settings.azure_cosmosdb_endpoint and self.settings.azure_cosmosdb_key:
            client = CosmosClient(
                url=self.settings.azure_cosmosdb_endpoint,
                credential=self.settings.azure_cosmosdb_key,
            )
            logger.info("Connecting to Cosmos DB at %s", self.settings.azure_cosmosdb_endpoint)
        elif self.settings.azure_cosmosdb_endpoint:
            client = CosmosClient(self.settings.azure_cosmosdb_endpoint, DefaultAzureCredential())
            logger.info("Connecting to Cosmos DB at %s with managed identity", self.settings.azure_cosmosdb_endpoint)
        else:
            raise ValueError("COSMOS_CONNECTION_STRING or AZURE_COSMOSDB_ENDPOINT is required")

        self.client = self._exit_stack.enter_context(client)
        return self.client

    def initialize_database(self) -> DatabaseProxy:
        """Create database if it doesn't exist."""
        if self.client is None:
            raise RuntimeError("connect() must be called before initialize_database()")

        self.database = self.client.create_database_if_not_exists(id=self.settings.database_name)
        logger.info("Database '%s' initialized", self.settings.database_name)
        return self.database

    def initialize_users_container(self) -> ContainerProxy:
        """Create the users container if it doesn't exist."""
        if self.database is None:
            raise RuntimeError("initialize_database() must be called before initialize_users_container()")

        options: dict[str, Any] = {
            "id": self.settings.users_container,
            "partition_key": PartitionKey(path=USERS_PARTITION_KEY_PATH),
            "unique_key_policy": USERS_UNIQUE_KEY_POLICY,
        }
        # Emulator requires provisioned throughput
        if self.is_emulator:
            options["offer_throughput"] = 400

        container = self.database.create_container_if_not_exists(**options)
        logger.info(
            "Container '%s' initialized with partition key '%s' and unique key '/email'",
            self.settings.users_container,
            USERS_PARTITION_KEY_PATH,
        )
        return container

    def initialize(self) -> ContainerProxy:
        """Run full initialization: connect, create database and users container."""
        self.connect()
        self.initialize_database()
        container = self.initialize_users_container()
        logger.info("Cosmos DB initialization completed successfully")
        return container

    def close(self) -> None:
        self._exit_stack.close()
        self.client = None
        self.database = None


@contextmanager
def open_user_store(settings: Settings) -> Iterator[UserStore]:
    """Open the process-wide user store for the lifetime of the application.

    Falls back to an in-memory store when Cosmos DB is not configured, or
    when initialization fails outside production.

    Args:
        settings: Application settings

    Yields:
        UserStore instance
    """
    if not settings.cosmos_configured:
        logger.warning("Cosmos DB not configured. Using in-memory user store.")
        yield InMemoryUserStore()
        return

    initializer = CosmosDbInitializer(settings)
    try:
        container = initializer.initialize()
    except Exception as e:
        logger.error("Failed to initialize Cosmos DB: %s", e)
        initializer.close()
        if settings.environment == "production":
            raise
        logger.warning("Continuing with in-memory user store (development mode)")
        yield InMemoryUserStore()
        return

    store = CosmosUserStore(container)
    try:
        yield store
    finally:
        store.mark_disconnected()
        initializer.close()
        logger.info("Cosmos DB connection closed")
