"""User store with Cosmos DB and in-memory implementations."""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any

from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosResourceExistsError, CosmosResourceNotFoundError

from userbio.errors import DuplicateEmailError
from userbio.models.user import User

logger = logging.getLogger(__name__)

# All users share one logical partition so the /email unique key spans the whole container.
USER_PARTITION = "user"


def new_user_id() -> str:
    return uuid.uuid4().hex


class UserStore(ABC):
    """Abstract interface for user persistence."""

    backend: str = "unknown"

    @property
    @abstractmethod
    def connected(self) -> bool:
        """Whether the underlying store is reachable."""

    @abstractmethod
    def insert(self, fields: dict[str, Any]) -> User:
        """Persist a new user and return it with its assigned id.

        Raises:
            DuplicateEmailError: If another user already has the email
        """

    @abstractmethod
    def find_all(self) -> list[User]:
        """List all users."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> User | None:
        """Get a user by ID."""

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""

    @abstractmethod
    def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        """Apply changes to a user and return the post-update record.

        Returns:
            The updated user, or None if no user has the ID

        Raises:
            DuplicateEmailError: If the new email belongs to another user
        """

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Delete a user. Returns False if no user has the ID."""


class CosmosUserStore(UserStore):
    """Cosmos DB implementation of UserStore."""

    backend = "cosmos"

    def __init__(self, container: ContainerProxy) -> None:
        """Initialize the store.

        Args:
            container: Users container, partitioned on /pk with a unique key on /email
        """
        self.container = container
        self._connected = True

    @property
    def connected(self) -> bool:
        return self._connected

    def mark_disconnected(self) -> None:
        self._connected = False

    def insert(self, fields: dict[str, Any]) -> User:
        user_doc = {
            **fields,
            "id": new_user_id(),
            "pk": USER_PARTITION,
        }
        try:
            created = self.container.create_item(body=user_doc)
        except CosmosResourceExistsError as e:
            logger.info("Unique key conflict inserting user with email %s", fields.get("email"))
            raise DuplicateEmailError() from e
        return User.model_validate(created)

    def find_all(self) -> list[User]:
        items = self.container.query_items(
            query="SELECT * FROM c WHERE c.pk = @pk",
            parameters=[{"name": "@pk", "value": USER_PARTITION}],
            partition_key=USER_PARTITION,
        )
        return [User.model_validate(item) for item in items]

    def _read_doc(self, user_id: str) -> dict[str, Any] | None:
        try:
            return self.container.read_item(item=user_id, partition_key=USER_PARTITION)
        except CosmosResourceNotFoundError:
            return None

    def find_by_id(self, user_id: str) -> User | None:
        user_doc = self._read_doc(user_id)
        if user_doc is None:
            return None
        return User.model_validate(user_doc)

    def find_by_email(self, email: str) -> User | None:
        items = list(
            self.container.query_items(
                query="SELECT * FROM c WHERE c.pk = @pk AND c.email = @email",
                parameters=[
                    {"name": "@pk", "value": USER_PARTITION},
                    {"name": "@email", "value": email},
                ],
                partition_key=USER_PARTITION,
            )
        )
        if not items:
            return None
        return User.model_validate(items[0])

    def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        user_doc = self._read_doc(user_id)
        if user_doc is None:
            return None

        # System properties (_rid, _etag, ...) are not part of the document body
        body = {key: value for key, value in user_doc.items() if not key.startswith("_")}
        body.update(changes)
        body["id"] = user_id
        body["pk"] = USER_PARTITION

        try:
            updated = self.container.replace_item(item=user_id, body=body)
        except CosmosResourceNotFoundError:
            return None
        except CosmosResourceExistsError as e:
            logger.info("Unique key conflict updating user %s", user_id)
            raise DuplicateEmailError() from e
        return User.model_validate(updated)

    def delete(self, user_id: str) -> bool:
        try:
            self.container.delete_item(item=user_id, partition_key=USER_PARTITION)
            return True
        except CosmosResourceNotFoundError:
            return False


class InMemoryUserStore(UserStore):
    """In-memory user store for local development and tests."""

    backend = "memory"

    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    @property
    def connected(self) -> bool:
        return True

    def _email_taken(self, email: str, exclude_id: str | None = None) -> bool:
        return any(user.email == email and user.id != exclude_id for user in self.users.values())

    def insert(self, fields: dict[str, Any]) -> User:
        if self._email_taken(fields["email"]):
            raise DuplicateEmailError()
        user = User(**{**fields, "id": new_user_id()})
        self.users[user.id] = user
        return user

    def find_all(self) -> list[User]:
        return list(self.users.values())

    def find_by_id(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        return next((user for user in self.users.values() if user.email == email), None)

    def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        existing = self.users.get(user_id)
        if existing is None:
            return None
        if "email" in changes and self._email_taken(changes["email"], exclude_id=user_id):
            raise DuplicateEmailError()
        updated = User(**{**existing.model_dump(), **changes, "id": user_id})
        self.users[user_id] = updated
        return updated

    def delete(self, user_id: str) -> bool:
        if user_id in self.users:
            del self.users[user_id]
            return True
        return False
