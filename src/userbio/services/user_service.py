"""User record service: CRUD over a UserStore with optional bio enrichment."""

import logging

from fastapi.concurrency import run_in_threadpool

from userbio.errors import DuplicateEmailError, InvalidEmailError, UserNotFoundError
from userbio.models.user import User, UserCreate, UserUpdate
from userbio.services.bio_generator import BioGenerator
from userbio.services.user_store import UserStore

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Indonesia"


class UserRecordService:
    """Create, list, get, update and delete users.

    Expected failures are raised as ``UserServiceError`` subclasses; store
    failures propagate unchanged and are reported as internal errors by the
    API layer.

    Store calls are blocking. The synchronous methods are meant to run in a
    worker thread (plain ``def`` route handlers); the async methods push their
    store calls onto the threadpool and only await the bio generator on the
    event loop.
    """

    def __init__(
        self,
        store: UserStore,
        bio_generator: BioGenerator | None = None,
        email_required_suffix: str | None = None,
        default_location: str = DEFAULT_LOCATION,
    ) -> None:
        """Initialize the service.

        Args:
            store: Process-wide user store
            bio_generator: Enrichment capability; None disables bio generation
            email_required_suffix: Emails must end with this suffix when set
            default_location: Location hint for users without an address
        """
        self.store = store
        self.bio_generator = bio_generator
        self.email_required_suffix = email_required_suffix or None
        self.default_location = default_location

    def check_email(self, email: str) -> None:
        if self.email_required_suffix and not email.lower().endswith(self.email_required_suffix.lower()):
            raise InvalidEmailError(f"Email must use {self.email_required_suffix}")

    async def _generate_bio(self, name: str, age: int | float, address: str | None) -> str | None:
        if self.bio_generator is None:
            return None
        return await self.bio_generator.generate(name, age, address or self.default_location)

    async def create_user(self, payload: UserCreate) -> User:
        fields = payload.model_dump()
        self.check_email(fields["email"])

        if await run_in_threadpool(self.store.find_by_email, fields["email"]) is not None:
            raise DuplicateEmailError()

        if not fields.get("bio"):
            bio = await self._generate_bio(fields["name"], fields["age"], fields.get("address"))
            if bio:
                fields["bio"] = bio

        user = await run_in_threadpool(self.store.insert, fields)
        logger.info("Created user %s", user.id)
        return user

    def list_users(self) -> list[User]:
        users = self.store.find_all()
        if not users:
            logger.info("Users data Not Found")
        return users

    def get_user(self, user_id: str) -> User:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def update_user(self, user_id: str, payload: UserUpdate) -> User:
        existing = await run_in_threadpool(self.get_user, user_id)
        changes = payload.changes()

        if "email" in changes:
            self.check_email(changes["email"])

        if ("name" in changes or "age" in changes) and "bio" not in changes:
            bio = await self._generate_bio(
                changes.get("name", existing.name),
                changes.get("age", existing.age),
                changes.get("address", existing.address),
            )
            if bio:
                changes["bio"] = bio

        updated = await run_in_threadpool(self.store.update, user_id, changes)
        if updated is None:
            # Deleted between the existence check and the write
            raise UserNotFoundError()
        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def delete_user(self, user_id: str) -> None:
        self.get_user(user_id)
        if not self.store.delete(user_id):
            raise UserNotFoundError()
        logger.info("Deleted user %s", user_id)
