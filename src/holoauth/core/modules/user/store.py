from abc import ABC, abstractmethod
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from holoauth.core.modules.counter.models import CounterType
from holoauth.core.modules.counter.service import CounterService
from holoauth.core.modules.user.models import User
from holoauth.errors import DuplicateUserError, StorageError

logger = structlog.get_logger(__name__)


class UserStore(ABC):
    """Persistent user repository.

    Lookups that find nothing return None or 0, they never raise.
    Implementations must enforce uniqueness of email and phone atomically
    in `create`, raising DuplicateUserError when a value is taken.
    """

    async def on_start(self) -> None:
        """Prepare storage on application startup."""

    async def on_stop(self) -> None:
        """Release storage resources on application shutdown."""

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    async def find_by_id(self, user_id: int) -> User | None: ...

    @abstractmethod
    async def count_by_email(self, email: str) -> int: ...

    @abstractmethod
    async def count_by_phone(self, phone: str) -> int: ...

    @abstractmethod
    async def create(self, email: str, password_hash: str, phone: str | None = None) -> User:
        """Insert a new user and return it with its assigned id.

        Raises:
            DuplicateUserError: If email or phone is already registered
            StorageError: On any other storage failure
        """


class MongoUserStore(UserStore):
    """User store backed by the `users` collection."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._collection = database.get_collection("users")
        self._counters = CounterService(database)

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._counters.on_start()
        await self._collection.create_index([("email", 1)], unique=True)
        # Users without a phone store null, which must not collide
        await self._collection.create_index(
            [("phone", 1)], unique=True, partialFilterExpression={"phone": {"$type": "string"}}
        )

    async def find_by_email(self, email: str) -> User | None:
        doc = await self._collection.find_one({"email": email})
        return User.model_validate(doc) if doc else None

    async def find_by_id(self, user_id: int) -> User | None:
        doc = await self._collection.find_one({"_id": user_id})
        return User.model_validate(doc) if doc else None

    async def count_by_email(self, email: str) -> int:
        return await self._collection.count_documents({"email": email})

    async def count_by_phone(self, phone: str) -> int:
        return await self._collection.count_documents({"phone": phone})

    async def create(self, email: str, password_hash: str, phone: str | None = None) -> User:
        try:
            user_id = await self._counters.get_next_sequence(CounterType.USER)
            user = User(id=user_id, email=email, phone=phone, password_hash=password_hash)
            await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError as e:
            raise DuplicateUserError(_duplicate_field(e)) from e
        except PyMongoError as e:
            logger.warning("user_insert_failed", email=email, error=str(e))
            raise StorageError("Failed to insert user") from e
        return user


def _duplicate_field(error: DuplicateKeyError) -> str:
    """Name the unique field that caused a duplicate key error."""
    key_pattern = (error.details or {}).get("keyPattern") or {}
    if "phone" in key_pattern:
        return "phone"
    return "email"
