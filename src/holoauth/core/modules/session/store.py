import asyncio
from abc import ABC, abstractmethod
from typing import Any

from pymongo.asynchronous.database import AsyncDatabase

from holoauth.core.modules.session.models import Session, SessionToken


class SessionStore(ABC):
    """Owns all session records, keyed by token."""

    async def on_start(self) -> None:
        """Prepare storage on application startup."""

    @abstractmethod
    async def save(self, session: Session) -> None: ...

    @abstractmethod
    async def load(self, token: SessionToken) -> Session | None: ...

    @abstractmethod
    async def delete(self, token: SessionToken) -> None:
        """Remove a session; deleting an unknown token is a no-op."""


class MemorySessionStore(SessionStore):
    """Process-local session storage.

    Sessions that expired without being looked up again are dropped
    whenever a new session is saved.
    """

    def __init__(self) -> None:
        self._sessions: dict[SessionToken, Session] = {}
        self._lock = asyncio.Lock()

    async def save(self, session: Session) -> None:
        async with self._lock:
            expired = [t for t, s in self._sessions.items() if s.is_expired(session.created_at)]
            for token in expired:
                del self._sessions[token]
            self._sessions[session.token] = session

    async def load(self, token: SessionToken) -> Session | None:
        async with self._lock:
            return self._sessions.get(token)

    async def delete(self, token: SessionToken) -> None:
        async with self._lock:
            self._sessions.pop(token, None)


class MongoSessionStore(SessionStore):
    """Session storage backed by the `sessions` collection."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._collection = database.get_collection("sessions")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._collection.create_index([("token", 1)], unique=True)
        # MongoDB removes expired documents on its own schedule; validity is still checked on access
        await self._collection.create_index([("expires_at", 1)], expireAfterSeconds=0)

    async def save(self, session: Session) -> None:
        await self._collection.replace_one({"token": session.token}, session.model_dump(), upsert=True)

    async def load(self, token: SessionToken) -> Session | None:
        doc = await self._collection.find_one({"token": token})
        return Session.model_validate(doc) if doc else None

    async def delete(self, token: SessionToken) -> None:
        await self._collection.delete_one({"token": token})
