from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any
from urllib.parse import urlparse

from pymongo import AsyncMongoClient

from holoauth.config import Config
from holoauth.core.modules.auth.service import AuthService
from holoauth.core.modules.session.service import SessionService
from holoauth.core.modules.session.store import MemorySessionStore, MongoSessionStore, SessionStore
from holoauth.core.modules.user.password import PasswordHasher
from holoauth.core.modules.user.store import MongoUserStore, UserStore


class Core:
    """Container providing config, stores, and the services built on them."""

    config: Config
    users: UserStore
    session_store: SessionStore
    sessions: SessionService
    auth: AuthService

    def __init__(
        self,
        config: Config,
        users: UserStore,
        session_store: SessionStore,
        mongo_client: AsyncMongoClient[dict[str, Any]] | None = None,
    ) -> None:
        """Wire services on top of the given stores."""
        self.config = config
        self.users = users
        self.session_store = session_store
        self._mongo_client = mongo_client
        self.sessions = SessionService(session_store, ttl=timedelta(hours=config.session_ttl_hours))
        self.auth = AuthService(users, self.sessions, PasswordHasher(rounds=config.bcrypt_rounds))

    @classmethod
    def from_config(cls, config: Config) -> Core:
        """Build a core backed by MongoDB as described by the config."""
        mongo_client: AsyncMongoClient[dict[str, Any]] = AsyncMongoClient(config.database_url, tz_aware=True)
        database = mongo_client.get_database(urlparse(config.database_url).path[1:])
        session_store: SessionStore
        if config.session_backend == "mongo":
            session_store = MongoSessionStore(database)
        else:
            session_store = MemorySessionStore()
        return cls(config, MongoUserStore(database), session_store, mongo_client=mongo_client)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Prepare stores and seed the demo user."""
        await self.users.on_start()
        await self.session_store.on_start()
        if self.config.seed_demo_user:
            await self.auth.ensure_demo_user_exists()

    async def on_stop(self) -> None:
        """Release stores and close the MongoDB connection on shutdown."""
        await self.users.on_stop()
        if self._mongo_client is not None:
            await self._mongo_client.aclose()
