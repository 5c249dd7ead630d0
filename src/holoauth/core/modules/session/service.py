import secrets
from collections.abc import Callable
from datetime import datetime, timedelta

import structlog

from holoauth.core.modules.session.models import Session, SessionToken
from holoauth.core.modules.session.store import SessionStore
from holoauth.utils import now

logger = structlog.get_logger(__name__)


class SessionService:
    """Service for managing user sessions.

    Sessions expire a fixed time after creation. Expiration is checked
    lazily whenever a token is resolved.
    """

    def __init__(
        self, store: SessionStore, ttl: timedelta = timedelta(hours=24), clock: Callable[[], datetime] = now
    ) -> None:
        self._store = store
        self.ttl = ttl
        self._clock = clock

    async def create_session(self, user_id: int) -> Session:
        created_at = self._clock()
        session = Session(
            token=SessionToken(secrets.token_urlsafe(32)),
            user_id=user_id,
            created_at=created_at,
            expires_at=created_at + self.ttl,
        )
        await self._store.save(session)
        logger.debug("session_created", user_id=user_id)
        return session

    async def get_session(self, token: SessionToken | None) -> Session | None:
        """Resolve a token to a live session, or None if missing, unknown or expired."""
        if not token:
            return None

        session = await self._store.load(token)
        if session is None:
            return None

        if session.is_expired(self._clock()):
            await self._store.delete(token)
            logger.debug("session_expired", user_id=session.user_id)
            return None

        return session

    async def destroy_session(self, token: SessionToken | None) -> None:
        """Invalidate a session. Unknown or missing tokens are ignored."""
        if not token:
            return
        await self._store.delete(token)
        logger.debug("session_destroyed")
