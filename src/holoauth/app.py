from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from holoauth.core.core import Core
from holoauth.core.modules.auth.models import AuthResult, EmailAvailability
from holoauth.core.modules.session.models import SessionToken
from holoauth.core.modules.user.models import UserView
from holoauth.core.modules.user.validators import PasswordStrength
from holoauth.errors import AuthenticationError


class App:
    """Facade for all application operations, delegating to Core services."""

    def __init__(self, core: Core) -> None:
        self._core = core

    @property
    def session_ttl_seconds(self) -> int:
        return int(self._core.sessions.ttl.total_seconds())

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def login(self, email: str, password: str) -> AuthResult:
        """Authenticate user and create session."""
        return await self._core.auth.login(email, password)

    async def register(self, email: str, password: str, confirm_password: str) -> AuthResult:
        """Create account and sign it in."""
        return await self._core.auth.register(email, password, confirm_password)

    async def logout(self, token: SessionToken | None) -> None:
        """Invalidate the caller's session, if any."""
        await self._core.auth.logout(token)

    async def is_authenticated(self, token: SessionToken | None) -> bool:
        """Check whether the token belongs to a live session."""
        return await self._core.auth.get_current_user(token) is not None

    async def get_current_user(self, token: SessionToken | None) -> UserView:
        """Get current authenticated user profile."""
        user = await self._core.auth.get_current_user(token)
        if user is None:
            raise AuthenticationError
        return UserView.from_domain(user)

    async def check_email_availability(self, email: str) -> EmailAvailability:
        return await self._core.auth.check_email_availability(email)

    def check_password_strength(self, password: str) -> PasswordStrength:
        return self._core.auth.check_password_strength(password)
