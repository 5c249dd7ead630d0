"""Shared pytest fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from fakes import InMemoryUserStore

from holoauth.core.modules.auth.service import AuthService
from holoauth.core.modules.session.service import SessionService
from holoauth.core.modules.session.store import MemorySessionStore
from holoauth.core.modules.user.password import PasswordHasher


class FakeClock:
    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=UTC)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def hasher():
    """Cheapest bcrypt cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_store():
    """Create an empty in-memory user store."""
    return InMemoryUserStore()


@pytest.fixture
def session_store():
    """Create an empty in-memory session store."""
    return MemorySessionStore()


@pytest.fixture
def clock():
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def session_service(session_store, clock):
    """Create a session service with a 24 hour TTL on the fake clock."""
    return SessionService(session_store, ttl=timedelta(hours=24), clock=clock)


@pytest.fixture
def auth_service(user_store, session_service, hasher):
    """Create an auth service over the in-memory stores."""
    return AuthService(user_store, session_service, hasher)


@pytest.fixture
async def demo_user(auth_service, user_store):
    """Register demo@hologram.io / Demo123 and return the stored user."""
    result = await auth_service.register("demo@hologram.io", "Demo123", "Demo123")
    assert result.success
    return await user_store.find_by_email("demo@hologram.io")
