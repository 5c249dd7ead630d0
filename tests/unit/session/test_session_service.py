"""Tests for session lifecycle and lazy expiration."""

from datetime import timedelta

from holoauth.core.modules.session.models import SessionToken


class TestCreateSession:
    """Tests for creating sessions."""

    async def test_binds_user_and_sets_expiry(self, session_service, clock):
        """Test that a new session is bound to the user and expires after the TTL."""
        session = await session_service.create_session(42)
        assert session.user_id == 42
        assert session.created_at == clock.current
        assert session.expires_at == clock.current + timedelta(hours=24)

    async def test_tokens_are_unique_and_opaque(self, session_service):
        """Test that each session gets a fresh random token."""
        first = await session_service.create_session(1)
        second = await session_service.create_session(1)
        assert first.token != second.token
        assert len(first.token) >= 32


class TestGetSession:
    """Tests for resolving tokens to sessions."""

    async def test_resolves_live_session(self, session_service):
        """Test that a live token resolves to its session."""
        created = await session_service.create_session(7)
        session = await session_service.get_session(created.token)
        assert session is not None
        assert session.user_id == 7

    async def test_missing_token(self, session_service):
        """Test that a missing or empty token resolves to None."""
        assert await session_service.get_session(None) is None
        assert await session_service.get_session(SessionToken("")) is None

    async def test_unknown_token(self, session_service):
        """Test that an unknown token resolves to None."""
        assert await session_service.get_session(SessionToken("nope")) is None

    async def test_valid_until_just_before_expiry(self, session_service, clock):
        """Test that a session is valid right up to its expiry."""
        created = await session_service.create_session(7)
        clock.advance(timedelta(hours=24) - timedelta(seconds=1))
        assert await session_service.get_session(created.token) is not None

    async def test_expired_session_is_absent_and_removed(self, session_service, session_store, clock):
        """Test that an expired session resolves to None and is deleted."""
        created = await session_service.create_session(7)
        clock.advance(timedelta(hours=24))
        assert await session_service.get_session(created.token) is None
        assert await session_store.load(created.token) is None

    async def test_access_does_not_extend_expiry(self, session_service, clock):
        """Test that reading a session does not push back its expiry."""
        created = await session_service.create_session(7)
        clock.advance(timedelta(hours=23))
        assert await session_service.get_session(created.token) is not None
        clock.advance(timedelta(hours=1))
        assert await session_service.get_session(created.token) is None


class TestDestroySession:
    """Tests for destroying sessions."""

    async def test_token_becomes_unusable(self, session_service):
        """Test that a destroyed token no longer resolves."""
        created = await session_service.create_session(7)
        await session_service.destroy_session(created.token)
        assert await session_service.get_session(created.token) is None

    async def test_destroy_is_idempotent(self, session_service):
        """Test that destroying missing or already destroyed sessions is a no-op."""
        created = await session_service.create_session(7)
        await session_service.destroy_session(created.token)
        await session_service.destroy_session(created.token)
        await session_service.destroy_session(SessionToken("unknown"))
        await session_service.destroy_session(None)

    async def test_other_sessions_survive(self, session_service):
        """Test that destroying one session leaves others intact."""
        first = await session_service.create_session(1)
        second = await session_service.create_session(2)
        await session_service.destroy_session(first.token)
        assert await session_service.get_session(second.token) is not None
