import asyncio

import structlog

from holoauth.core.modules.auth.models import AuthResult, EmailAvailability, FieldError, Outcome
from holoauth.core.modules.session.models import SessionToken
from holoauth.core.modules.session.service import SessionService
from holoauth.core.modules.user.models import User
from holoauth.core.modules.user.password import PasswordHasher
from holoauth.core.modules.user.store import UserStore
from holoauth.core.modules.user.validators import (
    PasswordStrength,
    check_password_composition,
    is_valid_email,
    passwords_match,
    score_password_strength,
)
from holoauth.errors import DuplicateUserError, HashingError, StorageError
from holoauth.utils import normalize_email

logger = structlog.get_logger(__name__)

DEMO_EMAIL = "demo@hologram.io"
DEMO_PHONE = "+1 (555) 123-4567"
DEMO_PASSWORD = "demo123"  # noqa: S105

EMAIL_REQUIRED = "Email frequency required"
EMAIL_INVALID = "Invalid frequency pattern"
EMAIL_TAKEN = "Frequency already registered"
PASSWORD_REQUIRED = "Access cipher required"
CONFIRMATION_FAILED = "Cipher confirmation failed"
USER_NOT_FOUND = "Identity not found in holomatrix"
PASSWORD_MISMATCH = "Cipher mismatch detected"


class AuthService:
    """Login, registration and logout on top of injected stores."""

    def __init__(self, users: UserStore, sessions: SessionService, hasher: PasswordHasher) -> None:
        self._users = users
        self._sessions = sessions
        self._hasher = hasher
        # Verified against when the account is unknown so both login failures cost the same
        self._dummy_hash = hasher.hash("holomatrix-placeholder")

    async def login(self, email: str, password: str) -> AuthResult:
        email = email.strip()

        errors = []
        if not email:
            errors.append(FieldError(field="email", message=EMAIL_REQUIRED))
        if not password:
            errors.append(FieldError(field="password", message=PASSWORD_REQUIRED))
        if errors:
            return AuthResult.rejected(errors)

        user = await self._users.find_by_email(normalize_email(email))
        password_hash = user.password_hash if user else self._dummy_hash
        password_ok = await asyncio.to_thread(self._hasher.verify, password_hash, password)

        if user is None:
            logger.info("login_failed", reason="unknown_email")
            return AuthResult.rejected([FieldError(field="email", message=USER_NOT_FOUND)], Outcome.UNAUTHORIZED)
        if not password_ok:
            logger.info("login_failed", reason="password_mismatch", user_id=user.id)
            return AuthResult.rejected([FieldError(field="password", message=PASSWORD_MISMATCH)], Outcome.UNAUTHORIZED)

        session = await self._sessions.create_session(user.id)
        logger.info("login_succeeded", user_id=user.id)
        return AuthResult.ok("Hologram link established", session)

    async def register(self, email: str, password: str, confirm_password: str) -> AuthResult:
        email = normalize_email(email)

        errors = []
        email_error = await self._check_email(email, taken_message=EMAIL_TAKEN)
        if email_error:
            errors.append(FieldError(field="email", message=email_error))
        errors.extend(FieldError(field="password", message=m) for m in check_password_composition(password))
        if not passwords_match(password, confirm_password):
            errors.append(FieldError(field="confirm_password", message=CONFIRMATION_FAILED))
        if errors:
            return AuthResult.rejected(errors)

        try:
            password_hash = await asyncio.to_thread(self._hasher.hash, password)
        except HashingError:
            logger.exception("registration_failed", stage="hash")
            return AuthResult.failed("Holomatrix encryption failed")

        try:
            user = await self._users.create(email, password_hash)
        except DuplicateUserError:
            # Another registration took the email between the check and the insert
            return AuthResult.rejected([FieldError(field="email", message=EMAIL_TAKEN)])
        except StorageError:
            logger.exception("registration_failed", stage="store")
            return AuthResult.failed("Failed to materialize identity")

        session = await self._sessions.create_session(user.id)
        logger.info("user_registered", user_id=user.id)
        return AuthResult.ok("Identity materialized successfully", session)

    async def logout(self, token: SessionToken | None) -> None:
        await self._sessions.destroy_session(token)

    async def check_email_availability(self, email: str) -> EmailAvailability:
        error = await self._check_email(normalize_email(email), taken_message="Frequency already in holomatrix")
        if error:
            return EmailAvailability(valid=False, message=error)
        return EmailAvailability(valid=True, message="Frequency available")

    def check_password_strength(self, password: str) -> PasswordStrength:
        return score_password_strength(password)

    async def get_current_user(self, token: SessionToken | None) -> User | None:
        """Resolve a session token to its user, or None when not signed in."""
        session = await self._sessions.get_session(token)
        if session is None:
            return None
        return await self._users.find_by_id(session.user_id)

    async def ensure_demo_user_exists(self) -> None:
        """Create the demo account if no user owns the demo phone number."""
        if await self._users.count_by_phone(DEMO_PHONE) > 0:
            return
        password_hash = await asyncio.to_thread(self._hasher.hash, DEMO_PASSWORD)
        try:
            await self._users.create(DEMO_EMAIL, password_hash, phone=DEMO_PHONE)
        except DuplicateUserError as e:
            logger.warning("demo_user_skipped", field=e.field)
            return
        logger.info("demo_user_seeded", email=DEMO_EMAIL)

    async def _check_email(self, email: str, taken_message: str) -> str | None:
        """Return the first problem with an already normalized email, if any."""
        if not email:
            return EMAIL_REQUIRED
        if not is_valid_email(email):
            return EMAIL_INVALID
        if await self._users.count_by_email(email) > 0:
            return taken_message
        return None
