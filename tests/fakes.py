"""In-memory stand-ins for storage collaborators."""

import asyncio
from itertools import count

from holoauth.core.modules.user.models import User
from holoauth.core.modules.user.store import UserStore
from holoauth.errors import DuplicateUserError, StorageError


class InMemoryUserStore(UserStore):
    """User store with the same uniqueness guarantees as the MongoDB one."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.fail_on_create = False
        self._ids = count(1)
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    async def count_by_email(self, email: str) -> int:
        return sum(1 for u in self.users.values() if u.email == email)

    async def count_by_phone(self, phone: str) -> int:
        return sum(1 for u in self.users.values() if u.phone == phone)

    async def create(self, email: str, password_hash: str, phone: str | None = None) -> User:
        async with self._lock:
            if self.fail_on_create:
                raise StorageError("disk full")
            if await self.count_by_email(email):
                raise DuplicateUserError("email")
            if phone is not None and await self.count_by_phone(phone):
                raise DuplicateUserError("phone")
            user = User(id=next(self._ids), email=email, phone=phone, password_hash=password_hash)
            self.users[user.id] = user
            return user
