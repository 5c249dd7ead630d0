"""Session management models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel

SessionToken = NewType("SessionToken", str)


class Session(BaseModel):
    """Server-side session binding an opaque token to a user.

    Indexed on token - unique, expires_at (TTL housekeeping).
    """

    token: SessionToken
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, at: datetime) -> bool:
        return at >= self.expires_at
