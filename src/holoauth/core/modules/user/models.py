from datetime import datetime

from pydantic import BaseModel, Field

from holoauth.core.db import MongoModel
from holoauth.utils import now


class User(MongoModel):
    """User domain model with credentials.

    Indexed on email - unique, phone - unique among documents that have one.
    """

    email: str  # lowercase, trimmed
    phone: str | None = None  # only set by seeding
    password_hash: str  # bcrypt hash
    created_at: datetime = Field(default_factory=now)


class UserView(BaseModel):
    """User account information (API representation)."""

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    phone: str | None = Field(None, description="Phone number, if any")
    created_at: datetime = Field(..., description="Registration time")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(id=user.id, email=user.email, phone=user.phone, created_at=user.created_at)
