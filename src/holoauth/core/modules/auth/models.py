from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field

from holoauth.core.modules.session.models import Session


class Outcome(StrEnum):
    """How an auth operation ended, for mapping to transport status codes."""

    OK = "ok"
    INVALID = "invalid"  # user-correctable input errors
    UNAUTHORIZED = "unauthorized"  # unknown account or wrong password
    SERVER_ERROR = "server_error"


class FieldError(BaseModel):
    """A user-correctable problem with one form field."""

    field: str = Field(..., description="Form field name")
    message: str = Field(..., description="Human-readable message")


class AuthResult(BaseModel):
    """Outcome of login or registration.

    A failure carries either field errors or, for server-side failures,
    a message only. A success carries a message and the new session.
    """

    success: bool
    message: str | None = None
    errors: list[FieldError] | None = None
    outcome: Outcome = Field(Outcome.OK, exclude=True)
    session: Session | None = Field(None, exclude=True)

    @classmethod
    def ok(cls, message: str, session: Session) -> Self:
        return cls(success=True, message=message, session=session)

    @classmethod
    def rejected(cls, errors: list[FieldError], outcome: Outcome = Outcome.INVALID) -> Self:
        return cls(success=False, errors=errors, outcome=outcome)

    @classmethod
    def failed(cls, message: str) -> Self:
        return cls(success=False, message=message, outcome=Outcome.SERVER_ERROR)


class EmailAvailability(BaseModel):
    """Result of the live email check."""

    valid: bool = Field(..., description="Whether the email can be registered")
    message: str = Field(..., description="Human-readable explanation")
