from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class AuthenticationError(UserError):
    """Raised when the caller has no valid session."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class SystemFailure(Exception):
    """Base class for server-side failures.

    Messages of these errors are never shown to the user.
    """


class HashingError(SystemFailure):
    """Raised when a password digest cannot be produced."""


class StorageError(SystemFailure):
    """Raised when the user store fails for a reason other than a uniqueness conflict."""


class DuplicateUserError(Exception):
    """Raised by a user store when a unique field is already taken."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Duplicate value for '{field}'")
        self.field = field
