"""Field-level predicates for credentials.

Each rule is a plain function so registration, login and the live
validation endpoints can combine them as they need.
"""

import re

from pydantic import BaseModel, Field

from holoauth.utils import EMAIL_RE

MIN_PASSWORD_LENGTH = 6
STRONG_PASSWORD_LENGTH = 12
MAX_STRENGTH = 6
STRENGTH_BAR = 4

UPPERCASE_RE = re.compile(r"[A-Z]")
LOWERCASE_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"[0-9]")
SPECIAL_RE = re.compile(r'[!@#$%^&*(),.?":{}|<>]')

PASSWORD_TOO_SHORT = "Cipher must be 6+ characters"
PASSWORD_MISSING_CLASSES = "Cipher needs uppercase, lowercase, and number"


class PasswordStrength(BaseModel):
    """Advisory password score used for live feedback."""

    strength: int = Field(..., description="Number of satisfied criteria")
    max: int = Field(MAX_STRENGTH, description="Highest possible score")
    messages: list[str] = Field(default_factory=list, description="Hints for missing required criteria")
    valid: bool = Field(..., description="Whether the score reaches the acceptance bar")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email))


def has_uppercase(password: str) -> bool:
    return bool(UPPERCASE_RE.search(password))


def has_lowercase(password: str) -> bool:
    return bool(LOWERCASE_RE.search(password))


def has_digit(password: str) -> bool:
    return bool(DIGIT_RE.search(password))


def has_special(password: str) -> bool:
    return bool(SPECIAL_RE.search(password))


def check_password_composition(password: str) -> list[str]:
    """Return every violated composition rule; empty when the password is acceptable.

    Requirements:
    - At least 6 characters
    - At least one uppercase letter, one lowercase letter and one digit
    """
    violations = []
    if len(password) < MIN_PASSWORD_LENGTH:
        violations.append(PASSWORD_TOO_SHORT)
    if not (has_uppercase(password) and has_lowercase(password) and has_digit(password)):
        violations.append(PASSWORD_MISSING_CLASSES)
    return violations


def passwords_match(password: str, confirm: str) -> bool:
    return password == confirm


def score_password_strength(password: str) -> PasswordStrength:
    """Score a password from 0 to 6.

    The first four criteria are required and produce a hint when missing;
    special characters and a length of 12+ are bonus points without hints.
    """
    required = [
        (len(password) >= MIN_PASSWORD_LENGTH, "Minimum 6 characters"),
        (has_uppercase(password), "Add uppercase letter"),
        (has_lowercase(password), "Add lowercase letter"),
        (has_digit(password), "Add number"),
    ]
    bonus = [has_special(password), len(password) >= STRONG_PASSWORD_LENGTH]

    strength = sum(ok for ok, _ in required) + sum(bonus)
    messages = [message for ok, message in required if not ok]
    return PasswordStrength(strength=strength, messages=messages, valid=strength >= STRENGTH_BAR)
