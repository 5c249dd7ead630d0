import re
from datetime import UTC, datetime

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


def normalize_email(value: str) -> str:
    return value.strip().lower()


def now() -> datetime:
    return datetime.now(UTC)
