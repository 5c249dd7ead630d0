"""Auto-incrementing counters for sequential numbering."""

from enum import StrEnum

from pydantic import BaseModel


class CounterType(StrEnum):
    """Types of entities that use sequential numbering."""

    USER = "user"


class Counter(BaseModel):
    """Atomic counter for sequential ids.

    Uses MongoDB atomic operations to prevent duplicates.
    Indexed on counter_type - unique.
    """

    counter_type: CounterType
    seq: int = 0  # Current value; next number will be seq + 1
