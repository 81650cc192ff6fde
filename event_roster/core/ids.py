"""Id allocation and timestamp helpers.

Ids are plain integers, one past the current maximum of a collection.
They are not reserved: once a collection is emptied allocation starts
again at 1.

All timestamps are timezone-aware UTC datetimes.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Protocol


class HasId(Protocol):
    id: int


def next_id(records: Iterable[HasId]) -> int:
    """Return the next free id for *records* (``1`` when empty)."""
    return max((record.id for record in records), default=0) + 1


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)
