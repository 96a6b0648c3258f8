# app/shared/utils/datetime_utils.py

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Return `value` as an aware UTC datetime.

    SQLite hands back the stored UTC timestamps without their offset;
    those are tagged as UTC, aware values are converted.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Datetime that always serializes with a UTC offset, whatever the backend
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
