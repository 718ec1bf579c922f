"""
Utility functions for timestamp conversions.
"""
from datetime import datetime


def local_now() -> datetime:
    """
    Get the current local wall-clock time as a naive datetime.

    Query windows are expressed in the same naive local time as parsed
    calendar dates, so both sides of a comparison share one clock.
    """
    return datetime.now()


def to_epoch_seconds(value: datetime) -> int:
    """
    Convert a datetime to whole Unix seconds.

    Naive datetimes are interpreted as local time.
    """
    return int(value.timestamp())
