"""
Temporal window resolution for the six degrees queries.

Turns the optional fromDate/toDate query strings into a bounded
(from_epoch, to_epoch) pair:

1. parse each date, defaulting fromDate to a week ago and toDate to now
2. if toDate is before fromDate, move fromDate to a week before toDate
3. if the window is longer than a year, cut toDate to fromDate + 1 year
"""
import logging
import re
from datetime import datetime, timedelta
from typing import Callable, NamedTuple, Optional

from dateutil.relativedelta import relativedelta

from errors import InvalidDateError
from utils.timestamp import local_now, to_epoch_seconds

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_WINDOW = timedelta(days=7)
MAX_WINDOW = relativedelta(years=1)
_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class QueryWindow(NamedTuple):
    from_epoch: int
    to_epoch: int


def parse_date(param: str, value: str) -> datetime:
    """Parse a YYYY-MM-DD string to local midnight of that day."""
    if not _DATE_SHAPE.fullmatch(value):
        raise InvalidDateError(param, value)
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError as exc:
        raise InvalidDateError(param, value) from exc


def _get_date(param: str, value: str, default: Callable[[], datetime]) -> datetime:
    if value == "":
        return default()
    return parse_date(param, value)


def resolve_window(
    from_date: str,
    to_date: str,
    now: Optional[Callable[[], datetime]] = None,
) -> QueryWindow:
    """
    Resolve the query window for the given raw date strings.

    Args:
        from_date: Raw fromDate query value ("" when absent)
        to_date: Raw toDate query value ("" when absent)
        now: Clock override, mainly for tests

    Returns:
        QueryWindow with from_epoch <= to_epoch spanning at most one year

    Raises:
        InvalidDateError: if a non-empty value is not a YYYY-MM-DD date, or
            an inverted window would start before the first representable date
    """
    clock = now or local_now

    start = _get_date("fromDate", from_date, lambda: clock() - DEFAULT_WINDOW)
    end = _get_date("toDate", to_date, clock)

    # toDate is authoritative when the window is inverted
    if end < start:
        try:
            start = end - DEFAULT_WINDOW
        except OverflowError as exc:
            raise InvalidDateError("toDate", to_date) from exc

    try:
        limit = start + MAX_WINDOW
    except (OverflowError, ValueError):
        # A year past fromDate lies beyond the last representable date,
        # so any parsed toDate is already within it.
        limit = None
    if limit is not None and limit < end:
        end = limit

    logger.debug(f"The given period is from {start.isoformat()} to {end.isoformat()}")
    return QueryWindow(to_epoch_seconds(start), to_epoch_seconds(end))
