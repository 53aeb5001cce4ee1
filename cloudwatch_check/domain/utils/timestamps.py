"""
Timestamp conversion utilities.

Provides epoch conversion for exposition lines and the fetch time window
calculation. Naive datetimes are treated as UTC throughout.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Return ``dt`` as an aware UTC datetime (naive values are assumed UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_epoch_ms(dt: datetime) -> int:
    """
    Convert a datetime to integer milliseconds since the Unix epoch.

    Sub-millisecond precision is truncated toward the past, matching the
    nanosecond-to-millisecond division providers use for their own clocks.

    Parameters
    ----------
    dt : datetime
        The datetime to convert

    Returns
    -------
    int
        Milliseconds since epoch

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> to_epoch_ms(datetime(2023, 10, 15, 12, 0, 0, tzinfo=timezone.utc))
    1697371200000
    """
    return (ensure_utc(dt) - _EPOCH) // timedelta(milliseconds=1)


def fetch_window(
    period_minutes: int, now: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """
    Compute the ``(start, end)`` window for a datapoint fetch.

    ``end`` is ``now`` truncated to whole seconds and ``start`` lies
    ``period_minutes`` before it.

    Parameters
    ----------
    period_minutes : int
        Window length in minutes
    now : datetime, optional
        Reference time; defaults to the current UTC time

    Returns
    -------
    tuple of datetime
        ``(start, end)`` in UTC
    """
    end = ensure_utc(now or datetime.now(timezone.utc)).replace(microsecond=0)
    start = end - timedelta(minutes=period_minutes)
    logger.debug(
        "timestamps.fetch_window",
        extra={"start": start.isoformat(), "end": end.isoformat()},
    )
    return start, end
