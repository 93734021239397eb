"""Time helpers shared by the scheduler.

All datetimes are naive UTC (see ``vocab_srs.config.utcnow``). A day is a
fixed 86,400 seconds with no calendar or daylight-saving adjustment.
"""

from datetime import UTC, datetime, timedelta

SECONDS_PER_DAY = 24 * 60 * 60
DAY = timedelta(seconds=SECONDS_PER_DAY)


def days(count: int) -> timedelta:
    """Return a duration of ``count`` whole days."""
    return timedelta(seconds=count * SECONDS_PER_DAY)


def as_naive_utc(date: datetime) -> datetime:
    """Return ``date`` as a naive UTC datetime.

    Aware datetimes are converted to UTC first; naive ones are assumed to
    already be UTC and are returned unchanged.
    """
    if date.tzinfo is None:
        return date
    return date.astimezone(UTC).replace(tzinfo=None)


def to_timestamp(date: datetime) -> int:
    """Convert a datetime to whole seconds since the Unix epoch.

    Naive datetimes are read as UTC.
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=UTC)
    return int(date.astimezone(UTC).timestamp())


def from_timestamp(ts: int) -> datetime:
    """Convert seconds since the Unix epoch to a naive UTC datetime."""
    return datetime.fromtimestamp(ts, UTC).replace(tzinfo=None)
