#!/usr/bin/env python3
"""
Datetime Utility Functions

Centralized datetime parsing and window calculations shared by the
transformers, aggregator and reporter.

Handles common patterns:
- ClickUp epoch-millisecond timestamps (sent as strings)
- ISO 8601 output in JavaScript toISOString() form
- Trailing-day and year-to-date window cutoffs
"""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_epoch_millis(value: str | int | float | None) -> datetime | None:
    """
    Parse a ClickUp epoch-millisecond timestamp to a UTC datetime.

    ClickUp returns timestamps as strings of milliseconds since the epoch:
    Example: "1771243200000"

    Args:
        value: Millisecond timestamp (string or number), or None

    Returns:
        Timezone-aware UTC datetime, or None if input is None or empty

    Raises:
        ValueError: If the value is not a number

    Examples:
        >>> parse_epoch_millis("1770717600000")
        datetime.datetime(2026, 2, 10, 10, 0, tzinfo=datetime.timezone.utc)

        >>> parse_epoch_millis(None)
        None
    """
    if value is None or value == "":
        return None

    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"Timestamp must be a string or number, got {type(value)}")

    try:
        millis = float(value)
    except ValueError as e:
        raise ValueError(f"Invalid epoch timestamp: {value}") from e

    if millis != millis or millis in (float("inf"), float("-inf")):
        raise ValueError(f"Invalid epoch timestamp: {value}")

    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise ValueError(f"Epoch timestamp out of range: {value}") from e


def to_iso_timestamp(value: datetime) -> str:
    """
    Format a datetime as UTC ISO 8601 with millisecond precision and 'Z' suffix.

    Naive datetimes are assumed to be UTC.

    Examples:
        >>> to_iso_timestamp(datetime(2026, 2, 10, 10, 0, tzinfo=UTC))
        '2026-02-10T10:00:00.000Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)

    utc_value = value.astimezone(UTC)
    return utc_value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc_value.microsecond // 1000:03d}Z"


def days_ago(days: int, reference_time: datetime | None = None) -> datetime:
    """
    Cutoff for a trailing window of N days ending at reference_time (default: now).

    Examples:
        >>> days_ago(7, datetime(2026, 2, 10, tzinfo=UTC))
        datetime.datetime(2026, 2, 3, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if reference_time is None:
        reference_time = datetime.now(UTC)

    return reference_time - timedelta(days=days)


def start_of_year(reference_time: datetime | None = None) -> datetime:
    """
    Midnight on January 1st of reference_time's year, in reference_time's timezone.

    A naive or missing reference time is interpreted in the local timezone.
    """
    if reference_time is None:
        reference_time = datetime.now().astimezone()
    elif reference_time.tzinfo is None:
        reference_time = reference_time.astimezone()

    return reference_time.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
