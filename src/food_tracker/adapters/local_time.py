"""Keep a log's local date when the store only knows UTC instants.

``timestamptz`` columns hand back UTC values, which can move a log dated
01:00 at +02:00 onto the previous calendar day. The adapters store the
instant as usual plus the original UTC offset in minutes, then shift the
value back on read.
"""

from datetime import UTC, datetime, timedelta, timezone


def utc_offset_minutes(value: datetime) -> int | None:
    """Return the value's UTC offset in whole minutes; None for naive values."""
    offset = value.utcoffset()
    if offset is None:
        return None
    return int(offset.total_seconds()) // 60


def with_utc_offset(value: datetime, offset_minutes: int | None) -> datetime:
    """Express a stored instant in the offset it was written with."""
    if offset_minutes is None:
        # Written naive; the store keeps the wall clock as-is.
        return value.replace(tzinfo=None)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(timezone(timedelta(minutes=offset_minutes)))
