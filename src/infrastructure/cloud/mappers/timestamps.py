"""Timestamp parsing for upstream responses.

Upstream services emit RFC 3339 timestamps, sometimes with nanosecond
precision (``2024-05-01T10:00:00.123456789Z``).
"""

from datetime import UTC, datetime


def parse_timestamp(value: object) -> datetime | None:
    """Parse an upstream timestamp into an aware datetime.

    Args:
        value: Raw JSON value.

    Returns:
        Timezone-aware datetime (UTC assumed when no offset is given),
        or None if the value is missing or unparseable.

    Example:
        >>> parse_timestamp("2024-05-01T10:00:00.123456789Z")
        datetime.datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=datetime.timezone.utc)
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
