from datetime import datetime, timezone


def utc_now_iso() -> str:
    """
    Current UTC time as sortable ISO-8601 text with millisecond precision.
    E.g. "2024-01-01T10:00:00.000Z"
    """
    return to_iso(datetime.now(timezone.utc))


def to_iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")

