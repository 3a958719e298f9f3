"""UTC clock helpers; the domain never handles naive datetimes."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive ``dt``; aware values pass through unchanged."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)
