"""
Time helpers for the voting domain.

Every timestamp is handled in UTC. Values read back from stores that drop the
offset (SQLite) are naive and are interpreted as UTC.
"""

# Standard library imports
from datetime import UTC, datetime

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


def now_utc() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime, or convert an aware one to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_date(value: datetime) -> str:
    """Format a timestamp as dd/MM/yyyy, e.g. ``19/10/2026``."""
    return as_utc(value).strftime(DISPLAY_DATE_FORMAT)
