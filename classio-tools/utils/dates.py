"""Date parsing helpers for schedule lookups."""

from datetime import datetime, timezone
from typing import Optional


def parse_datetime(value: str) -> datetime:
    """
    Parse an ISO 8601 date or datetime string.

    Date-only and naive values are taken to be UTC so that every result
    can be compared with every other.

    Args:
        value: ISO string (e.g., "2025-03-14", "2025-03-14T09:00:00Z")

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the string is not a valid ISO date
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def resolve_as_of(as_of: Optional[str] = None) -> datetime:
    """Return the parsed ``as_of`` time, or the current UTC time when omitted."""
    if not as_of:
        return datetime.now(timezone.utc)
    return parse_datetime(as_of)
