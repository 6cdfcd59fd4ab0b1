import math
from datetime import datetime, timedelta

ONE_DAY = timedelta(days=1)


def parse_rental_date(value: str) -> datetime | None:
    """Parse an ISO 8601 date or date-time string into a naive local datetime.

    Date-only strings become local midnight. Values carrying a UTC offset are
    converted to the local timezone. Returns None when the string is not a
    valid calendar date.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (ValueError, AttributeError):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def rental_days(start: datetime, end: datetime) -> int:
    """Whole rental days, rounding any partial day up."""
    return math.ceil((end - start) / ONE_DAY)
