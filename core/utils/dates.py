from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """UTC ``[start, end)`` range covering a calendar day."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)
