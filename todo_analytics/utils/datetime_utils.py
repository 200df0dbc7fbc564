"""Date and time utilities.

All day bucketing goes through :func:`local_date_key` so that streaks,
aggregates and trend series agree on which local calendar day a timestamp
belongs to. Timestamps are epoch milliseconds; datetimes are naive local time.
"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import List, Tuple, Union

Timestamp = Union[int, float, datetime, date]

WEEKDAY_NAMES = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']
MONTH_NAMES = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def from_epoch_ms(epoch_ms: Union[int, float]) -> datetime:
    """Convert epoch milliseconds to a naive local datetime."""
    return datetime.fromtimestamp(epoch_ms / 1000)


def to_epoch_ms(dt: datetime) -> int:
    """Convert a naive local datetime to epoch milliseconds."""
    return int(dt.timestamp() * 1000)


def _as_datetime(value: Timestamp) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return from_epoch_ms(value)


def local_date_key(value: Timestamp) -> str:
    """Format the local calendar day of a timestamp as YYYY-MM-DD."""
    d = _as_datetime(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def iso_week_key(value: Timestamp) -> str:
    """Format the ISO-8601 week of a timestamp as YYYY-W##."""
    iso_year, iso_week, _ = _as_datetime(value).date().isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def month_key(value: Timestamp) -> str:
    """Format the local month of a timestamp as YYYY-MM."""
    d = _as_datetime(value)
    return f"{d.year:04d}-{d.month:02d}"


def parse_date_key(key: str) -> date:
    """Parse a YYYY-MM-DD key back into a date."""
    return datetime.strptime(key, "%Y-%m-%d").date()


def trailing_days(now: datetime, days: int) -> List[date]:
    """Get the last `days` local dates ending today, oldest first."""
    today = now.date()
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def start_of_week(day: date) -> date:
    """Get the Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """Get the first and last day of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move a (year, month) pair by `delta` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def sunday_first_weekday(value: Timestamp) -> int:
    """Day of week with Sunday=0 through Saturday=6."""
    return (_as_datetime(value).weekday() + 1) % 7
