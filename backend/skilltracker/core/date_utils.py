from datetime import date, datetime, time, timedelta

from skilltracker.core.constants import DAYS_PER_WEEK

# Fixed English labels so output does not depend on the process locale
_SHORT_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_LONG_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
_SHORT_MONTHS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def _as_date(d) -> date:
    # datetime is a subclass of date; strip the time part
    if isinstance(d, datetime):
        return d.date()
    return d


def format_date(d) -> str:
    """
    Format a date (or datetime) -> 'YYYY-MM-DD'.
    Example: date(2025, 1, 6) -> '2025-01-06'

    This string is the key logs are stored under; it sorts
    lexicographically in chronological order.
    """
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date(value: str) -> date:
    """
    Parse 'YYYY-MM-DD' -> date (a local calendar day, no time part).
    Example: '2025-01-06' -> date(2025, 1, 6)
    """
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValueError("Date must be YYYY-MM-DD")


def today_string() -> str:
    return format_date(date.today())


def week_start(d) -> date:
    """Monday of the week containing `d`.

    Counting Sunday=0 .. Saturday=6: a Sunday steps back 6 days, any
    other day steps back (index - 1) days.
    """
    d = _as_date(d)
    dow = d.isoweekday() % 7
    days_back = 6 if dow == 0 else dow - 1
    return d - timedelta(days=days_back)


def week_end(d) -> datetime:
    """Last instant (23:59:59.999) of the Sunday closing the week of `d`."""
    sunday = week_start(d) + timedelta(days=DAYS_PER_WEEK - 1)
    return datetime.combine(sunday, time(23, 59, 59, 999000))


def current_week_range(today: date | None = None) -> tuple[date, datetime]:
    today = today or date.today()
    return week_start(today), week_end(today)


def week_dates(start) -> list[str]:
    """The 7 consecutive days from `start` as 'YYYY-MM-DD', Monday -> Sunday."""
    start = _as_date(start)
    return [format_date(start + timedelta(days=i)) for i in range(DAYS_PER_WEEK)]


def days_elapsed_in_week(d) -> int:
    """Monday=1 .. Sunday=7, so the whole week has elapsed on its last day."""
    return _as_date(d).isoweekday()


def format_date_for_display(d) -> str:
    """Example: date(2025, 1, 29) -> 'Jan 29'"""
    return f"{_SHORT_MONTHS[d.month - 1]} {d.day}"


def format_week_range(start, end) -> str:
    """Example: (Jan 29, Feb 4) -> 'Jan 29 – Feb 4'"""
    return f"{format_date_for_display(start)} – {format_date_for_display(end)}"


def short_day_name(d) -> str:
    return _SHORT_DAYS[_as_date(d).weekday()]


def day_name(d) -> str:
    return _LONG_DAYS[_as_date(d).weekday()]


def is_today(value: str) -> bool:
    return value == today_string()
