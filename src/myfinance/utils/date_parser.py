"""Date-time parsing utilities."""

from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min)


def parse_datetime(value: str) -> datetime:
    """Parse a date-time string into a naive local datetime.

    Supports various formats including relative dates:
    - Absolute values: "2024-01-15", "2024-01-15T09:30:00", "January 15, 2024 9:30"
    - Relative dates: "today", "yesterday", "tomorrow", "this month", "last year", etc.

    Relative dates resolve to midnight. A timezone in the input is dropped
    without converting the wall-clock time.

    Args:
        value: Date-time string in various formats

    Returns:
        Naive datetime

    Raises:
        ValueError: If the string cannot be parsed
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return _midnight(value)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Could not parse date '{value}': empty value")

    text = value.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this week": today - timedelta(days=today.weekday()),
        "last week": today - timedelta(days=today.weekday() + 7),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if text in relative_dates:
        return _midnight(relative_dates[text])

    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")
    return parsed.replace(tzinfo=None)


def get_date_range(period: str) -> tuple[datetime, datetime]:
    """Get inclusive start and end date-times for a named period.

    Args:
        period: Period string (this-month, this-year, this-week, last-month, last-year, last-week)

    Returns:
        Tuple of (start, end); end is the last microsecond of the final day

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        start_date, end_date = today.replace(day=1), today
    elif period == "this-year":
        start_date, end_date = today.replace(month=1, day=1), today
    elif period == "this-week":
        start_date, end_date = today - timedelta(days=today.weekday()), today
    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        # Day before the first of the current month
        end_date = today.replace(day=1) - timedelta(days=1)
    elif period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
    elif period == "last-week":
        start_date = today - timedelta(days=today.weekday() + 7)
        end_date = start_date + timedelta(days=6)
    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: this-month, this-year, "
            "this-week, last-month, last-year, last-week"
        )

    return _midnight(start_date), datetime.combine(end_date, time.max)
