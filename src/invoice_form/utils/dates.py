"""
Date helpers for the invoice form.

All dates travel as ISO ``YYYY-MM-DD`` strings; these helpers compute the
form defaults and render dates in the user's chosen format.
"""

import calendar
from datetime import date, datetime, timedelta

# The service date moves to the current month once its end is this close.
SERVICE_DATE_MONTH_END_DAYS = 5


def parse_iso_date(date_str: str | None) -> date | None:
    """
    Parse a YYYY-MM-DD string.

    Args:
        date_str: ISO date string.

    Returns:
        date object if parsing succeeds, None otherwise.
    """
    if not date_str:
        return None
    try:
        return datetime.strptime(date_str.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def today(now: date | None = None) -> str:
    """Return today's date as YYYY-MM-DD."""
    return (now or date.today()).isoformat()


def end_of_month(date_str: str | None = None) -> str:
    """Return the last day of the month containing date_str (default: today)."""
    day = parse_iso_date(date_str) or date.today()
    return _month_end(day).isoformat()


def default_service_date(now: date | None = None) -> str:
    """
    Return the default date of service.

    That is the last day of the previous month, unless today is within
    five days of the current month's end, in which case the current
    month's last day is used.
    """
    day = now or date.today()
    current_month_end = _month_end(day)
    if (current_month_end - day).days < SERVICE_DATE_MONTH_END_DAYS:
        return current_month_end.isoformat()
    return (day.replace(day=1) - timedelta(days=1)).isoformat()


def add_days(date_str: str, days: int) -> str:
    """Return date_str shifted by the given number of days."""
    day = parse_iso_date(date_str)
    if day is None:
        raise ValueError(f"Invalid date: {date_str!r}")
    return (day + timedelta(days=days)).isoformat()


def format_date(date_str: str, date_format: str) -> str:
    """
    Render an ISO date in one of the supported date formats.

    Unknown formats fall back to YYYY-MM-DD. Month names are English.

    Args:
        date_str: Date as YYYY-MM-DD.
        date_format: One of SUPPORTED_DATE_FORMATS.

    Returns:
        The formatted date, or an empty string for an invalid date.
    """
    day = parse_iso_date(date_str)
    if day is None:
        return ""
    yyyy, mm, dd = f"{day.year:04d}", f"{day.month:02d}", f"{day.day:02d}"
    month_name = calendar.month_name[day.month]
    formats = {
        "YYYY-MM-DD": f"{yyyy}-{mm}-{dd}",
        "DD/MM/YYYY": f"{dd}/{mm}/{yyyy}",
        "MM/DD/YYYY": f"{mm}/{dd}/{yyyy}",
        "D MMMM YYYY": f"{day.day} {month_name} {yyyy}",
        "MMMM D, YYYY": f"{month_name} {day.day}, {yyyy}",
        "DD.MM.YYYY": f"{dd}.{mm}.{yyyy}",
        "DD-MM-YYYY": f"{dd}-{mm}-{yyyy}",
        "YYYY.MM.DD": f"{yyyy}.{mm}.{dd}",
    }
    return formats.get(date_format, formats["YYYY-MM-DD"])


def _month_end(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])
