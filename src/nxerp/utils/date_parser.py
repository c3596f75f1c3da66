"""Date parsing utilities for form input."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date typed into a form field.

    Supports:
    - ISO and other absolute dates: "2026-02-19", "19 Feb 2026", "Feb 19, 2026"
    - "today", "yesterday", "tomorrow"

    Day-first input ("19/02/2026") is read day first, as business users in
    the target locale write dates.

    Args:
        date_str: Date string
        today: Reference date for relative input (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    if not text:
        raise ValueError("Empty date string")
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative_dates:
        return relative_dates[text]

    try:
        # ISO dates keep year-month-day order even with dayfirst
        return date_parser.parse(text, dayfirst=not text[:4].isdigit()).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
