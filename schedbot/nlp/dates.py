"""Date and time phrase normalization for Indonesian input.

Canonical forms are ``DD-MM-YYYY`` for dates and ``HH:MM`` (24-hour) for times.
The normalizers are total: a phrase with nothing recognizable falls back to
today's date or ``00:00`` instead of raising.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Optional

MONTHS = {
    "januari": 1, "februari": 2, "maret": 3, "april": 4,
    "mei": 5, "juni": 6, "juli": 7, "agustus": 8,
    "september": 9, "oktober": 10, "november": 11, "desember": 12,
}

MONTH_ABBREVIATIONS = (
    "JAN", "FEB", "MAR", "APR", "MEI", "JUN",
    "JUL", "AGS", "SEP", "OKT", "NOV", "DES",
)

WEEKDAYS = {
    "senin": 0, "selasa": 1, "rabu": 2, "kamis": 3,
    "jumat": 4, "sabtu": 5, "minggu": 6,
}

PERIOD_WORDS = ("pagi", "siang", "sore", "malam")

_MONTH_NAMES = "|".join(MONTHS)

_EXPLICIT_DATE_RE = re.compile(
    rf"(?:tanggal\s*)?(\d{{1,2}})(?:[\s/\-]?({_MONTH_NAMES}|\d{{1,2}})(?:[\s/\-](\d{{4}}))?)?",
    re.IGNORECASE,
)
_TIME_RE = re.compile(r"(\d{1,2})(?:[:.](\d{1,2}))?")
_PERIOD_RE = re.compile(r"\b(pagi|siang|sore|malam)\b", re.IGNORECASE)
_WEEKDAY_RE = re.compile(rf"\b({'|'.join(WEEKDAYS)})\b", re.IGNORECASE)


def _today(now: Optional[datetime]) -> date:
    return (now or datetime.now()).date()


def format_date(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year}"


def parse_date_string(date_str: str) -> Optional[date]:
    """Turn a canonical ``DD-MM-YYYY`` string into a date, or None if it is not a real date."""
    parts = (date_str or "").split("-")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return None


def normalize_date(phrase: str, now: Optional[datetime] = None) -> str:
    today = _today(now)
    if not phrase or not isinstance(phrase, str):
        return format_date(today)

    lower = phrase.lower()
    if "hari ini" in lower:
        return format_date(today)
    if "besok" in lower:
        return format_date(today + timedelta(days=1))
    if "lusa" in lower:
        return format_date(today + timedelta(days=2))

    match = _EXPLICIT_DATE_RE.search(phrase)
    if match:
        day = int(match.group(1))
        month_token = match.group(2)
        if month_token is None:
            month = today.month
        elif month_token.isdigit():
            month = int(month_token)
        else:
            month = MONTHS[month_token.lower()]
        year = int(match.group(3)) if match.group(3) else today.year
        # Not calendar-checked here; the validator rejects e.g. 31-02.
        return f"{day:02d}-{month:02d}-{year}"

    return format_date(today)


def add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def next_weekday(name: str, now: Optional[datetime] = None) -> str:
    """Next date strictly after today falling on the given Indonesian weekday."""
    today = _today(now)
    target = WEEKDAYS.get((name or "").lower())
    if target is None:
        return format_date(today)
    days_ahead = target - today.weekday()
    if days_ahead <= 0:
        days_ahead += 7
    return format_date(today + timedelta(days=days_ahead))


def normalize_relative_date(phrase: str, now: Optional[datetime] = None) -> str:
    """Relative forms layered on top of normalize_date."""
    today = _today(now)
    lower = (phrase or "").lower()

    if "minggu depan" in lower:
        return format_date(today + timedelta(days=7))
    if "bulan depan" in lower:
        return format_date(add_months(today, 1))

    if not any(word in lower for word in ("hari ini", "besok", "lusa")):
        weekday = _WEEKDAY_RE.search(lower)
        if weekday:
            return next_weekday(weekday.group(1), now)

    return normalize_date(phrase, now)


def find_period(text: str) -> Optional[str]:
    match = _PERIOD_RE.search(text or "")
    return match.group(1).lower() if match else None


def normalize_time(phrase: str) -> str:
    if not phrase or not isinstance(phrase, str):
        return "00:00"
    lower = phrase.lower()

    match = _TIME_RE.search(lower)
    if not match:
        return "00:00"

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0

    if hour > 24:
        hour %= 24
    if hour == 24:
        hour = 0

    period = find_period(lower)
    if period == "pagi":
        if hour == 12:
            hour = 0
    elif period == "siang":
        if 1 <= hour <= 6:
            hour += 12
    elif period == "sore":
        if 1 <= hour <= 6:
            hour += 12
    elif period == "malam":
        if hour == 12:
            hour = 0
        elif 1 <= hour <= 11:
            hour += 12

    hour %= 24
    minute = max(0, min(59, minute))
    return f"{hour:02d}:{minute:02d}"


def format_display_date(date_str: str) -> str:
    """``10-09-2026`` -> ``10 SEP 2026``."""
    parts = (date_str or "").split("-")
    if len(parts) != 3:
        return date_str
    day, month, year = parts
    try:
        abbreviation = MONTH_ABBREVIATIONS[int(month) - 1]
    except (ValueError, IndexError):
        return date_str
    return f"{day} {abbreviation} {year}"


def format_display_time(time_str: str) -> str:
    return time_str.replace(":", ".")


def to_iso_date(date_str: str) -> str:
    day, month, year = date_str.split("-")
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def entry_datetime(date_str: str, time_str: str) -> Optional[datetime]:
    """Combine canonical date and time strings into a naive local datetime."""
    day = parse_date_string(date_str)
    if day is None:
        return None
    try:
        hour, minute = (int(part) for part in time_str.split(":"))
        return datetime(day.year, day.month, day.day, hour, minute)
    except ValueError:
        return None
