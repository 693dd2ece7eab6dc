"""Pull activity, date and time phrases out of free-text commands."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from .dates import MONTHS, WEEKDAYS, find_period
from .numerals import expand_number_words

_MONTH_NAMES = "|".join(MONTHS)
_WEEKDAY_NAMES = "|".join(WEEKDAYS)
_PERIODS = r"(?:pagi|siang|sore|malam)"
# "pada" only anchors a time when no date ("pada 10/11", "pada 10 november") follows.
_TIME_ANCHOR = rf"(?:jam|pukul|pada(?!\s*\d{{1,2}}(?:[/\-]\d|\s+(?:{_MONTH_NAMES})\b)))"

ADD_VERB_RE = re.compile(r"^(?:tambah|buat|jadwalkan|schedule)\s+(?:jadwal\s+)?", re.IGNORECASE)
_BARE_VERB_RE = re.compile(r"^(?:tambah|buat|jadwalkan|schedule|jadwal)$", re.IGNORECASE)

_TIME_STRIP_RE = re.compile(
    rf"(?:^|\s+){_TIME_ANCHOR}\s*\d{{1,2}}(?:[.:]\d{{1,2}})?(?:\s*{_PERIODS})?\b",
    re.IGNORECASE,
)
_PERIOD_TODAY_RE = re.compile(rf"(?:^|\s+){_PERIODS}\s+ini\b", re.IGNORECASE)
_PERIOD_STRIP_RE = re.compile(rf"(?:^|\s+){_PERIODS}(?=\s|$)", re.IGNORECASE)
_DATE_STRIP_PATTERNS = (
    re.compile(r"(?:^|\s+)(?:hari ini|besok|lusa|minggu depan|bulan depan)\b", re.IGNORECASE),
    re.compile(rf"(?:^|\s+)tanggal\s*\d{{1,2}}\b(?:\s+(?:{_MONTH_NAMES})\b(?:\s+\d{{4}}\b)?)?", re.IGNORECASE),
    re.compile(rf"(?:^|\s+)\d{{1,2}}\s+(?:{_MONTH_NAMES})\b(?:\s+\d{{4}}\b)?", re.IGNORECASE),
    re.compile(r"(?:^|\s+)\d{1,2}[/\-]\d{1,2}(?:[/\-]\d{2,4})?\b", re.IGNORECASE),
    re.compile(rf"(?:^|\s+)(?:hari\s+)?(?:{_WEEKDAY_NAMES})\b", re.IGNORECASE),
)
_DANGLING_RE = re.compile(r"\s+(?:pada|untuk|di|tanggal)$", re.IGNORECASE)

_DATE_PATTERNS = (
    re.compile(r"\b(hari ini)\b", re.IGNORECASE),
    re.compile(r"\b(besok)\b", re.IGNORECASE),
    re.compile(r"\b(lusa)\b", re.IGNORECASE),
    re.compile(r"\b(minggu depan)\b", re.IGNORECASE),
    re.compile(r"\b(bulan depan)\b", re.IGNORECASE),
    re.compile(rf"\b(tanggal\s*\d{{1,2}}(?:\s+(?:{_MONTH_NAMES})(?:\s+\d{{4}})?)?)\b", re.IGNORECASE),
    re.compile(r"\b(\d{1,2}[/\-]\d{1,2}(?:[/\-]\d{2,4})?)\b"),
    re.compile(rf"\b(\d{{1,2}}\s+(?:{_MONTH_NAMES})(?:\s+\d{{4}})?)\b", re.IGNORECASE),
    re.compile(rf"\b({_WEEKDAY_NAMES})\b", re.IGNORECASE),
)
_TIME_PATTERN_RE = re.compile(
    rf"\b{_TIME_ANCHOR}\s*\d{{1,2}}(?:[.:]\d{{1,2}})?(?:\s*{_PERIODS}\b)?",
    re.IGNORECASE,
)
_REMINDER_WINDOW_RE = re.compile(r"(\d+)\s*(menit|jam|hari)", re.IGNORECASE)

DEFAULT_DATE_PHRASE = "hari ini"

_REFLECTIONS = {
    "saya": "kamu", "aku": "kamu", "gue": "lu", "gua": "lu",
    "kamu": "saya", "lu": "gue",
    "punyaku": "punyamu", "punyamu": "punyaku",
    "milikku": "milikmu", "milikmu": "milikku",
}
_REFLECTION_RE = re.compile(rf"\b({'|'.join(_REFLECTIONS)})\b")


class ExportFormat(Enum):
    TEXT = "text"
    CSV = "csv"
    BACKUP = "backup"
    ALL = "all"


def extract_activity(raw_input: str) -> str:
    """Strip the command verb and every date/time phrase, leaving the activity label."""
    if not raw_input or not isinstance(raw_input, str):
        return ""

    activity = ADD_VERB_RE.sub("", raw_input.strip())

    activity = _TIME_STRIP_RE.sub(" ", activity)
    activity = _PERIOD_TODAY_RE.sub(" ", activity)
    activity = _PERIOD_STRIP_RE.sub(" ", activity)
    for pattern in _DATE_STRIP_PATTERNS:
        activity = pattern.sub(" ", activity)

    activity = re.sub(r"\s+", " ", activity).strip()
    activity = _DANGLING_RE.sub("", activity).strip()

    if not activity or _BARE_VERB_RE.match(activity):
        return ""
    return activity


def extract_date_pattern(text: str) -> str:
    for pattern in _DATE_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return match.group(1)
    return DEFAULT_DATE_PHRASE


def extract_time_pattern(text: str) -> str:
    match = _TIME_PATTERN_RE.search(text or "")
    return match.group(0).strip() if match else ""


def extract_time_phrase(text: str) -> str:
    """The phrase to hand to normalize_time for a full command.

    Prefers an anchored "jam/pukul/pada N" phrase and carries over a period word
    found elsewhere in the sentence ("nonton malam ini jam 7"). Without an
    anchor, date tokens are removed first so "10/9" is not read as a time.
    """
    anchored = extract_time_pattern(text)
    if anchored:
        if find_period(anchored) is None:
            period = find_period(text)
            if period:
                return f"{anchored} {period}"
        return anchored

    remainder = text or ""
    for pattern in _DATE_STRIP_PATTERNS:
        remainder = pattern.sub(" ", remainder)
    return remainder


def looks_like_time(text: str) -> bool:
    return bool(re.search(r"\d{1,2}[.:]\d{2}|\b(?:jam|pukul)\s+\d{1,2}", text or "", re.IGNORECASE))


def looks_like_date(text: str) -> bool:
    return bool(re.search(
        rf"hari ini|besok|lusa|minggu depan|bulan depan|tanggal\s*\d+|\d{{1,2}}[\s/\-]\d{{1,2}}"
        rf"|\d{{1,2}}\s+(?:{_MONTH_NAMES})|\b(?:{_WEEKDAY_NAMES})\b",
        text or "",
        re.IGNORECASE,
    ))


def extract_reminder_minutes(text: str, default: int) -> int:
    match = _REMINDER_WINDOW_RE.search(expand_number_words(text or ""))
    if not match:
        return default
    value = int(match.group(1))
    unit = match.group(2).lower()
    if unit == "jam":
        return value * 60
    if unit == "hari":
        return value * 60 * 24
    return value


def format_window(minutes: int) -> str:
    if minutes >= 1440:
        return f"{minutes // 1440} hari"
    if minutes >= 60:
        return f"{minutes // 60} jam"
    return f"{minutes} menit"


def detect_export_format(text: str) -> ExportFormat:
    lower = (text or "").lower()
    if "pdf" in lower or "text" in lower:
        return ExportFormat.TEXT
    if "csv" in lower:
        return ExportFormat.CSV
    if "backup" in lower:
        return ExportFormat.BACKUP
    return ExportFormat.ALL


def reflect_pronouns(text: Optional[str]) -> str:
    if not text or not isinstance(text, str):
        return ""
    reflected = _REFLECTION_RE.sub(lambda m: _REFLECTIONS[m.group(1)], text.lower())
    if text[0].isupper():
        reflected = reflected[0].upper() + reflected[1:]
    return reflected
