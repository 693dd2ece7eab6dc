from __future__ import annotations

import re

from ..errors import ErrorType, get_error_message
from ..nlp.dates import entry_datetime, format_display_date
from ..nlp.extractor import extract_reminder_minutes, format_window
from ..nlp.fuzzy import fuzzy_search
from ..reminder import upcoming_entries
from .results import CommandContext, Handled, HandlerResult, NoMatch

_SEARCH_RE = re.compile(r"^(?:(?:cari|find)\s+|kapan\s+(?:ada\s+)?)(.+?)$", re.IGNORECASE)
_JADWAL_PREFIX_RE = re.compile(r"^jadwal\s+(?=\S)", re.IGNORECASE)

MIN_KEYWORD_LENGTH = 2


def handle_search(ctx: CommandContext) -> HandlerResult:
    if not ctx.state.schedules:
        return Handled("📅 Belum ada jadwal untuk dicari.")

    match = _SEARCH_RE.match(ctx.text)
    if not match:
        return NoMatch()

    term = _JADWAL_PREFIX_RE.sub("", match.group(1).strip())
    if len(term) < MIN_KEYWORD_LENGTH or term.lower() == "ada":
        return Handled(get_error_message(ErrorType.KEYWORD_TOO_SHORT, term))

    results = fuzzy_search(term, ctx.state.schedules, ctx.settings.search_threshold)
    if not results:
        return Handled(get_error_message(ErrorType.NOT_FOUND, term))

    lines = [f'🔍 HASIL PENCARIAN "{term}":', ""]
    for number, candidate in enumerate(results, start=1):
        entry = candidate.entry
        lines.append(f"{number}. 📌 {entry.activity} ({candidate.match_percent}% cocok)")
        lines.append(f"   📅 {format_display_date(entry.date)} ⏰ {entry.time}")
    return Handled("\n".join(lines))


def handle_reminder(ctx: CommandContext) -> HandlerResult:
    minutes = extract_reminder_minutes(ctx.text, ctx.settings.default_reminder_minutes)
    window = format_window(minutes)

    upcoming = upcoming_entries(ctx.state.schedules, ctx.now, minutes)
    if not upcoming:
        return Handled(f"⏰ Tidak ada jadwal dalam {window} ke depan.")

    lines = [f"⏰ REMINDER - Jadwal {window} ke depan:", ""]
    for number, entry in enumerate(upcoming, start=1):
        remaining = int((entry_datetime(entry.date, entry.time) - ctx.now).total_seconds() // 60)
        lines.append(f"{number}. 🔔 {entry.activity}")
        lines.append(f"   📅 {format_display_date(entry.date)} ⏰ {entry.time}")
        lines.append(f"   ⏳ {remaining} menit lagi")
    return Handled("\n".join(lines))
