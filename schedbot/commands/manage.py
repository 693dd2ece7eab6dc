"""Handlers that change the stored schedule: add, edit and delete."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import List, Sequence

from ..errors import ErrorType, get_error_message
from ..nlp.dates import format_display_date, normalize_relative_date, normalize_time
from ..nlp.extractor import (
    extract_activity,
    extract_date_pattern,
    extract_time_phrase,
    looks_like_date,
    looks_like_time,
)
from ..nlp.fuzzy import fuzzy_search, relevance_score
from ..schemas import ScheduleEntry
from ..validator import schedule_validator
from .results import CommandContext, Handled, HandledWithMutation, HandlerResult, NoMatch

logger = logging.getLogger(__name__)

_ADD_RE = re.compile(r"^(?:tambah|buat|jadwalkan|schedule)\s+\S", re.IGNORECASE)
_EDIT_RE = re.compile(
    r"^(?:ubah|ganti|edit)\s+(.+?)(?:\s+(?:jadi|ke|menjadi)\s+(.+?))?$",
    re.IGNORECASE,
)
_DELETE_ALL_RE = re.compile(
    r"^(?:(?:hapus|batalkan|delete)\s+semua(?:\s+jadwal)?|(?:bersihkan|clear)(?:\s+jadwal)?)$",
    re.IGNORECASE,
)
_DELETE_ALL_KEYWORD_RE = re.compile(
    r"^(?:hapus|batalkan|delete)\s+semua\s+(?:jadwal\s+)?(.+?)$",
    re.IGNORECASE,
)
_DELETE_ONE_RE = re.compile(r"^(?:hapus|batalkan|delete)\s+(.+?)$", re.IGNORECASE)
_JADWAL_PREFIX_RE = re.compile(r"^jadwal\s+(?=\S)", re.IGNORECASE)


def handle_add(ctx: CommandContext) -> HandlerResult:
    if not _ADD_RE.match(ctx.text):
        return NoMatch()

    activity = extract_activity(ctx.text)
    date_str = normalize_relative_date(extract_date_pattern(ctx.text), ctx.now)
    time_str = normalize_time(extract_time_phrase(ctx.text))

    validation = schedule_validator.validate(activity, date_str, time_str)
    if not validation.valid:
        return Handled(get_error_message(ErrorType.VALIDATION_FAILED, ", ".join(validation.errors)))

    state = ctx.state
    entry = ScheduleEntry(
        id=next_entry_id(state.schedules, ctx.now),
        activity=activity,
        date=date_str,
        time=time_str,
        created=ctx.now.isoformat(timespec="seconds"),
    )
    state.schedules.append(entry)
    logger.info(f"Added schedule {entry.id}: {entry.activity} {entry.date} {entry.time}")

    return HandledWithMutation(
        f"✅ Jadwal '{entry.activity}' ditambahkan untuk {format_display_date(entry.date)} pukul {entry.time}",
        state,
    )


def handle_edit(ctx: CommandContext) -> HandlerResult:
    match = _EDIT_RE.match(ctx.text)
    if not match:
        return NoMatch()

    key = _strip_jadwal_prefix(match.group(1).strip())
    new_value = (match.group(2) or "").strip()

    candidates = find_candidates(key, ctx.state.schedules, ctx.settings.match_threshold)
    if not candidates:
        return Handled(get_error_message(ErrorType.NOT_FOUND, key))

    if len(candidates) > 1 and not new_value:
        return Handled(_format_candidate_list(
            candidates,
            '💡 Tips: Gunakan format "ubah [aktivitas] [waktu] jadi [jadwal baru]" untuk lebih spesifik.',
        ))

    if not new_value:
        target = candidates[0]
        return Handled(
            f'📝 Ditemukan jadwal "{target.activity}" pada {format_display_date(target.date)} {target.time}.\n'
            f'Untuk mengubah, gunakan: "ubah {target.activity} jadi [aktivitas/waktu/tanggal baru]"'
        )

    target = candidates[0]
    activity, date_str, time_str = target.activity, target.date, target.time
    if looks_like_time(new_value):
        time_str = normalize_time(new_value)
    elif looks_like_date(new_value):
        date_str = normalize_relative_date(new_value, ctx.now)
    else:
        activity = new_value

    validation = schedule_validator.validate(activity, date_str, time_str)
    if not validation.valid:
        return Handled(get_error_message(ErrorType.VALIDATION_FAILED, ", ".join(validation.errors)))

    target.activity = activity
    target.date = date_str
    target.time = time_str
    logger.info(f"Edited schedule {target.id}: {target.activity} {target.date} {target.time}")

    return HandledWithMutation(
        f'✅ Jadwal berhasil diubah menjadi: "{target.activity}" pada '
        f"{format_display_date(target.date)} {target.time}",
        ctx.state,
    )


def handle_delete(ctx: CommandContext) -> HandlerResult:
    state = ctx.state
    if not state.schedules:
        return Handled("📅 Belum ada jadwal yang bisa dihapus.")

    if _DELETE_ALL_RE.match(ctx.text):
        removed = len(state.schedules)
        state.schedules = []
        logger.info(f"Deleted all {removed} schedules")
        return HandledWithMutation("✅ Semua jadwal berhasil dihapus.", state)

    match = _DELETE_ALL_KEYWORD_RE.match(ctx.text)
    if match:
        keyword = match.group(1).strip()
        lowered = keyword.lower()
        kept = [entry for entry in state.schedules if lowered not in entry.activity.lower()]
        removed = len(state.schedules) - len(kept)
        if not removed:
            return Handled(get_error_message(ErrorType.NOT_FOUND, keyword))
        state.schedules = kept
        logger.info(f"Deleted {removed} schedules matching {keyword!r}")
        return HandledWithMutation(f'✅ Berhasil menghapus {removed} jadwal yang mengandung "{keyword}".', state)

    match = _DELETE_ONE_RE.match(ctx.text)
    if not match:
        return NoMatch()

    key = _strip_jadwal_prefix(match.group(1).strip())
    candidates = find_candidates(key, state.schedules, ctx.settings.match_threshold)
    if not candidates:
        return Handled(get_error_message(ErrorType.NOT_FOUND, key))

    if len(candidates) > 1:
        return Handled(_format_candidate_list(
            candidates,
            '💡 Tips: Gunakan kata kunci yang lebih spesifik atau "hapus semua [kata kunci]" untuk menghapus semuanya.',
        ))

    target = candidates[0]
    state.schedules = [entry for entry in state.schedules if entry.id != target.id]
    logger.info(f"Deleted schedule {target.id}: {target.activity}")
    return HandledWithMutation(
        f'✅ Jadwal "{target.activity}" pada {format_display_date(target.date)} berhasil dihapus.',
        state,
    )


def find_candidates(key: str, entries: Sequence[ScheduleEntry], threshold: float) -> List[ScheduleEntry]:
    """Entries an edit/delete keyword refers to, most relevant first.

    A keyword matches an entry's activity, its time, or "activity time".
    A keyword that merely contains an entry's time ("rapat jam 09:00") matches
    too, narrowed to the entries whose activity it also names. When nothing
    matches literally the fuzzy matcher is consulted.
    """
    lowered = key.lower()
    if not lowered:
        return []
    as_time = lowered.replace(".", ":")

    matches = [
        entry for entry in entries
        if lowered in entry.activity.lower() or as_time in f"{entry.activity.lower()} {entry.time}"
    ]
    if matches:
        return sorted(matches, key=lambda entry: -relevance_score(key, entry.activity))

    by_time = [entry for entry in entries if entry.time in as_time]
    if by_time:
        named = [entry for entry in by_time if entry.activity.lower() in lowered]
        return named or by_time

    return [candidate.entry for candidate in fuzzy_search(key, entries, threshold)]


def next_entry_id(entries: Sequence[ScheduleEntry], now: datetime) -> int:
    # Millisecond timestamps, bumped past any existing id so two adds in the same instant never collide.
    candidate = int(now.timestamp() * 1000)
    if entries:
        candidate = max(candidate, max(entry.id for entry in entries) + 1)
    return candidate


def _strip_jadwal_prefix(key: str) -> str:
    return _JADWAL_PREFIX_RE.sub("", key)


def _format_candidate_list(candidates: Sequence[ScheduleEntry], tip: str) -> str:
    lines = [f"🔍 Ditemukan {len(candidates)} jadwal:", ""]
    for number, entry in enumerate(candidates, start=1):
        lines.append(f"{number}. {entry.activity} - {format_display_date(entry.date)} {entry.time}")
    lines.append("")
    lines.append(tip)
    return "\n".join(lines)
