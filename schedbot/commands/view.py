"""Read-only listing handlers: grouped schedule view and statistics."""

from __future__ import annotations

from datetime import timedelta
from typing import Dict, List, Sequence

from ..errors import ErrorType, get_error_message
from ..nlp.dates import format_date, format_display_date, format_display_time, to_iso_date
from ..schemas import ScheduleEntry
from .results import CommandContext, Handled, HandlerResult

TOP_DAYS = 5


def handle_view(ctx: CommandContext) -> HandlerResult:
    schedules = ctx.state.schedules
    if not schedules:
        return Handled(get_error_message(ErrorType.NO_SCHEDULES))

    if "hari ini" in ctx.message:
        selected = [entry for entry in schedules if entry.date == ctx.today]
    elif "besok" in ctx.message:
        tomorrow = format_date(ctx.now.date() + timedelta(days=1))
        selected = [entry for entry in schedules if entry.date == tomorrow]
    elif "semua" in ctx.message:
        selected = list(schedules)
    else:
        selected = [entry for entry in schedules if entry.date == ctx.today]

    if not selected:
        return Handled("📅 Tidak ada jadwal untuk periode yang diminta.")

    return Handled(render_grouped(selected))


def render_grouped(entries: Sequence[ScheduleEntry]) -> str:
    """One block per date in chronological order, entries ordered by time."""
    groups: Dict[str, List[ScheduleEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.date, []).append(entry)

    blocks = []
    for date_str in sorted(groups, key=to_iso_date):
        lines = [f"JADWAL {format_display_date(date_str)}"]
        for entry in sorted(groups[date_str], key=lambda item: item.time):
            lines.append(f"- {entry.activity.upper()} {format_display_time(entry.time)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def handle_stats(ctx: CommandContext) -> HandlerResult:
    schedules = ctx.state.schedules
    if not schedules:
        return Handled("📊 Belum ada data jadwal untuk statistik.")

    today_count = sum(1 for entry in schedules if entry.date == ctx.today)

    per_date: Dict[str, int] = {}
    per_activity: Dict[str, int] = {}
    for entry in schedules:
        per_date[entry.date] = per_date.get(entry.date, 0) + 1
        activity = entry.activity.lower()
        per_activity[activity] = per_activity.get(activity, 0) + 1

    # max() keeps the first key on ties, i.e. the first date encountered.
    busiest_date = max(per_date, key=per_date.get)
    common_activity = max(per_activity, key=per_activity.get)

    lines = [
        "📊 STATISTIK JADWAL:",
        "",
        f"📈 Total jadwal: {len(schedules)}",
        f"📅 Jadwal hari ini: {today_count}",
        f"🔥 Hari tersibuk: {format_display_date(busiest_date)} ({per_date[busiest_date]} jadwal)",
        f"⭐ Aktivitas tersering: {common_activity} ({per_activity[common_activity]}x)",
        "",
        f"📊 TOP {TOP_DAYS} HARI TERSIBUK:",
    ]
    ranked = sorted(per_date.items(), key=lambda item: -item[1])[:TOP_DAYS]
    for number, (date_str, count) in enumerate(ranked, start=1):
        lines.append(f"{number}. {format_display_date(date_str)}: {count} jadwal")

    return Handled("\n".join(lines))
