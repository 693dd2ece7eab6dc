"""File exports of the schedule: plain text listing, CSV and JSON backup."""

from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence

from .errors import ExportError
from .nlp.dates import entry_datetime, format_display_date
from .schemas import ScheduleEntry, StoreState

logger = logging.getLogger(__name__)

CSV_HEADERS = ("Aktivitas", "Tanggal", "Waktu", "Dibuat")


def export_timestamp(now: datetime) -> str:
    """File-name safe timestamp, e.g. ``2026-10-19T13-05-00``."""
    return now.isoformat(timespec="seconds").replace(":", "-").replace(".", "-")


def _format_created(created: str) -> str:
    try:
        return datetime.fromisoformat(created).strftime("%d/%m/%Y %H.%M.%S")
    except ValueError:
        return created


def _chronological(entries: Sequence[ScheduleEntry]) -> list[ScheduleEntry]:
    return sorted(entries, key=lambda entry: entry_datetime(entry.date, entry.time) or datetime.max)


class Exporter:
    def __init__(self, export_dir: Path | str, backup_dir: Path | str) -> None:
        self.export_dir = Path(export_dir)
        self.backup_dir = Path(backup_dir)

    def export_text(self, entries: Sequence[ScheduleEntry], now: datetime) -> str:
        """Write a numbered, chronologically sorted listing. Returns the file name."""
        filename = f"jadwal_{export_timestamp(now)}.txt"
        lines = [
            "JADWAL SAYA",
            "=" * 50,
            "",
            f"Diekspor pada: {now.strftime('%d/%m/%Y %H.%M.%S')}",
            "",
        ]
        for number, entry in enumerate(_chronological(entries), start=1):
            lines.append(f"{number}. {entry.activity}")
            lines.append(f"   {format_display_date(entry.date)} - {entry.time}")
            lines.append("")

        self._write(self.export_dir / filename, lambda handle: handle.write("\n".join(lines)))
        return filename

    def export_csv(self, entries: Sequence[ScheduleEntry], now: datetime) -> str:
        filename = f"jadwal_{export_timestamp(now)}.csv"

        def write_rows(handle) -> None:
            writer = csv.writer(handle)
            writer.writerow(CSV_HEADERS)
            for entry in entries:
                writer.writerow([entry.activity, entry.date, entry.time, _format_created(entry.created)])

        self._write(self.export_dir / filename, write_rows)
        return filename

    def create_backup(self, state: StoreState, now: datetime) -> str:
        filename = f"backup_{export_timestamp(now)}.json"
        self._write(self.backup_dir / filename, lambda handle: handle.write(state.to_json()))
        return filename

    def _write(self, path: Path, writer) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", newline="", encoding="utf-8") as handle:
                writer(handle)
        except OSError as exc:
            logger.error(f"Export to {path} failed: {exc}")
            raise ExportError(str(exc)) from exc
        logger.info(f"Exported {path}")
