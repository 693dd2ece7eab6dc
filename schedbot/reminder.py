"""Upcoming-window query and the background reminder loop."""

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Sequence, Set

from .nlp.dates import entry_datetime
from .schemas import ScheduleEntry

logger = logging.getLogger(__name__)


def upcoming_entries(entries: Sequence[ScheduleEntry], now: datetime, minutes: int) -> List[ScheduleEntry]:
    """Entries with now < start <= now + minutes, soonest first."""
    limit = now + timedelta(minutes=minutes)
    found = []
    for entry in entries:
        start = entry_datetime(entry.date, entry.time)
        if start is not None and now < start <= limit:
            found.append((start, entry))
    found.sort(key=lambda item: item[0])
    return [entry for _, entry in found]


def format_reminder_notice(entries: Sequence[ScheduleEntry]) -> str:
    lines = ["🔔 REMINDER OTOMATIS:"]
    for entry in entries:
        lines.append(f"⏰ {entry.activity} - {entry.time}")
    return "\n".join(lines)


class ReminderNotifier:
    """Periodically re-reads the store and reports entries about to start.

    Each entry is reported at most once while it stays in the store.
    notify receives the formatted notice and may be a plain function or a
    coroutine function.
    """

    def __init__(self, store, notify: Callable[[str], object], clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.notify = notify
        self.clock = clock
        self._notified: Set[int] = set()

    def collect_due(self) -> List[ScheduleEntry]:
        state = self.store.load()
        self._notified &= {entry.id for entry in state.schedules}
        if not state.settings.reminder_enabled:
            return []

        due = upcoming_entries(state.schedules, self.clock(), state.settings.default_reminder_minutes)
        fresh = [entry for entry in due if entry.id not in self._notified]
        self._notified.update(entry.id for entry in fresh)
        return fresh

    def check(self) -> Optional[str]:
        """Run one synchronous pass. Returns the notice that was sent, if any."""
        fresh = self.collect_due()
        if not fresh:
            return None
        notice = format_reminder_notice(fresh)
        logger.info(f"Sending reminder for {len(fresh)} schedule(s)")
        self.notify(notice)
        return notice

    async def run_forever(self, interval_minutes: int) -> None:
        while True:
            await asyncio.sleep(interval_minutes * 60)
            try:
                fresh = self.collect_due()
                if not fresh:
                    continue
                logger.info(f"Sending reminder for {len(fresh)} schedule(s)")
                result = self.notify(format_reminder_notice(fresh))
                if inspect.isawaitable(result):
                    await result
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Reminder check failed: {e}")

    def start_thread(self, interval_minutes: int) -> threading.Event:
        """Run check() every interval on a daemon thread. Set the returned event to stop it."""
        stop = threading.Event()

        def loop():
            while not stop.wait(interval_minutes * 60):
                try:
                    self.check()
                except Exception as e:
                    logger.error(f"Reminder check failed: {e}")

        thread = threading.Thread(target=loop, name="schedbot-reminder", daemon=True)
        thread.start()
        return stop
