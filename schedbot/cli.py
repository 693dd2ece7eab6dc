import logging
from typing import Callable, Optional

from .bot import ScheduleBot
from .reminder import ReminderNotifier

logger = logging.getLogger(__name__)

BANNER = """🤖 SCHEDBOT - Asisten Jadwal
Ketik "bantuan" untuk melihat perintah, "exit" untuk keluar.
"""

EXIT_WORDS = {"exit", "keluar", "quit"}


def run_cli(
    bot: ScheduleBot,
    notifier: Optional[ReminderNotifier] = None,
    reminder_interval_minutes: int = 30,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> None:
    """Interactive terminal loop. Returns when the user exits or input ends."""
    output_func(BANNER)

    stop_reminders = None
    if notifier is not None:
        stop_reminders = notifier.start_thread(reminder_interval_minutes)

    try:
        while True:
            try:
                text = input_func("You: ")
            except (EOFError, KeyboardInterrupt):
                output_func("")
                break

            if text.strip().lower() in EXIT_WORDS:
                break

            output_func(f"Bot: {bot.handle(text)}\n")
    finally:
        if stop_reminders is not None:
            stop_reminders.set()
        output_func("👋 Sampai jumpa!")
        logger.info("CLI session ended")
