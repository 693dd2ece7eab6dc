import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher

from .bot import ScheduleBot
from .cli import run_cli
from .exporter import Exporter
from .logging import configure_logging
from .reminder import ReminderNotifier
from .settings import Settings, get_settings
from .store import JsonStore
from .telegram.app import ChatRegistry, broadcast, create_router


def build_bot(settings: Settings) -> ScheduleBot:
    store = JsonStore(settings.data_file)
    store.initialize()
    exporter = Exporter(settings.export_dir, settings.backup_dir)
    return ScheduleBot(store=store, settings=settings, exporter=exporter)


async def run_telegram(schedule_bot: ScheduleBot, settings: Settings, logger: logging.Logger) -> None:
    bot = Bot(settings.telegram_bot_token)
    dp = Dispatcher()
    chats = ChatRegistry()
    dp.include_router(create_router(schedule_bot, chats))

    notifier = ReminderNotifier(
        schedule_bot.store,
        notify=lambda text: broadcast(bot, chats, text),
    )
    reminder_task = asyncio.create_task(notifier.run_forever(settings.reminder_check_minutes))

    logger.info("Starting Telegram polling")
    try:
        await dp.start_polling(bot)
    finally:
        reminder_task.cancel()
        await bot.session.close()


def main() -> None:
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Configuration error: {e}")
        print("Please check your .env file and SCHEDBOT_* environment variables")
        sys.exit(1)

    logger = configure_logging(settings)
    logger.info(f"Starting schedbot in {settings.mode} mode, data file {settings.data_file}")

    try:
        schedule_bot = build_bot(settings)
    except OSError as e:
        print(f"Startup error: {e}")
        sys.exit(1)

    if settings.mode == "telegram":
        asyncio.run(run_telegram(schedule_bot, settings, logger))
        return

    notifier = ReminderNotifier(schedule_bot.store, notify=print)
    run_cli(schedule_bot, notifier, settings.reminder_check_minutes)


if __name__ == "__main__":
    main()
