import asyncio
import json
import logging
from typing import List, Set

from aiogram import Bot, F, Router
from aiogram.filters import Command
from aiogram.types import Message

from ..bot import ScheduleBot
from ..commands.general import HELP_TEXT

logger = logging.getLogger(__name__)

TELEGRAM_MESSAGE_LIMIT = 4096


class ChatRegistry:
    """Chats that have talked to the bot and should receive reminders."""

    def __init__(self) -> None:
        self._chat_ids: Set[int] = set()

    def add(self, chat_id: int) -> None:
        self._chat_ids.add(chat_id)

    def all(self) -> List[int]:
        return sorted(self._chat_ids)


def split_message(text: str, limit: int = TELEGRAM_MESSAGE_LIMIT) -> List[str]:
    """Break a reply into chunks Telegram accepts, preferring line boundaries."""
    if len(text) <= limit:
        return [text]

    chunks = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def create_router(schedule_bot: ScheduleBot, chats: ChatRegistry) -> Router:
    r = Router()

    @r.message(Command("start"))
    async def start_cmd(message: Message):
        if message.chat:
            chats.add(message.chat.id)
        user_id = message.from_user.id if message.from_user else "unknown"
        logger.info(f"User {user_id} executed /start command")
        await message.answer(
            "🤖 Halo! Saya SCHEDBOT, asisten jadwal kamu.\n"
            'Kirim perintah seperti "Tambah rapat besok jam 9" atau ketik /help.'
        )

    @r.message(Command("help"))
    async def help_cmd(message: Message):
        await message.answer(HELP_TEXT)

    @r.message(Command("health"))
    async def health_cmd(message: Message):
        status = await asyncio.to_thread(schedule_bot.health)
        await message.answer(json.dumps(status, indent=2))

    @r.message(F.text & ~F.via_bot & ~F.text.startswith("/"))
    async def on_text(message: Message):
        if not message.chat:
            return
        chats.add(message.chat.id)
        reply = await asyncio.to_thread(schedule_bot.handle, message.text or "")
        for chunk in split_message(reply):
            await message.answer(chunk)

    return r


async def broadcast(bot: Bot, chats: ChatRegistry, text: str) -> None:
    for chat_id in chats.all():
        try:
            await bot.send_message(chat_id, text)
        except Exception as e:
            logger.error(f"Failed to send reminder to chat {chat_id}: {e}")
