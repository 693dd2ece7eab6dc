"""ScheduleBot: the single text-in, text-out entry point."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from .commands import COMMAND_HANDLERS, NOT_RECOGNIZED, CommandContext, HandledWithMutation, NoMatch
from .errors import ErrorType, get_error_message
from .exporter import Exporter
from .nlp.intents import classify, normalize_message
from .settings import Settings
from .store import JsonStore
from .validator import ScheduleValidator

logger = logging.getLogger(__name__)


class ScheduleBot:
    def __init__(
        self,
        store: JsonStore,
        settings: Optional[Settings] = None,
        exporter: Optional[Exporter] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.settings = settings or Settings()
        self.exporter = exporter
        self.clock = clock
        self.validator = ScheduleValidator(max_message_length=self.settings.max_message_length)

    def handle(self, text: str) -> str:
        """Process one user message and return the reply. Never raises."""
        try:
            return self._handle(text)
        except Exception as e:
            logger.exception(f"Unexpected error while handling message: {e}")
            return get_error_message(ErrorType.PROCESSING_ERROR)

    def _handle(self, text: str) -> str:
        sanitized = self.validator.sanitize_input(text)
        if not sanitized:
            return get_error_message(ErrorType.EMPTY_MESSAGE)
        if self.validator.is_too_long(sanitized):
            return get_error_message(ErrorType.MESSAGE_TOO_LONG, str(self.validator.max_message_length))

        intent = classify(sanitized)
        logger.info(f"Classified message as {intent.value}")

        ctx = CommandContext(
            text=re.sub(r"\s+", " ", sanitized),
            message=normalize_message(sanitized),
            state=self.store.load(),
            now=self.clock(),
            settings=self.settings,
            exporter=self.exporter,
        )
        result = COMMAND_HANDLERS[intent](ctx)

        if isinstance(result, NoMatch):
            return get_error_message(NOT_RECOGNIZED.get(intent, ErrorType.UNKNOWN_COMMAND), ctx.text)

        if isinstance(result, HandledWithMutation):
            if not self.store.save(result.state):
                return get_error_message(ErrorType.SAVE_FAILED)

        return result.reply

    def handle_payload(self, text: str, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Wrap handle() for API-style callers."""
        return {
            "status": "success",
            "message": self.handle(text),
            "timestamp": self.clock().isoformat(),
            "userId": user_id,
        }

    def health(self) -> Dict[str, Any]:
        try:
            state = self.store.load()
            return {
                "status": "healthy",
                "totalSchedules": len(state.schedules),
                "storeReachable": self.store.is_reachable(),
                "timestamp": self.clock().isoformat(),
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return {
                "status": "error",
                "error": str(e),
                "timestamp": datetime.now().isoformat(),
            }

    def reset_all_data(self) -> str:
        if self.store.reset():
            logger.info("Store reset to initial state")
            return "✅ Semua data telah direset ke kondisi awal."
        return "❌ Gagal mereset data."
