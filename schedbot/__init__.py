"""Rule-based Indonesian schedule assistant."""

from .bot import ScheduleBot
from .store import JsonStore

__all__ = ["ScheduleBot", "JsonStore"]
