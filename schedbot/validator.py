import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .nlp.dates import parse_date_string

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


class ScheduleValidator:
    def __init__(self, max_message_length: int = 4000):
        self.max_message_length = max_message_length
        self.error_messages = {
            "invalid_activity": "Aktivitas terlalu pendek atau kosong",
            "invalid_date": "Format tanggal tidak valid",
            "invalid_time": "Format waktu tidak valid",
        }

    def validate(self, activity: Optional[str], date_str: Optional[str], time_str: Optional[str]) -> ValidationResult:
        errors = []

        if not self.is_valid_activity(activity):
            errors.append(self.error_messages["invalid_activity"])

        if not self.is_valid_date(date_str):
            errors.append(self.error_messages["invalid_date"])

        if not self.is_valid_time(time_str):
            errors.append(self.error_messages["invalid_time"])

        if errors:
            logger.warning(f"Validation failed for ({activity!r}, {date_str!r}, {time_str!r}): {errors}")

        return ValidationResult(valid=not errors, errors=errors)

    def is_valid_activity(self, activity: Optional[str]) -> bool:
        return bool(activity) and len(activity.strip()) >= 2

    def is_valid_date(self, date_str: Optional[str]) -> bool:
        if not date_str or not isinstance(date_str, str):
            return False
        return parse_date_string(date_str) is not None

    def is_valid_time(self, time_str: Optional[str]) -> bool:
        if not time_str or not isinstance(time_str, str):
            return False
        return bool(_TIME_RE.match(time_str))

    def sanitize_input(self, user_input: Optional[str]) -> str:
        if not user_input:
            return ""

        sanitized = user_input.replace('\x00', '').strip()

        return sanitized

    def is_too_long(self, user_input: str) -> bool:
        return len(user_input) > self.max_message_length


schedule_validator = ScheduleValidator()
