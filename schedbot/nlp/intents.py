"""Intent detection rules for schedule commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Intent(Enum):
    HELP = "help"
    STATS = "stats"
    EXPORT = "export"
    REMINDER = "reminder"
    VIEW = "view"
    DELETE = "delete"
    EDIT = "edit"
    SEARCH = "search"
    ADD = "add"
    AMBIGUOUS = "ambiguous"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class IntentRule:
    intent: Intent
    pattern: re.Pattern[str]

    def matches(self, message: str) -> bool:
        return bool(self.pattern.search(message))


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


INTENT_RULES: tuple[IntentRule, ...] = (
    # Order matters: first match wins, so narrow rules sit above the add-verb rule.
    IntentRule(Intent.HELP, _compile(r"^(?:help|bantuan|apa\s+yang\s+bisa|perintah)$")),
    IntentRule(Intent.STATS, _compile(r"^(?:(?:statistik|stats)(?:\s+jadwal)?|berapa\s+jadwal)$")),
    IntentRule(Intent.EXPORT, _compile(r"^(?:export|backup|ekspor)\b")),
    IntentRule(Intent.REMINDER, _compile(r"^(?:reminder|ingatkan)\s+.*(?:menit|jam|hari)")),
    IntentRule(
        Intent.VIEW,
        _compile(
            r"^(?:lihat|tampilkan|show)\s+jadwal|"
            r"^jadwal\s+(?:hari ini|besok|semua)$|"
            r"^(?:lihat\s+)?jadwal$"
        ),
    ),
    IntentRule(Intent.DELETE, _compile(r"^(?:hapus|batalkan|delete)\s+|^(?:bersihkan|clear)(?:\s+jadwal)?$")),
    IntentRule(Intent.EDIT, _compile(r"^(?:ubah|ganti|edit)\s+")),
    IntentRule(Intent.SEARCH, _compile(r"^(?:cari|find)\s+|^kapan\s+(?!(?:ada\s+)?jadwal\s*$)")),
    IntentRule(Intent.ADD, _compile(r"^(?:tambah|buat|jadwalkan|schedule)\s+")),
    IntentRule(Intent.AMBIGUOUS, _compile(r"\bjadwal\b")),
)

_QUANTITY_RE = _compile(r"\b(?:berapa|jumlah)\b|\b(?:hari ini|besok|semua)\b")
_VIEWING_RE = _compile(r"\b(?:lihat|tampilkan|show|kapan|ada|cari|find)\b")


def normalize_message(text: str) -> str:
    return re.sub(r"\s+", " ", str(text or "").strip()).lower()


def classify(message: str, rules: Iterable[IntentRule] = INTENT_RULES) -> Intent:
    text = normalize_message(message)
    if not text:
        return Intent.UNKNOWN

    for rule in rules:
        if rule.matches(text):
            return rule.intent
    return Intent.UNKNOWN


def resolve_ambiguous(message: str) -> Intent:
    """Best guess for a message that mentions "jadwal" without a command verb.

    Returns STATS or VIEW, or AMBIGUOUS when the caller should ask which one was meant.
    """
    text = normalize_message(message)
    if _QUANTITY_RE.search(text):
        return Intent.STATS
    if _VIEWING_RE.search(text):
        return Intent.VIEW
    return Intent.AMBIGUOUS
