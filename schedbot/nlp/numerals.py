"""Indonesian number words to digit strings."""

from __future__ import annotations

import re

_UNITS = {
    "satu": 1, "dua": 2, "tiga": 3, "empat": 4, "lima": 5,
    "enam": 6, "tujuh": 7, "delapan": 8, "sembilan": 9,
}


def _build_number_words() -> dict[str, str]:
    words = {name: str(value) for name, value in _UNITS.items()}
    words["sepuluh"] = "10"
    words["sebelas"] = "11"
    for name, value in _UNITS.items():
        if value >= 2:
            words[f"{name} belas"] = str(10 + value)
    for tens_name, tens in (("dua", 20), ("tiga", 30), ("empat", 40), ("lima", 50), ("enam", 60)):
        words[f"{tens_name} puluh"] = str(tens)
        if tens < 60:
            for unit_name, unit in _UNITS.items():
                words[f"{tens_name} puluh {unit_name}"] = str(tens + unit)
    return words


NUMBER_WORDS: dict[str, str] = _build_number_words()

# Longest first so "dua puluh lima" wins over "dua", "puluh" and "lima".
_SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(r"\b" + r"\s+".join(re.escape(part) for part in word.split()) + r"\b", re.IGNORECASE), NUMBER_WORDS[word])
    for word in sorted(NUMBER_WORDS, key=len, reverse=True)
)


def expand_number_words(text: str) -> str:
    if not text:
        return ""
    result = text
    for pattern, digits in _SUBSTITUTIONS:
        result = pattern.sub(digits, result)
    return result
