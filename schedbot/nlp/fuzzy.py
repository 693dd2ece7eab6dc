"""Approximate matching of keywords against schedule activities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rapidfuzz import fuzz, utils
from rapidfuzz.distance import Levenshtein

from ..schemas import ScheduleEntry

EXACT_MATCH_BONUS = 10.0
PARTIAL_MATCH_BONUS = 5.0
FUZZY_MATCH_BONUS = 2.0
POSITION_BONUS = 3.0
FUZZY_CUTOFF = 0.7


@dataclass(frozen=True)
class MatchCandidate:
    entry: ScheduleEntry
    index: int
    # 0.0 is a perfect match, 1.0 is no resemblance.
    score: float

    @property
    def match_percent(self) -> int:
        return round((1 - self.score) * 100)


def levenshtein_distance(first: str, second: str) -> int:
    return Levenshtein.distance(first or "", second or "")


def similarity(first: str, second: str) -> float:
    if not first and not second:
        return 1.0
    if not first or not second:
        return 0.0
    max_len = max(len(first), len(second))
    return 1 - levenshtein_distance(first, second) / max_len


def relevance_score(search_term: str, target_text: str) -> float:
    search_lower = (search_term or "").lower()
    target_lower = (target_text or "").lower()
    score = 0.0

    if target_lower == search_lower:
        score += EXACT_MATCH_BONUS

    position = target_lower.find(search_lower) if search_lower else -1
    if position >= 0:
        score += PARTIAL_MATCH_BONUS
        if position == 0:
            score += POSITION_BONUS
        elif position < len(target_lower) * 0.3:
            score += POSITION_BONUS / 2

    ratio = similarity(search_lower, target_lower)
    if ratio > FUZZY_CUTOFF:
        score += FUZZY_MATCH_BONUS * ratio

    return score


def fuzzy_search(query: str, entries: Sequence[ScheduleEntry], threshold: float) -> list[MatchCandidate]:
    """Entries whose activity resembles the query, best first.

    threshold bounds the accepted score: 0.0 admits only perfect matches,
    1.0 admits everything.
    """
    needle = utils.default_process(query or "")
    if not needle:
        return []

    candidates: list[MatchCandidate] = []
    for index, entry in enumerate(entries):
        ratio = fuzz.partial_ratio(needle, utils.default_process(entry.activity))
        score = 1 - ratio / 100
        if score <= threshold:
            candidates.append(MatchCandidate(entry=entry, index=index, score=score))

    # Equal distances fall back to the additive relevance score.
    candidates.sort(key=lambda candidate: (candidate.score, -relevance_score(query, candidate.entry.activity)))
    return candidates
