"""
Matching and ranking of candidates against the typed query.

Matching is case-insensitive and tried in three tiers: prefix, contiguous
substring, then an in-order subsequence of the query characters. Records
sort by tier, then by how spread out the match is, then by registration
order, so equally good matches keep the order their source reported.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from prefhints.domain.types import Candidate, HighlightRange, MatchRecord
from prefhints.logger import get_logger

logger = get_logger("completion.matcher")

PREFIX_TIER = 0
SUBSTRING_TIER = 1
SUBSEQUENCE_TIER = 2


@dataclass(frozen=True, slots=True)
class _Match:
    tier: int
    spread: int
    matched: tuple[bool, ...]


class StringMatcher:
    """Produces ``MatchRecord``s with highlight ranges and rank keys."""

    def __init__(self, prefer_prefix_matches: bool = True) -> None:
        self._prefer_prefix_matches = prefer_prefix_matches

    def match(self, candidate: Candidate, query: str, index: int = 0) -> MatchRecord | None:
        """
        Match one candidate.

        Args:
            candidate: Candidate to test
            query: Text typed so far (already stripped of quotes)
            index: Registration order of the candidate, used as tie-break

        Returns:
            The match record, or ``None`` when the candidate does not match.
        """
        text = candidate.raw_text
        found = self._find(text, query)
        if found is None:
            return None
        return MatchRecord(
            candidate=candidate,
            ranges=_ranges(text, found.matched),
            rank_key=(found.tier, found.spread, index, text.lower()),
        )

    def rank(self, candidates: Iterable[Candidate], query: str) -> list[MatchRecord]:
        """Match every candidate and return the survivors, best first."""
        records: list[MatchRecord] = []
        for index, candidate in enumerate(candidates):
            record = self.match(candidate, query, index)
            if record is not None:
                records.append(record)
        records.sort(key=lambda record: record.rank_key)
        logger.debug(f"Ranked {len(records)} match(es) for query {query!r}")
        return records

    def _find(self, text: str, query: str) -> _Match | None:
        if not query:
            return _Match(PREFIX_TIER, 0, (False,) * len(text))

        folded_text = _fold(text)
        folded_query = _fold(query)

        position = folded_text.find(folded_query)
        if position == 0 and self._prefer_prefix_matches:
            return _Match(PREFIX_TIER, 0, _span(len(text), 0, len(query)))
        if position >= 0:
            return _Match(SUBSTRING_TIER, position, _span(len(text), position, len(query)))

        return _subsequence(folded_text, folded_query)


def _fold(text: str) -> str:
    # Characters whose lower-case form is longer are kept as is so offsets line up with text.
    folded = []
    for char in text:
        lower = char.lower()
        folded.append(lower if len(lower) == 1 else char)
    return "".join(folded)


def _span(length: int, start: int, size: int) -> tuple[bool, ...]:
    return tuple(start <= i < start + size for i in range(length))


def _subsequence(text: str, query: str) -> _Match | None:
    flags = [False] * len(text)
    cursor = 0
    for char in query:
        cursor = text.find(char, cursor)
        if cursor < 0:
            return None
        flags[cursor] = True
        cursor += 1

    # Fewer separate runs means a tighter match.
    runs = sum(1 for i, flag in enumerate(flags) if flag and (i == 0 or not flags[i - 1]))
    return _Match(SUBSEQUENCE_TIER, runs, tuple(flags))


def _ranges(text: str, matched: tuple[bool, ...]) -> tuple[HighlightRange, ...]:
    ranges: list[HighlightRange] = []
    start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or matched[i] != matched[start]:
            ranges.append(HighlightRange(text=text[start:i], matched=matched[start]))
            start = i
    return tuple(ranges)
