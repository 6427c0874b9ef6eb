"""Content moderation for province messages."""

from __future__ import annotations

import re
from collections.abc import Iterable

from province_glow.core.settings import settings

MASK = "***"


class ContentModerator:
    """Redact banned terms from free text.

    All terms are compiled into a single case-insensitive alternation and the
    text is scanned once, so masked output is never re-matched. Overlapping
    matches are masked together while adjacent occurrences each get their own
    mask; moderation never rejects a post.
    """

    def __init__(self, terms: Iterable[str] | None = None, mask: str = MASK) -> None:
        source = settings.banned_words if terms is None else terms
        unique: dict[str, str] = {}
        for term in source:
            cleaned = term.strip()
            if cleaned:
                unique.setdefault(cleaned.casefold(), cleaned)
        # Longest first so the alternation prefers the widest match at a position.
        ordered = sorted(unique.values(), key=len, reverse=True)
        self.terms: tuple[str, ...] = tuple(ordered)
        self.mask = mask
        self._pattern: re.Pattern[str] | None = None
        if ordered:
            alternation = "|".join(re.escape(term) for term in ordered)
            # Zero-width lookahead reports matches starting at every offset, including overlaps.
            self._pattern = re.compile(f"(?=({alternation}))", re.IGNORECASE)

    def _spans(self, text: str) -> list[tuple[int, int]]:
        if self._pattern is None:
            return []
        merged: list[tuple[int, int]] = []
        for match in self._pattern.finditer(text):
            start, end = match.start(1), match.end(1)
            if merged and start < merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((start, end))
        return merged

    def sanitize(self, text: str) -> str:
        """Return ``text`` with every banned term replaced by the mask."""
        if self._pattern is None or not text:
            return text
        pieces: list[str] = []
        cursor = 0
        for start, end in self._spans(text):
            pieces.append(text[cursor:start])
            pieces.append(self.mask)
            cursor = end
        pieces.append(text[cursor:])
        return "".join(pieces)

