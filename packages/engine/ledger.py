"""Append-only record of the words accepted in one session."""

from __future__ import annotations

from typing import Iterator, List, Set


class GuessLedger:
    """
    Accepted words in insertion order, canonicalized to uppercase.

    record() does not re-check membership; callers ask already_guessed()
    first (GameSession does this as part of its validation pipeline).
    """

    def __init__(self):
        self._words: List[str] = []
        self._seen: Set[str] = set()

    def already_guessed(self, word: str) -> bool:
        return word.upper() in self._seen

    def record(self, word: str) -> None:
        w = word.upper()
        self._words.append(w)
        self._seen.add(w)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)
