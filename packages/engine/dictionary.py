"""
Read-only word list used to decide whether a guess is a real word.

Entries are uppercased at construction; lookups uppercase the query, so
matching is exact but case-insensitive. Load order is kept for enumeration
(the solve tool lists words in dictionary order).
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, Tuple


class Dictionary:
    def __init__(self, words: Iterable[str]):
        self._ordered: Tuple[str, ...] = tuple(w.upper() for w in words)
        self._lookup: FrozenSet[str] = frozenset(self._ordered)

    def contains(self, word: str) -> bool:
        """Exact (canonicalized) membership; no partial or fuzzy matching."""
        return word.upper() in self._lookup

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} words)"
