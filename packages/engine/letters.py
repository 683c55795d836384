"""
Letter multisets and the "can this word be spelled with these tiles" check.

Conventions:
  - Canonical case is UPPERCASE; every builder uppercases before counting.
  - Only ASCII letters A–Z are letters. Anything else is a caller error
    (InvalidCharacter), because the session rejects such guesses before a
    multiset is ever built.

Two forms of the feasibility check live here:
  - can_form:      one candidate vs one pool (Counter based, short-circuits)
  - formable_mask: a whole word list vs one pool at once (numpy count matrix)
Both implement the same predicate and must agree word by word.
"""

from __future__ import annotations

import random
import string
from collections import Counter
from typing import Iterable

import numpy as np

from .errors import InvalidCharacter
from .rules import DEFAULT_LETTERS_LENGTH

# A multiset is just a Counter keyed by uppercase letter.
LetterMultiset = Counter

ALPHABET = string.ascii_uppercase
_ASCII_LETTERS = frozenset(string.ascii_letters)


def is_ascii_letters(text: str) -> bool:
    """
    True if every character of `text` is an ASCII letter.

    The empty string has no offending character, so it is True here;
    length checks are a separate concern.
    """
    return all(ch in _ASCII_LETTERS for ch in text)


def build_multiset(word: str) -> LetterMultiset:
    """
    Count the letters of `word`, case-insensitively.

    Examples:
      build_multiset("Listen") == build_multiset("SILENT")
      build_multiset("bob")    -> Counter({'B': 2, 'O': 1})

    Raises:
      InvalidCharacter if `word` contains anything but ASCII letters.
    """
    counts: LetterMultiset = Counter()
    for ch in word:
        if ch not in _ASCII_LETTERS:
            raise InvalidCharacter(word, ch)
        counts[ch.upper()] += 1
    return counts


def can_form(candidate: LetterMultiset, pool: LetterMultiset) -> bool:
    """
    Return True if every letter of `candidate` is available in `pool`
    with at least the same count. Letters only in `pool` don't matter.
    """
    for letter, needed in candidate.items():
        # Counter returns 0 for absent keys, which covers "missing letter"
        if pool[letter] < needed:
            return False
    return True


def count_vector(word: str) -> np.ndarray:
    """26-slot letter count vector (A..Z) for an all-letter word."""
    vec = np.zeros(len(ALPHABET), dtype=np.int32)
    for letter, n in build_multiset(word).items():
        vec[ord(letter) - ord("A")] = n
    return vec


def formable_mask(words: Iterable[str], letters: str) -> np.ndarray:
    """
    Vectorised can_form over a word list.

    Builds a (len(words), 26) count matrix in one np.add.at scatter over
    the character codes of all playable words, then compares it row-wise
    against the pool's count vector. Words containing non-letters can never
    be played, so their slot is False rather than an error.

    Returns:
      Boolean array aligned with `words`.
    """
    words = list(words)
    pool = count_vector(letters)

    playable = np.array([is_ascii_letters(w) for w in words], dtype=bool)
    lengths = np.array([len(w) for w in words], dtype=np.intp) * playable

    # Row index of every character, and its column (A=0 .. Z=25)
    text = "".join(w for w, ok in zip(words, playable) if ok).upper()
    cols = np.fromiter(text.encode("ascii"), dtype=np.intp, count=len(text)) - ord("A")
    rows = np.repeat(np.arange(len(words), dtype=np.intp), lengths)

    counts = np.zeros((len(words), len(ALPHABET)), dtype=np.int32)
    np.add.at(counts, (rows, cols), 1)

    return playable & np.all(counts <= pool, axis=1)


def random_letters(length: int = DEFAULT_LETTERS_LENGTH,
                   rng: random.Random | None = None) -> str:
    """
    Draw `length` uppercase letters uniformly (with replacement).

    Pass a seeded random.Random for reproducible pools.
    """
    rng = rng or random.Random()
    return "".join(rng.choice(ALPHABET) for _ in range(length))
