"""
Guess validation pipeline.

This module answers the question: "Is this guess acceptable right now?"
A guess is accepted iff, checked in this order:
  1) it contains only ASCII letters
  2) it is at least `min_length` long
  3) it is no longer than the letter pool
  4) it can be spelled with the pool's letters (respecting counts)
  5) it hasn't already been accepted this session
  6) it is in the dictionary

The first failing check decides the status; later checks are not run.
"""

from __future__ import annotations

from enum import Enum

from .dictionary import Dictionary
from .ledger import GuessLedger
from .letters import LetterMultiset, build_multiset, can_form, is_ascii_letters


class GuessStatus(str, Enum):
    ACCEPTED = "accepted"
    NON_ALPHABETIC = "non_alphabetic"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    UNFORMABLE = "unformable"
    ALREADY_GUESSED = "already_guessed"
    NOT_IN_DICTIONARY = "not_in_dictionary"


def validate_guess(
        word: str,
        *,
        pool: LetterMultiset,
        pool_length: int,
        min_length: int,
        ledger: GuessLedger,
        dictionary: Dictionary,
) -> GuessStatus:
    """
    Run the six checks above and return the first failure, or ACCEPTED.

    Pure with respect to its arguments: nothing is recorded here. The
    session records the word only after this returns ACCEPTED.
    """
    if not is_ascii_letters(word):
        return GuessStatus.NON_ALPHABETIC

    if len(word) < min_length:
        return GuessStatus.TOO_SHORT

    if len(word) > pool_length:
        return GuessStatus.TOO_LONG

    if not can_form(build_multiset(word), pool):
        return GuessStatus.UNFORMABLE

    if ledger.already_guessed(word):
        return GuessStatus.ALREADY_GUESSED

    if not dictionary.contains(word):
        return GuessStatus.NOT_IN_DICTIONARY

    return GuessStatus.ACCEPTED
