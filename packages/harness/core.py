"""
Interactive play loop and the game's user-facing messages.

- welcome_message / outcome_message / result_message: the exact text shown
  to the player for each engine value.
- play: feed lines (stdin or any iterable) into a GameSession one at a time,
  print the message for each guess, and return a per-guess transcript.

The loop knows nothing about argv or exit statuses; the CLI owns those.
"""

from __future__ import annotations

import sys
from typing import Dict, Iterable, List, TextIO

from packages.engine import GameResult, GameSession, GuessOutcome, GuessStatus, ResultKind


def welcome_message(session: GameSession) -> str:
    return (
        "Welcome to unscramble!\n"
        f"Enter words of length {session.min_length} to {session.pool_length} "
        f'made from the letters "{session.letters}"'
    )


def outcome_message(outcome: GuessOutcome, session: GameSession) -> str:
    """One line of feedback for a submitted guess."""
    status = outcome.status
    if status is GuessStatus.ACCEPTED:
        return f"OK! Score so far is {outcome.score}"
    if status is GuessStatus.NON_ALPHABETIC:
        return "Word must contain only letters"
    if status is GuessStatus.TOO_SHORT:
        return f"Word too short - it must be at least {session.min_length} characters long"
    if status is GuessStatus.TOO_LONG:
        return f"Word must be no more than {session.pool_length} characters long"
    if status is GuessStatus.UNFORMABLE:
        return "Word can't be formed with available letters"
    if status is GuessStatus.ALREADY_GUESSED:
        return "You've guessed that word before"
    if status is GuessStatus.NOT_IN_DICTIONARY:
        return "Word can't be found in dictionary"
    raise ValueError(f"unknown guess status: {status!r}")


def result_message(result: GameResult) -> str:
    if result.kind is ResultKind.NO_GUESSES:
        return "No words guessed!"
    return f"Your final score is {result.score}"


def play(
        session: GameSession,
        lines: Iterable[str],
        *,
        out: TextIO | None = None,
) -> List[Dict]:
    """
    Submit every line as a guess until the input runs out.

    Args:
        session: an ACTIVE GameSession (not finalized here; the caller does that)
        lines:   raw input lines; trailing CR/LF is stripped, nothing else
        out:     where feedback is printed (default: sys.stdout)

    Returns:
        list of dicts, one per line read, with keys:
            turn (int), guess (str), status (str), delta (int), score (int)
    """
    out = out or sys.stdout
    transcript: List[Dict] = []

    for turn, line in enumerate(lines, start=1):
        guess = line.rstrip("\r\n")
        outcome = session.submit_guess(guess)
        print(outcome_message(outcome, session), file=out, flush=True)

        transcript.append({
            "turn": turn,
            "guess": guess,
            "status": outcome.status.value,
            "delta": outcome.delta,
            "score": outcome.score,
        })

    return transcript
