"""
One run of the game: a fixed letter pool, a minimum length, a dictionary,
the ledger of accepted words and the running score.

Lifecycle:
  ACTIVE --submit_guess()*--> ACTIVE --finalize()--> FINALIZED (terminal)

Rejected guesses are returned as outcomes, never raised, and leave the
session untouched. Only misuse raises (see errors.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .dictionary import Dictionary
from .errors import SessionFinalized
from .ledger import GuessLedger
from .letters import build_multiset, is_ascii_letters
from .scoring import score_delta
from .validation import GuessStatus, validate_guess

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessOutcome:
    """Result of one submit_guess() call."""
    status: GuessStatus
    word: str        # canonical (uppercase) form of the raw guess
    score: int       # running score after this guess
    delta: int = 0   # points added by this guess (0 unless accepted)

    @property
    def accepted(self) -> bool:
        return self.status is GuessStatus.ACCEPTED


class ResultKind(str, Enum):
    NO_GUESSES = "no_guesses"
    COMPLETED = "completed"


@dataclass(frozen=True)
class GameResult:
    kind: ResultKind
    score: int


class SessionState(str, Enum):
    ACTIVE = "active"
    FINALIZED = "finalized"


class GameSession:
    def __init__(self, letters: str, min_length: int,
                 dictionary: Dictionary | Iterable[str]):
        if not letters or not is_ascii_letters(letters):
            raise ValueError(f"letter pool must be non-empty ASCII letters; got {letters!r}")
        # score == 0 is how finalize() detects "nothing accepted"; that only
        # holds while every accepted guess scores at least one point.
        if min_length < 1:
            raise ValueError(f"min_length must be >= 1; got {min_length}")

        self.letters = letters
        self.min_length = int(min_length)
        self.dictionary = dictionary if isinstance(dictionary, Dictionary) else Dictionary(dictionary)
        self.ledger = GuessLedger()
        self.score = 0
        self.state = SessionState.ACTIVE
        self._pool = build_multiset(letters)

    @property
    def pool_length(self) -> int:
        return len(self.letters)

    def submit_guess(self, raw: str) -> GuessOutcome:
        """
        Validate `raw` and, if it passes every check, record it and score it.

        Returns:
          GuessOutcome with the status and the (possibly updated) running score.
        """
        if self.state is SessionState.FINALIZED:
            raise SessionFinalized("cannot submit a guess to a finalized session")

        status = validate_guess(
            raw,
            pool=self._pool,
            pool_length=self.pool_length,
            min_length=self.min_length,
            ledger=self.ledger,
            dictionary=self.dictionary,
        )
        word = raw.upper()

        if status is not GuessStatus.ACCEPTED:
            logger.debug("rejected %r: %s", raw, status.value)
            return GuessOutcome(status=status, word=word, score=self.score)

        self.ledger.record(word)
        delta = score_delta(len(word), self.pool_length)
        self.score += delta
        logger.debug("accepted %s (+%d, total %d)", word, delta, self.score)
        return GuessOutcome(status=status, word=word, score=self.score, delta=delta)

    def finalize(self) -> GameResult:
        """End the session. A zero score means no guess was ever accepted."""
        if self.state is SessionState.FINALIZED:
            raise SessionFinalized("session already finalized")
        self.state = SessionState.FINALIZED

        if self.score == 0:
            return GameResult(kind=ResultKind.NO_GUESSES, score=0)
        return GameResult(kind=ResultKind.COMPLETED, score=self.score)
