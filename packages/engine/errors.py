"""
Exception hierarchy for contract violations inside the engine.

Per-guess rejections are NOT exceptions; they are GuessStatus values
returned by GameSession.submit_guess. These classes only cover misuse
(bad constructor inputs, non-letter text handed to the multiset builder,
calls on a finalized session).
"""


class UnscrambleError(Exception):
    """Base class for all unscramble errors."""


class InvalidCharacter(UnscrambleError, ValueError):
    """Raised when a non-letter reaches code that only accepts letters."""

    def __init__(self, word: str, char: str):
        super().__init__(f"non-letter character {char!r} in {word!r}")
        self.word = word
        self.char = char


class SessionFinalized(UnscrambleError, RuntimeError):
    """Raised when a finalized session is used again."""
