"""
Scoring rule for an accepted guess.

Conventions:
  - A guess is worth one point per letter.
  - Using every letter of the pool (guess length == pool length exactly)
    earns BONUS_SCORE on top.

The rule is a pure function of two lengths; the session owns the running
total and is the only caller that adds the result to it.
"""

from .rules import BONUS_SCORE


def score_delta(guess_length: int, pool_length: int) -> int:
    """
    Points earned by one accepted guess.

    Examples:
      score_delta(5, 5) -> 15   (5 letters + bonus)
      score_delta(3, 5) -> 3
    """
    delta = guess_length
    if guess_length == pool_length:
        delta += BONUS_SCORE
    return delta
