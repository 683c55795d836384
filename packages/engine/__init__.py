from .dictionary import Dictionary
from .errors import InvalidCharacter, SessionFinalized, UnscrambleError
from .ledger import GuessLedger
from .letters import build_multiset, can_form, formable_mask, random_letters
from .scoring import score_delta
from .session import GameResult, GameSession, GuessOutcome, ResultKind
from .validation import GuessStatus, validate_guess

__all__ = [
    "Dictionary", "GuessLedger", "GameSession", "GuessOutcome", "GameResult",
    "ResultKind", "GuessStatus", "build_multiset", "can_form", "formable_mask",
    "random_letters", "score_delta", "validate_guess",
    "UnscrambleError", "InvalidCharacter", "SessionFinalized",
]
