from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from packages.engine import Dictionary
from packages.engine.errors import UnscrambleError

logger = logging.getLogger(__name__)


class DictionaryError(UnscrambleError, OSError):
    """The dictionary file could not be opened or read."""

    def __init__(self, path: Path | str):
        super().__init__(f'dictionary named "{path}" cannot be opened')
        self.path = str(path)


def read_lines(p: Path | str, errors: str = "strict") -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    `errors` is passed to the decoder (e.g. "replace" for lenient reads).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8", errors=errors).splitlines()]


def load_dictionary(p: Path | str) -> Dictionary:
    """
    Load a one-word-per-line file into a Dictionary (entries uppercased).

    Lines are kept as-is apart from the line terminator; blank or
    non-alphabetic lines are harmless since no valid guess can match them.
    Undecodable bytes are replaced for the same reason.

    Raises:
      DictionaryError if the file is missing, a directory, or unreadable.
    """
    try:
        lines = read_lines(p, errors="replace")
    except OSError as e:
        raise DictionaryError(p) from e

    logger.info("loaded %d dictionary lines from %s", len(lines), p)
    return Dictionary(lines)
