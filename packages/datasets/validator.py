"""
Dictionary word-list validator.

What this module does:
- Check a dictionary file (one word per line) for lines the game can never
  match: blanks, non-letters, words longer than the largest letter pool.
- Detect case-insensitive duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

The game itself tolerates all of the above (such lines simply never match),
so this is a diagnostic, not a gate.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.letters import is_ascii_letters
from packages.engine.rules import MAX_LETTERS_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (case-insensitive)
    invalid_lines: int   # number of invalid lines encountered
    max_length: int      # longest playable word length used for the check
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, max_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line (surrounding whitespace is an error, not trimmed,
        since the game compares lines verbatim)
      - ASCII letters only, any case
      - length 1..max_length
      - empty lines are INVALID

    Returns:
      (valid_words_uppercased, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if w and is_ascii_letters(w) and len(w) <= max_length:
                valid.append(w.upper())
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, max_length: int = MAX_LETTERS_LENGTH) -> Dict:
    """
    Validate a dictionary file for use with letter pools up to `max_length`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema) with
        counts, SHA-256, duplicate/invalid diagnostics, a `passed` boolean
        (strict: file exists, non-empty, no invalid lines) and `issues`.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.is_file():
        issues.append(f"dictionary file not found: {path}")
        rep = WordlistReport(path, False, 0, "", 0, 0, max_length, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, max_length)
    unique = set(words)

    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if len(words) != len(unique):
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        seen, dupes = set(), []
        for w in words:
            if w in seen and w not in dupes:
                dupes.append(w)
            seen.add(w)
        issues.append(f"dictionary contains duplicate words (e.g., {dupes[:5]})")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        max_length=max_length,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | words=235886 (uniq=234371, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
