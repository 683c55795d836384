# apps/cli/solve.py
"""
List every dictionary word that can be played from a letter pool.

Usage:
    python -m apps.cli.solve --letters LISTEN [--dict words.txt] [--min-length 3]

Prints the playable words (dictionary order, duplicates dropped), then the
best total score a perfect player could reach with them.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from packages.datasets import load_dictionary, pretty_summary, validate_wordlist
from packages.engine import formable_mask, score_delta
from packages.engine.letters import is_ascii_letters
from packages.engine.rules import DEFAULT_DICT, DEFAULT_MIN_LENGTH
from packages.harness import configure_logging


def playable_words(words: List[str], letters: str, min_length: int) -> List[str]:
    """
    Words (uppercased, first occurrence kept) of length min_length..len(letters)
    that can be spelled with `letters`.
    """
    sized = [w.upper() for w in words if min_length <= len(w) <= len(letters)]
    mask = formable_mask(sized, letters)

    seen, out = set(), []
    for w, ok in zip(sized, mask):
        if ok and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def max_score(words: List[str], pool_length: int) -> int:
    return sum(score_delta(len(w), pool_length) for w in words)


def main(argv: List[str] | None = None) -> int:
    configure_logging()

    ap = argparse.ArgumentParser(description="unscramble: list playable words for a letter pool")
    ap.add_argument("--letters", required=True, help="letter pool (A–Z, any case)")
    ap.add_argument("--dict", default=DEFAULT_DICT, help="dictionary file, one word per line")
    ap.add_argument("--min-length", type=int, default=DEFAULT_MIN_LENGTH,
                    help="shortest word to list")
    ap.add_argument("--validate", action="store_true",
                    help="print a dictionary validation summary to stderr first")
    args = ap.parse_args(argv)

    if not args.letters or not is_ascii_letters(args.letters):
        ap.error("--letters must be non-empty ASCII letters")
    if args.min_length < 1:
        ap.error("--min-length must be at least 1")

    if args.validate:
        print(pretty_summary(validate_wordlist(args.dict)), file=sys.stderr)

    try:
        dictionary = load_dictionary(args.dict)
    except OSError as e:
        print(f"solve: {e}", file=sys.stderr)
        return 1

    words = playable_words(list(dictionary), args.letters, args.min_length)
    for w in words:
        print(w)
    print(f"Maximum score: {max_score(words, len(args.letters))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
