# apps/cli/unscramble.py
"""
CLI entry point for playing unscramble.

Usage:
    unscramble [--min-length numchars] [--dict file] [--letters chars]

This script:
  1) Parses and validates arguments (usage errors, min-length range,
     letter set), generating a random letter pool when none is given.
  2) Loads the dictionary.
  3) Reads guesses from stdin until EOF, printing feedback per guess.
  4) Prints the final result and exits with the matching status.

Optionally (--transcript DIR) writes a per-guess CSV and a JSON manifest.
"""

from __future__ import annotations

import argparse
import logging
import string
import sys
from pathlib import Path
from typing import List

from packages.datasets import DictionaryError, load_dictionary, validate_wordlist
from packages.engine import GameSession, ResultKind, random_letters
from packages.engine.letters import is_ascii_letters
from packages.engine.rules import (
    DEFAULT_DICT,
    DEFAULT_LETTERS_LENGTH,
    DEFAULT_MIN_LENGTH,
    HIGHEST_MIN_LENGTH,
    LOWEST_MIN_LENGTH,
    MAX_LETTERS_LENGTH,
)
from packages.harness import configure_logging, play, result_message, welcome_message
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest

logger = logging.getLogger(__name__)

# Exit statuses
EXIT_OK = 0
EXIT_INVALID_LENGTH = 1
EXIT_INVALID_DICT = 6
EXIT_USAGE = 7
EXIT_SHORT_LETTERS = 11
EXIT_EXCESS_LETTERS = 13
EXIT_NO_GUESSES = 18
EXIT_INVALID_LETTERS = 19

USAGE = "Usage: unscramble [--min-length numchars] [--dict file] [--letters chars]"
FLAGS = ("--min-length", "--dict", "--letters", "--transcript")


class UsageError(Exception):
    """Malformed command line; always reported with the usage line."""


class _UsageParser(argparse.ArgumentParser):
    """argparse that raises instead of printing its own message and exiting."""

    def error(self, message):
        raise UsageError(message)


class _StoreOnce(argparse.Action):
    """Like 'store', but giving the same flag twice is a usage error."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            parser.error(f"duplicate argument {option_string}")
        setattr(namespace, self.dest, values)


def _build_parser() -> argparse.ArgumentParser:
    # Defaults stay None so _StoreOnce can spot repeats; real defaults are
    # applied in parse_args().
    ap = _UsageParser(prog="unscramble", add_help=False, allow_abbrev=False)
    ap.add_argument("--min-length", action=_StoreOnce, default=None)
    ap.add_argument("--dict", action=_StoreOnce, default=None)
    ap.add_argument("--letters", action=_StoreOnce, default=None)
    ap.add_argument("--transcript", action=_StoreOnce, default=None,
                    help="directory for a per-guess CSV and JSON manifest")
    return ap


def _parse_min_length(value: str) -> int:
    """
    A min-length value must be a single non-letter character. Digits give
    their value; any other symbol counts as 0 (and then fails the range check).
    """
    if len(value) != 1 or value in string.ascii_letters:
        raise UsageError(f"bad --min-length value: {value!r}")
    return int(value) if value in string.digits else 0


def parse_args(argv: List[str]) -> argparse.Namespace:
    """
    Parse argv (without program name). Raises UsageError on any malformed
    command line; range and letter checks happen later in main().
    """
    # Arguments come strictly in (flag, value) pairs; a value is taken
    # verbatim even when it starts with "-".
    if len(argv) % 2:
        raise UsageError("arguments must come in flag/value pairs")
    tokens = []
    for flag, value in zip(argv[::2], argv[1::2]):
        if flag not in FLAGS:
            raise UsageError(f"unknown argument {flag!r}")
        tokens.append(f"{flag}={value}")

    args = _build_parser().parse_args(tokens)
    args.min_length = (DEFAULT_MIN_LENGTH if args.min_length is None
                       else _parse_min_length(args.min_length))
    if args.dict is None:
        args.dict = DEFAULT_DICT
    return args


def check_letters(letters: str, min_length: int) -> int:
    """
    Validate a user-supplied letter set. Returns 0 if OK, else the exit
    status after printing the error to stderr.
    """
    if not is_ascii_letters(letters):
        print("unscramble: letter set is invalid", file=sys.stderr)
        return EXIT_INVALID_LETTERS
    if len(letters) > MAX_LETTERS_LENGTH:
        print(f"unscramble: number of letters should be no more than {MAX_LETTERS_LENGTH}",
              file=sys.stderr)
        return EXIT_EXCESS_LETTERS
    if len(letters) < min_length:
        print(f"unscramble: too few letters for the given minimum length ({min_length})",
              file=sys.stderr)
        return EXIT_SHORT_LETTERS
    return 0


def _write_transcript(outdir: str, args: argparse.Namespace, session: GameSession,
                      transcript: list, result) -> None:
    run_id = timestamp_id()
    out = Path(outdir)
    csv_path = write_csv(transcript, str(out / f"session_{run_id}.csv"))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"letters": session.letters, "min_length": session.min_length,
                   "dict": args.dict},
        "dictionary": validate_wordlist(args.dict),
        "accepted": list(session.ledger),
        "result": {"kind": result.kind.value, "score": result.score},
        "num_guesses": len(transcript),
    }
    manifest_path = write_manifest(manifest, str(out / f"session_{run_id}_manifest.json"))
    logger.info("wrote %s and %s", csv_path, manifest_path)


def main(argv: List[str] | None = None) -> int:
    """
    Run one game. Returns the process exit status.
    """
    configure_logging()
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        args = parse_args(argv)
    except UsageError as e:
        logger.debug("usage error: %s", e)
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    if not LOWEST_MIN_LENGTH <= args.min_length <= HIGHEST_MIN_LENGTH:
        print(f"unscramble: minimum length must be between "
              f"{LOWEST_MIN_LENGTH} and {HIGHEST_MIN_LENGTH}", file=sys.stderr)
        return EXIT_INVALID_LENGTH

    if args.letters is None:
        letters = random_letters(DEFAULT_LETTERS_LENGTH)
        logger.info("generated letters %s", letters)
    else:
        status = check_letters(args.letters, args.min_length)
        if status:
            return status
        letters = args.letters

    try:
        dictionary = load_dictionary(args.dict)
    except DictionaryError as e:
        print(f"unscramble: {e}", file=sys.stderr)
        return EXIT_INVALID_DICT

    session = GameSession(letters, args.min_length, dictionary)
    print(welcome_message(session), flush=True)

    transcript = play(session, sys.stdin)
    result = session.finalize()
    print(result_message(result))

    if args.transcript:
        _write_transcript(args.transcript, args, session, transcript, result)

    return EXIT_NO_GUESSES if result.kind is ResultKind.NO_GUESSES else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
