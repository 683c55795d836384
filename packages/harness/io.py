"""
I/O utilities for session transcripts.

Responsibilities:
- write_csv:     flatten a play() transcript into a tidy CSV (one row per guess).
- write_manifest:dump a JSON manifest with config, dictionary report, and result.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

TRANSCRIPT_FIELDS = ["turn", "guess", "status", "delta", "score"]


def write_csv(transcript: List[Dict], path: str) -> str:
    """
    Serialize a session transcript to CSV.

    Schema (columns): turn, guess, status, delta, score

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=TRANSCRIPT_FIELDS)
        w.writeheader()
        for row in transcript:
            w.writerow({k: row.get(k, "") for k in TRANSCRIPT_FIELDS})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing one session.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (letters, min_length, dict)
      - dictionary: output of datasets.validate_wordlist(...)
      - result: {"kind": ..., "score": ...}, accepted words
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
