import csv
import io
import json

from packages.engine import GameSession, GuessStatus
from packages.harness import play, result_message, welcome_message, write_csv, write_manifest
from packages.harness.core import outcome_message


def test_play_listen_transcript():
    s = GameSession("LISTEN", 3, ["list", "ten", "silent"])
    out = io.StringIO()
    lines = ["list\n", "ten\n", "list\n", "silents\n", "tell\n", "l!st\n", "ab\n", "nest"]
    t = play(s, lines, out=out)

    assert out.getvalue().splitlines() == [
        "OK! Score so far is 4",
        "OK! Score so far is 7",
        "You've guessed that word before",
        "Word must be no more than 6 characters long",
        "Word can't be formed with available letters",
        "Word must contain only letters",
        "Word too short - it must be at least 3 characters long",
        "Word can't be found in dictionary",
    ]
    assert [r["turn"] for r in t] == list(range(1, 9))
    assert t[0] == {"turn": 1, "guess": "list", "status": "accepted", "delta": 4, "score": 4}
    assert t[-1]["status"] == GuessStatus.NOT_IN_DICTIONARY.value

    assert result_message(s.finalize()) == "Your final score is 7"


def test_messages_welcome_and_no_guesses():
    s = GameSession("abcde", 4, [])
    assert welcome_message(s) == (
        "Welcome to unscramble!\n"
        'Enter words of length 4 to 5 made from the letters "abcde"'
    )
    assert outcome_message(s.submit_guess("abc"), s) == (
        "Word too short - it must be at least 4 characters long"
    )
    assert result_message(s.finalize()) == "No words guessed!"


def test_write_csv_and_manifest(tmp_path):
    s = GameSession("LISTEN", 3, ["list"])
    t = play(s, ["list", "xyz"], out=io.StringIO())

    csv_path = write_csv(t, str(tmp_path / "out" / "session.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["status"] for r in rows] == ["accepted", "unformable"]
    assert rows[0]["score"] == "4"

    m_path = write_manifest({"accepted": list(s.ledger)}, str(tmp_path / "m.json"))
    with open(m_path, encoding="utf-8") as f:
        assert json.load(f) == {"accepted": ["LIST"]}


def test_play_strips_crlf_line_endings():
    s = GameSession("LISTEN", 3, ["list"])
    t = play(s, ["list\r\n", "ten\r"], out=io.StringIO())
    assert [r["guess"] for r in t] == ["list", "ten"]
    assert t[0]["status"] == "accepted"
    assert t[1]["status"] == GuessStatus.NOT_IN_DICTIONARY.value
