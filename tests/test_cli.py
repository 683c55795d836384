import io
import json
from pathlib import Path

import pytest
from apps.cli import unscramble
from apps.cli.unscramble import USAGE, main


@pytest.fixture
def words(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("list\nten\nsilent\n", encoding="utf-8")
    return str(p)


def _stdin(monkeypatch, text: str):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


@pytest.mark.parametrize("argv", [
    ["--letters"],                              # flag without value
    ["--colour", "red"],                        # unknown flag
    ["extra"],                                  # positional
    ["--letters", "abc", "--letters", "def"],   # repeated flag
    ["--min-length", "10"],                     # not a single character
    ["--min-length", "a"],                      # a letter
    ["--min", "4"],                             # no abbreviations
    ["--help"],
    ["--letters=abc"],                          # only "--flag value" pairs
    ["--letters=abc", "--dict"],
    ["--letters", "abc", "--dict"],             # odd argument count
])
def test_usage_errors(argv, capsys):
    assert main(argv) == unscramble.EXIT_USAGE
    assert capsys.readouterr().err.strip() == USAGE


@pytest.mark.parametrize("value", ["2", "6", "0", "!"])
def test_min_length_out_of_range(value, capsys):
    assert main(["--min-length", value]) == unscramble.EXIT_INVALID_LENGTH
    assert "minimum length must be between 3 and 5" in capsys.readouterr().err


@pytest.mark.parametrize("letters,status,msg", [
    ("ab1", unscramble.EXIT_INVALID_LETTERS, "letter set is invalid"),
    ("-ab", unscramble.EXIT_INVALID_LETTERS, "letter set is invalid"),
    ("abcdefghijklmn", unscramble.EXIT_EXCESS_LETTERS, "should be no more than 13"),
    ("abc", unscramble.EXIT_SHORT_LETTERS, "too few letters for the given minimum length (4)"),
])
def test_letter_errors(letters, status, msg, capsys):
    assert main(["--letters", letters, "--min-length", "4"]) == status
    assert msg in capsys.readouterr().err


def test_missing_dictionary(tmp_path, capsys):
    missing = str(tmp_path / "nope.txt")
    assert main(["--letters", "listen", "--dict", missing]) == unscramble.EXIT_INVALID_DICT
    assert capsys.readouterr().err.strip() == (
        f'unscramble: dictionary named "{missing}" cannot be opened'
    )


def test_game_completed(words, monkeypatch, capsys):
    _stdin(monkeypatch, "list\nten\nlist\n")
    assert main(["--dict", words, "--letters", "listen"]) == unscramble.EXIT_OK
    assert capsys.readouterr().out.splitlines() == [
        "Welcome to unscramble!",
        'Enter words of length 3 to 6 made from the letters "listen"',
        "OK! Score so far is 4",
        "OK! Score so far is 7",
        "You've guessed that word before",
        "Your final score is 7",
    ]


def test_game_no_guesses(words, monkeypatch, capsys):
    _stdin(monkeypatch, "zzz\n")
    assert main(["--letters", "LISTEN", "--dict", words]) == unscramble.EXIT_NO_GUESSES
    assert capsys.readouterr().out.splitlines()[-1] == "No words guessed!"


def test_random_letters_when_not_given(words, monkeypatch, capsys):
    _stdin(monkeypatch, "")
    assert main(["--dict", words, "--min-length", "5"]) == unscramble.EXIT_NO_GUESSES
    welcome = capsys.readouterr().out.splitlines()[1]
    assert welcome.startswith("Enter words of length 5 to 7 made from the letters ")


def test_transcript_written(words, tmp_path, monkeypatch):
    _stdin(monkeypatch, "list\nnope\n")
    outdir = tmp_path / "reports"
    assert main(["--letters", "listen", "--dict", words,
                 "--transcript", str(outdir)]) == unscramble.EXIT_OK

    manifests = list(outdir.glob("session_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("session_*.csv"))) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["accepted"] == ["LIST"]
    assert m["result"] == {"kind": "completed", "score": 4}
    assert m["dictionary"]["passed"] is True


def test_dict_value_starting_with_dash(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--letters", "listen", "--dict", "-w.txt"]) == unscramble.EXIT_INVALID_DICT
    assert capsys.readouterr().err.strip() == (
        'unscramble: dictionary named "-w.txt" cannot be opened'
    )


def test_dict_value_starting_with_dash_is_loaded(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "-w.txt").write_text("list\n", encoding="utf-8")
    _stdin(monkeypatch, "list\n")
    assert main(["--dict", "-w.txt", "--letters", "listen"]) == unscramble.EXIT_OK
    assert capsys.readouterr().out.splitlines()[-1] == "Your final score is 4"
