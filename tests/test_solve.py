from pathlib import Path

from apps.cli.solve import main, max_score, playable_words


def test_playable_words_order_and_dedupe():
    words = ["list", "tell", "silent", "LIST", "ten", "li", "listens", "don't"]
    assert playable_words(words, "LISTEN", 3) == ["LIST", "SILENT", "TEN"]


def test_max_score():
    assert max_score(["LIST", "SILENT", "TEN"], 6) == 4 + 16 + 3


def test_solve_cli(tmp_path: Path, capsys):
    d = tmp_path / "words.txt"
    d.write_text("list\nten\nsilent\nzebra\n", encoding="utf-8")
    assert main(["--letters", "listen", "--dict", str(d), "--min-length", "4"]) == 0
    assert capsys.readouterr().out.splitlines() == ["LIST", "SILENT", "Maximum score: 20"]


def test_solve_cli_missing_dict(tmp_path: Path, capsys):
    assert main(["--letters", "listen", "--dict", str(tmp_path / "nope.txt")]) == 1
    assert "cannot be opened" in capsys.readouterr().err
