import io
import json
from pathlib import Path
import pytest

from autocorrect.__main__ import main


def _seed(tmp: Path, name: str = "large") -> Path:
    root = tmp / "dictionaries"; root.mkdir()
    (root / f"{name}.txt").write_text(
        "4\ncat\ncar\ncart\ncare\n", encoding="utf-8",
    )
    return root


@pytest.mark.e2e
def test_default_bootstrap_reads_dictionaries_large(tmp_path: Path, monkeypatch, capsys):
    _seed(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("cat\ncsr\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Enter a word: ", "Already a valid word",
                   "Enter a word: ", "Suggestions:", "car", "care", "cart", "cat",
                   "Enter a word: "]


@pytest.mark.e2e
def test_one_shot_query_and_json(tmp_path: Path, capsys):
    root = _seed(tmp_path, name="words")
    assert main(["--root", str(root), "--dictionary", "words", "--threshold", "1", "--q", "cat"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Already a valid word"]

    assert main(["--root", str(root), "--dictionary", "words", "--q", "cat", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [
        {"word": "cat", "distance": 0},
        {"word": "car", "distance": 1},
        {"word": "cart", "distance": 1},
        {"word": "care", "distance": 2},
    ]


@pytest.mark.e2e
def test_missing_dictionary_fails_startup(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    err = capsys.readouterr()
    assert err.out == ""
    assert err.err.startswith("error:")


@pytest.mark.e2e
def test_malformed_dictionary_fails_startup(tmp_path: Path, capsys):
    root = tmp_path / "d"; root.mkdir()
    (root / "bad.txt").write_text("five\napple\n", encoding="utf-8")
    (root / "short.txt").write_text("3\napple\n", encoding="utf-8")
    assert main(["--root", str(root), "--dictionary", "bad"]) == 1
    assert main(["--root", str(root), "--dictionary", "short"]) == 1
    assert "truncated" in capsys.readouterr().err


@pytest.mark.e2e
def test_negative_threshold_fails_startup(tmp_path: Path, capsys):
    root = _seed(tmp_path)
    assert main(["--root", str(root), "--threshold", "-1"]) == 1
    assert "threshold" in capsys.readouterr().err
