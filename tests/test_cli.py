# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from pathlib import Path
from pytest import CaptureFixture, LogCaptureFixture, MonkeyPatch
from spelltrie.cli import classify, SpellTrieCLI
from typing import Any

import io
import json
import pytest

WORDS = "cat\ncot\ncut\ncast\nbook\nreceive\nrecieve\n"


@pytest.fixture(name="base_args")
def fixture_base_args(tmp_path: Path) -> list[str]:
    word_file = tmp_path / "words"
    word_file.write_text(WORDS, encoding="utf-8")
    return ["--config", str(tmp_path / "missing.json"), "--dictionary", str(word_file)]


def test_cli() -> None:
    with pytest.raises(SystemExit) as excinfo:
        SpellTrieCLI().run(args=["--help"])
    assert excinfo.value.code == 0


@pytest.mark.parametrize(
    "word,suggestions,status",
    [
        ("cat", {"cat"}, "exact"),
        ("CAT", {"cat"}, "exact"),
        ("cit", {"cat", "cot", "cut"}, "corrected"),
        ("xyz", set(), "unknown"),
    ],
)
def test_classify(word: str, suggestions: set[str], status: str) -> None:
    assert classify(word, suggestions) == status


def test_check_json(base_args: list[str], capsys: CaptureFixture[str]) -> None:
    assert SpellTrieCLI().run(args=base_args + ["check", "--json", "cit", "recieve", "boook", "bok"]) is None
    records = json.loads(capsys.readouterr().out)
    assert [(r["word"], r["status"], r["suggestions"]) for r in records] == [
        ("cit", "corrected", ["cat", "cot", "cut"]),
        ("recieve", "exact", ["recieve"]),
        ("boook", "corrected", ["book"]),
        ("bok", "unknown", []),
    ]
    assert all(isinstance(r["elapsed"], float) for r in records)


def test_check_table(base_args: list[str], capsys: CaptureFixture[str]) -> None:
    SpellTrieCLI().run(args=base_args + ["check", "cit"])
    out = capsys.readouterr().out
    assert out.splitlines()[0].split() == ["WORD", "STATUS", "ELAPSED"]
    assert "cit   corrected" in out
    assert "suggestions = cat, cot, cut" in out


def test_check_invalid_word(base_args: list[str], capsys: CaptureFixture[str], caplog: LogCaptureFixture) -> None:
    assert SpellTrieCLI().run(args=base_args + ["check", "--json", "don't", "cot"]) == 1
    records = json.loads(capsys.readouterr().out)
    assert records[0] == {"word": "don't", "status": "invalid", "suggestions": [], "elapsed": None}
    assert records[1]["status"] == "exact"
    assert "only the letters a-z" in caplog.text


def test_lookup(base_args: list[str], capsys: CaptureFixture[str]) -> None:
    SpellTrieCLI().run(args=base_args + ["lookup", "cat", "ca"])
    assert capsys.readouterr().out.splitlines() == [
        "WORD  FOUND",
        "====  =====",
        "cat   true",
        "ca    false",
    ]


def test_stats(base_args: list[str], capsys: CaptureFixture[str]) -> None:
    SpellTrieCLI().run(args=base_args + ["stats", "--json"])
    stats = json.loads(capsys.readouterr().out)
    assert stats["source"] == base_args[3]
    assert stats["words"] == 7
    assert stats["nodes"] == 24
    assert stats["elapsed"] >= 0


def test_shell(base_args: list[str], capsys: CaptureFixture[str], monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("cit\ndon't\nxyz\nbook\n-1\nnever read\n"))
    SpellTrieCLI().run(args=base_args + ["shell"])
    out = capsys.readouterr().out
    assert out.startswith("Welcome to the Spell Checker.\n7 word(s) loaded into 24 node(s) in ")
    assert "3 possible correction(s) found in " in out
    assert "Suggestion(s): cat cot cut" in out
    assert "Invalid input! Please try again with a word containing only [a-z]." in out
    assert "No Suggestions" in out
    assert "Suggestion(s): book" in out
    assert out.count("Enter a word ('-1' to quit):") == 5
    assert out.rstrip().endswith("Terminating program execution...")


def test_shell_ends_on_eof(base_args: list[str], capsys: CaptureFixture[str], monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("cit\n"))
    SpellTrieCLI().run(args=base_args + ["shell"])
    assert capsys.readouterr().out.rstrip().endswith("Terminating program execution...")


def test_generate(base_args: list[str], capsys: CaptureFixture[str], tmp_path: Path) -> None:
    output = tmp_path / "generated.txt"
    args = base_args + ["generate", "--count", "12", "--seed", "7", "--terminator", "--output", str(output)]
    SpellTrieCLI().run(args=args)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 13
    assert lines[-1] == "-1"
    assert output.read_text(encoding="utf-8").splitlines() == lines[:-1]

    SpellTrieCLI().run(args=base_args + ["generate", "--count", "12", "--seed", "7"])
    assert capsys.readouterr().out.splitlines() == lines[:-1]


def test_generate_rejects_non_positive_count(base_args: list[str], caplog: LogCaptureFixture) -> None:
    assert SpellTrieCLI().run(args=base_args + ["generate", "--count", "0"]) == 1
    assert "Count must be positive" in caplog.text


def test_verify(base_args: list[str], capsys: CaptureFixture[str]) -> None:
    SpellTrieCLI().run(args=base_args + ["verify", "--json", "--count", "30", "--seed", "3"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["generated"] == 30
    assert summary["exact"] + summary["corrected"] + summary["no_suggestions"] + summary["invalid"] == 30


def test_missing_dictionary(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    args = ["--config", str(tmp_path / "missing.json"), "--dictionary", str(tmp_path / "nope"), "check", "cat"]
    assert SpellTrieCLI().run(args=args) == 1
    assert "command failed: DictionaryError: Unable to open" in caplog.text


def test_dictionary_from_config_file(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    word_file = tmp_path / "words"
    word_file.write_text("book\n", encoding="utf-8")
    config = tmp_path / "spelltrie.json"
    config.write_text(json.dumps({"dictionary": str(word_file)}), encoding="utf-8")

    SpellTrieCLI().run(args=["--config", str(config), "lookup", "--json", "book"])
    assert json.loads(capsys.readouterr().out) == [{"word": "book", "found": True}]


def test_invalid_config_file(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    config = tmp_path / "spelltrie.json"
    config.write_text("not json", encoding="utf-8")
    assert SpellTrieCLI().run(args=["--config", str(config), "lookup", "book"]) == 1
    assert "Invalid JSON in configuration file" in caplog.text


def test_shell_reads_whitespace_separated_words(
    base_args: list[str], capsys: CaptureFixture[str], monkeypatch: MonkeyPatch
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("\n   \ncit cat\n-1\n"))
    SpellTrieCLI().run(args=base_args + ["shell"])
    out = capsys.readouterr().out
    assert "Invalid input!" not in out
    assert "Suggestion(s): cat cot cut" in out
    assert "1 possible correction(s) found in " in out
    assert out.count("Enter a word ('-1' to quit):") == 3


def test_shell_stops_at_quit_word_mid_line(
    base_args: list[str], capsys: CaptureFixture[str], monkeypatch: MonkeyPatch
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("cot -1 cit\n"))
    SpellTrieCLI().run(args=base_args + ["shell"])
    out = capsys.readouterr().out
    assert "Suggestion(s): cot" in out
    assert "cat cot cut" not in out
    assert out.rstrip().endswith("Terminating program execution...")


def test_verify_counts_invalid_misspellings(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    word_file = tmp_path / "words"
    word_file.write_text("don't\n", encoding="utf-8")
    args = ["--config", str(tmp_path / "missing.json"), "--dictionary", str(word_file)]
    SpellTrieCLI().run(args=args + ["verify", "--json", "--count", "5", "--seed", "1"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["generated"] == 5
    assert summary["invalid"] == 5
    assert summary["exact"] == summary["corrected"] == summary["no_suggestions"] == 0


def test_verify_corrects_every_misspelling(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    word_file = tmp_path / "words"
    word_file.write_text("cat\n", encoding="utf-8")
    args = ["--config", str(tmp_path / "missing.json"), "--dictionary", str(word_file)]
    SpellTrieCLI().run(args=args + ["verify", "--json", "--count", "20", "--seed", "2"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["invalid"] == summary["no_suggestions"] == 0
    assert summary["exact"] + summary["corrected"] == 20


def test_verify_reads_dictionary_once(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    calls: list[tuple[str, Any]] = []

    def reader(source: str, timeout: float | None = None) -> list[str]:
        calls.append((source, timeout))
        return ["cat", "cot"]

    args = ["--config", str(tmp_path / "missing.json"), "--dictionary", "words.txt"]
    SpellTrieCLI(reader=reader).run(args=args + ["verify", "--json", "--count", "10"])
    assert calls == [("words.txt", None)]
    assert json.loads(capsys.readouterr().out)["generated"] == 10


def test_reader_receives_source_and_timeout(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    calls: list[tuple[str, Any]] = []

    def reader(source: str, timeout: float | None = None) -> list[str]:
        calls.append((source, timeout))
        return ["book"]

    args = [
        "--config",
        str(tmp_path / "missing.json"),
        "--dictionary",
        "https://example.com/words",
        "--request-timeout",
        "2.5",
        "check",
        "--json",
        "boook",
    ]
    SpellTrieCLI(reader=reader).run(args=args)
    assert calls == [("https://example.com/words", 2.5)]
    assert json.loads(capsys.readouterr().out)[0]["suggestions"] == ["book"]
