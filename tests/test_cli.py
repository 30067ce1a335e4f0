"""Tests for the Typer command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from article_splitter.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv("ARTICLE_SPLITTER_CONFIG", raising=False)


def _input(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "dump.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_writes_articles(tmp_path: Path):
    input_path = _input(tmp_path, "foo foo\nbar\n=====\nfoo foo\n456\n")
    out = tmp_path / "articles"

    result = runner.invoke(
        app, ["--file", str(input_path), "--write", "--outdir", str(out), "--outext", ".md"]
    )

    assert result.exit_code == 0, result.output
    assert (out / "foo.md").read_text(encoding="utf-8") == "foo foo\nbar\n"
    assert (out / "dupes" / "foo (2).md").read_text(encoding="utf-8") == "foo foo\n456\n"


def test_cli_defaults_to_stats_on_stdin(tmp_path: Path):
    result = runner.invoke(app, [], input="foo foo\nbar\n=====\nbaz baz\n")

    assert result.exit_code == 0, result.output
    assert "Number of files: 2" in result.output
    assert "Number of lines: 3" in result.output


def test_cli_prints_titles_with_custom_delimiter(tmp_path: Path):
    input_path = _input(tmp_path, "foo 1\n---\nbar 2\n--\nbaz\n")

    result = runner.invoke(
        app, ["-f", str(input_path), "--char", "-", "--len", "3", "--print"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["foo", "bar"]


def test_cli_wiki_mode(tmp_path: Path):
    input_path = _input(tmp_path, "123 '''foo''' x\n=====\n''''bar'''' y\n")

    result = runner.invoke(app, ["-f", str(input_path), "--wiki", "--print"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["foo", "bar"]


def test_cli_wiki_mode_without_markup_fails(tmp_path: Path):
    input_path = _input(tmp_path, "plain title\nbody\n")

    result = runner.invoke(app, ["-f", str(input_path), "--wiki"])

    assert result.exit_code == 1
    assert "no title with MediaWiki markup found" in result.output


def test_cli_rejects_invalid_delimiter(tmp_path: Path):
    input_path = _input(tmp_path, "foo\n")

    result = runner.invoke(app, ["-f", str(input_path), "--char", "=="])
    assert result.exit_code == 1
    assert "delimiter must be a single character" in result.output

    result = runner.invoke(app, ["-f", str(input_path), "--len", "0"])
    assert result.exit_code == 1
    assert "delimiter length must be 1 or greater" in result.output


def test_cli_refuses_non_empty_output(tmp_path: Path):
    input_path = _input(tmp_path, "foo\n")
    out = tmp_path / "out"
    out.mkdir()
    (out / "old.txt").write_text("x", encoding="utf-8")

    result = runner.invoke(app, ["-f", str(input_path), "--write", "--outdir", str(out)])

    assert result.exit_code == 1
    assert "is not empty" in result.output


def test_cli_options_override_config_file(tmp_path: Path):
    input_path = _input(tmp_path, "foo 1\n~~~\nbar 2\n")
    config = tmp_path / "config.yaml"
    config.write_text(
        "split:\n"
        "  delimiter: '~'\n"
        "  min_length: 3\n"
        "report:\n"
        "  print_titles: true\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["-f", str(input_path), "-c", str(config)])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["foo", "bar"]

    result = runner.invoke(app, ["-f", str(input_path), "-c", str(config), "--len", "4"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["foo"]


def test_cli_missing_input_file(tmp_path: Path):
    result = runner.invoke(app, ["--file", str(tmp_path / "missing.txt")])
    assert result.exit_code != 0


def test_cli_decodes_stdin_with_configured_encoding(tmp_path: Path):
    config = tmp_path / "config.yaml"
    config.write_text("input:\n  encoding: latin-1\n", encoding="utf-8")

    result = runner.invoke(app, ["-c", str(config), "--print"], input=b"caf\xe9 x\nbody\n")

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["café"]


def test_cli_log_file_inside_output_directory(tmp_path: Path, monkeypatch):
    input_path = _input(tmp_path, "foo foo\nbar\n")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    result = runner.invoke(app, ["-f", str(input_path), "--write", "--outdir", ".", "--log-file"])

    assert result.exit_code == 0, result.output
    assert (work / "foo.txt").read_text(encoding="utf-8") == "foo foo\nbar\n"
    assert (work / "article_splitter.jsonl").exists()
