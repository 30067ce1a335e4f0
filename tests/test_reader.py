import io
from pathlib import Path

import pytest

from article_splitter.core.errors import InputReadError
from article_splitter.input.reader import describe_source, open_input, read_lines


def test_read_lines_strips_terminators():
    stream = io.StringIO("foo foo\nbar\n\nlast")
    assert list(read_lines(stream)) == ["foo foo", "bar", "", "last"]


def test_read_lines_from_file_with_crlf(tmp_path: Path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"foo foo\r\nbar  \r\n=====\r\n")

    with open_input(path) as stream:
        lines = list(read_lines(stream, describe_source(path)))

    assert lines == ["foo foo", "bar  ", "====="]


def test_open_input_missing_file(tmp_path: Path):
    with pytest.raises(InputReadError, match="cannot open file"):
        with open_input(tmp_path / "missing.txt"):
            pass


def test_read_lines_decode_error(tmp_path: Path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"fine\n\xff\xfe broken\n")

    with open_input(path, encoding="utf-8") as stream:
        with pytest.raises(InputReadError, match="cannot read from file"):
            list(read_lines(stream, describe_source(path)))


def test_open_input_defaults_to_stdin(monkeypatch):
    fake_stdin = io.StringIO("a b\nc\n")
    monkeypatch.setattr("sys.stdin", fake_stdin)

    with open_input(None) as stream:
        assert stream is fake_stdin
        assert list(read_lines(stream, describe_source(None))) == ["a b", "c"]
    assert not fake_stdin.closed


def test_describe_source():
    assert describe_source(None) == "stdin"
    assert describe_source(Path("dump.txt")) == "file dump.txt"


def test_open_input_decodes_stdin_with_encoding(monkeypatch):
    raw = io.BytesIO(b"caf\xe9 x\nbody\n")
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(raw, encoding="utf-8"))

    with open_input(None, encoding="latin-1") as stream:
        lines = list(read_lines(stream, describe_source(None)))

    assert lines == ["café x", "body"]
    assert not raw.closed


def test_open_input_unknown_encoding(tmp_path: Path):
    path = tmp_path / "input.txt"
    path.write_text("foo\n", encoding="utf-8")

    with pytest.raises(InputReadError, match="cannot open file"):
        with open_input(path, encoding="no-such-codec"):
            pass
