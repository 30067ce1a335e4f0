"""Reading input lines from a named file or standard input."""

from __future__ import annotations

from contextlib import contextmanager
import io
from pathlib import Path
import sys
from typing import Iterator, TextIO

from ..core.errors import InputReadError


def describe_source(path: Path | None) -> str:
    if path is None:
        return "stdin"
    return f"file {path}"


@contextmanager
def open_input(path: Path | None, encoding: str = "utf-8") -> Iterator[TextIO]:
    """Yield a text stream for `path`, or standard input when `path` is None.

    Standard input is decoded with `encoding` too and is left open on exit.
    """
    if path is None:
        with _decoded_stdin(encoding) as stream:
            yield stream
        return

    try:
        handle = open(path, "r", encoding=encoding)
    except (OSError, LookupError) as exc:
        raise InputReadError(f"cannot open file {path}: {exc}") from exc
    with handle:
        yield handle


@contextmanager
def _decoded_stdin(encoding: str) -> Iterator[TextIO]:
    buffer = getattr(sys.stdin, "buffer", None)
    # Already decoded streams (e.g. io.StringIO) are used as they are
    if buffer is None:
        yield sys.stdin
        return

    try:
        stream = io.TextIOWrapper(buffer, encoding=encoding)
    except LookupError as exc:
        raise InputReadError(f"cannot open stdin: {exc}") from exc
    try:
        yield stream
    finally:
        # Detach so closing the wrapper never closes the real stdin buffer
        stream.detach()


def read_lines(stream: TextIO, source: str = "stdin") -> Iterator[str]:
    """Yield lines from `stream` without their line terminators.

    Raises:
        InputReadError: If the stream fails or cannot be decoded
    """
    try:
        for raw in stream:
            if raw.endswith("\r\n"):
                yield raw[:-2]
            elif raw.endswith("\n"):
                yield raw[:-1]
            else:
                yield raw
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"cannot read from {source}: {exc}") from exc
