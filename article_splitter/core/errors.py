"""Exceptions raised while splitting input into articles.

Every data, configuration or I/O failure derives from SplitError and is
handled once by the command line. WriterStateError signals a broken calling
discipline and is deliberately not a SplitError.
"""

from __future__ import annotations


class SplitError(Exception):
    """Base class for failures that abort a run."""

    code = "split_error"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ConfigError(SplitError):
    code = "config_error"


class InputReadError(SplitError):
    code = "input_read_error"


class TitleNotFoundError(SplitError):
    """No title could be extracted from the line that starts an article."""

    code = "title_not_found"

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line


class OutputDirectoryError(SplitError):
    code = "output_directory_error"


class ArticleWriteError(SplitError):
    """An output file could not be opened, written or closed."""

    code = "article_write_error"

    def __init__(self, message: str, target: str) -> None:
        super().__init__(message)
        self.target = target


class WriterStateError(RuntimeError):
    """A writer was opened twice, or used without an open file."""
