"""
Writers that receive article content one line at a time.

ArticleWriter is the interface used by the sink. Exactly one target may be
open at a time; opening twice, or writing/closing with nothing open, raises
WriterStateError.

- FileSystemWriter: writes real files through a buffered text handle
- MemoryWriter: keeps written text in a dict, for tests and dry runs
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from ..core.errors import WriterStateError


class ArticleWriter(ABC):
    """Line-oriented output target used by the article sink."""

    @abstractmethod
    def open(self, identifier: str) -> None:
        """Open `identifier` for writing, truncating any existing content."""
        raise NotImplementedError

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write `text` followed by a newline."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Flush and release the open target."""
        raise NotImplementedError

    @property
    @abstractmethod
    def is_open(self) -> bool:
        raise NotImplementedError


class FileSystemWriter(ArticleWriter):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._handle: TextIO | None = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self, identifier: str) -> None:
        if self._handle is not None:
            raise WriterStateError("Can't open another file at the same time!")
        self._handle = open(identifier, "w", encoding=self.encoding, newline="\n")

    def write_line(self, text: str) -> None:
        if self._handle is None:
            raise WriterStateError("Can't write line before opening a file!")
        self._handle.write(text)
        self._handle.write("\n")

    def close(self) -> None:
        if self._handle is None:
            raise WriterStateError("Can't flush or close yet, no open file!")
        handle, self._handle = self._handle, None
        # close() flushes and releases the descriptor even if the flush fails
        handle.close()


class MemoryWriter(ArticleWriter):
    """Collects written lines per identifier instead of touching the disk."""

    def __init__(self) -> None:
        self._files: dict[str, list[str]] = {}
        self._current: str | None = None

    @property
    def is_open(self) -> bool:
        return self._current is not None

    @property
    def files(self) -> dict[str, str]:
        """Full text per identifier, every line terminated by a newline."""
        return {
            identifier: "".join(f"{line}\n" for line in lines)
            for identifier, lines in self._files.items()
        }

    def open(self, identifier: str) -> None:
        if self._current is not None:
            raise WriterStateError("Can't open another file at the same time!")
        self._current = identifier
        self._files[identifier] = []

    def write_line(self, text: str) -> None:
        if self._current is None:
            raise WriterStateError("Can't write line before opening a file!")
        self._files[self._current].append(text)

    def close(self) -> None:
        if self._current is None:
            raise WriterStateError("Can't flush or close yet, no open file!")
        self._current = None
