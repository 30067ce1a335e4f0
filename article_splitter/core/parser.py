"""
Line parser that splits a stream of lines into articles.

The parser is a four-state machine driven by the classification of each
incoming line (empty, delimiter or content). Lines are buffered until a
delimiter line or the end of input marks the article boundary, at which point
the completed Article is handed to the sink.

States:
    LEADING_EMPTY            blank lines before an article are skipped
    AWAITING_AFTER_DELIMITER repeated delimiter lines are skipped
    IN_CONTENT               lines are appended to the current article
    TRAILING_EMPTY           blank lines are appended and counted so the sink
                             can drop them if a boundary follows
"""

from __future__ import annotations

from typing import Iterable, Protocol

from .titles import TitleExtractor, extract_plain_title
from .types import Article, LineKind, ParserState


class ArticleConsumer(Protocol):
    def submit(self, article: Article) -> None: ...


def is_empty_line(line: str) -> bool:
    """Return True if the line holds nothing but whitespace."""
    return len(line.strip()) == 0


def is_delimiter_line(line: str, char: str, min_length: int) -> bool:
    """Return True if the line is a run of at least `min_length` delimiter chars.

    Only trailing whitespace is ignored. A run preceded by spaces is content.
    """
    trimmed = line.rstrip()
    if len(trimmed) < min_length:
        return False
    return all(c == char for c in trimmed)


class LineParser:
    """Splits lines into articles and submits each to a consumer.

    Call `consume` once per input line and `finish` once at the end, or use
    `parse` to do both for an iterable of lines.
    """

    def __init__(
        self,
        sink: ArticleConsumer,
        delimiter: str = "=",
        min_length: int = 5,
        extract_title: TitleExtractor = extract_plain_title,
    ):
        self._sink = sink
        self._delimiter = delimiter
        self._min_length = min_length
        self._extract_title = extract_title

        self.state = ParserState.LEADING_EMPTY
        self._title = ""
        self._lines: list[str] = []
        self._trailing_empty = 0
        self._finished = False

        self._handlers = {
            ParserState.AWAITING_AFTER_DELIMITER: self._on_after_delimiter,
            ParserState.LEADING_EMPTY: self._on_leading_empty,
            ParserState.IN_CONTENT: self._on_content,
            ParserState.TRAILING_EMPTY: self._on_trailing_empty,
        }

    def classify(self, line: str) -> LineKind:
        if is_empty_line(line):
            return LineKind.EMPTY
        if is_delimiter_line(line, self._delimiter, self._min_length):
            return LineKind.DELIMITER
        return LineKind.CONTENT

    def consume(self, line: str) -> None:
        if self._finished:
            raise RuntimeError("LineParser.consume() called after finish()")
        self._handlers[self.state](line, self.classify(line))

    def finish(self) -> None:
        """Flush the last article if the input did not end with a delimiter."""
        if self._finished:
            raise RuntimeError("LineParser.finish() called twice")
        self._finished = True
        if self.state in (ParserState.IN_CONTENT, ParserState.TRAILING_EMPTY):
            self._flush()
            self.state = ParserState.AWAITING_AFTER_DELIMITER

    def parse(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.consume(line)
        self.finish()

    def _on_after_delimiter(self, line: str, kind: LineKind) -> None:
        if kind is LineKind.EMPTY:
            self.state = ParserState.LEADING_EMPTY
        elif kind is LineKind.CONTENT:
            self._start_article(line)

    def _on_leading_empty(self, line: str, kind: LineKind) -> None:
        if kind is LineKind.DELIMITER:
            self.state = ParserState.AWAITING_AFTER_DELIMITER
            self._lines = []
        elif kind is LineKind.CONTENT:
            self._start_article(line)

    def _on_content(self, line: str, kind: LineKind) -> None:
        if kind is LineKind.EMPTY:
            self.state = ParserState.TRAILING_EMPTY
            self._trailing_empty = 1
            self._lines.append(line)
        elif kind is LineKind.DELIMITER:
            self._flush()
            self.state = ParserState.AWAITING_AFTER_DELIMITER
        else:
            self._lines.append(line)

    def _on_trailing_empty(self, line: str, kind: LineKind) -> None:
        if kind is LineKind.EMPTY:
            self._trailing_empty += 1
            self._lines.append(line)
        elif kind is LineKind.DELIMITER:
            self._flush()
            self.state = ParserState.AWAITING_AFTER_DELIMITER
        else:
            self.state = ParserState.IN_CONTENT
            self._trailing_empty = 0
            self._lines.append(line)

    def _start_article(self, line: str) -> None:
        self._title = self._extract_title(line)
        self.state = ParserState.IN_CONTENT
        self._lines = [line]

    def _flush(self) -> None:
        # The article takes ownership of the buffer; start a fresh one.
        article = Article(
            title=self._title,
            lines=self._lines,
            trailing_empty_count=self._trailing_empty,
        )
        self._lines = []
        self._trailing_empty = 0
        self._sink.submit(article)
