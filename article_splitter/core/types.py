"""
Core data types for the Article Splitter.

This module defines the data structures shared by the parser and the sink:
- ParserState: Which part of an article the parser is currently inside
- LineKind: Classification of a single input line
- Article: A completed article handed from the parser to the sink
- RunStats: Aggregate counters for one run
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class ParserState(Enum):
    """States of the line parser.

    AWAITING_AFTER_DELIMITER follows a delimiter line, LEADING_EMPTY is the
    initial state and also follows blank lines outside an article.
    """

    AWAITING_AFTER_DELIMITER = "awaiting_after_delimiter"
    LEADING_EMPTY = "leading_empty"
    IN_CONTENT = "in_content"
    TRAILING_EMPTY = "trailing_empty"


class LineKind(Enum):
    EMPTY = "empty"
    DELIMITER = "delimiter"
    CONTENT = "content"


@dataclass
class Article:
    """A completed article ready for the sink.

    Attributes:
        title: Title extracted from the article's first line
        lines: All buffered lines in input order, including trailing empty lines
        trailing_empty_count: Number of empty lines at the end of `lines`
            that precede the boundary and are not part of the content
    """

    title: str
    lines: list[str] = field(default_factory=list)
    trailing_empty_count: int = 0

    @property
    def content_line_count(self) -> int:
        return len(self.lines) - self.trailing_empty_count

    @property
    def content_lines(self) -> list[str]:
        return self.lines[: self.content_line_count]


@dataclass
class RunStats:
    """Statistics collected while splitting.

    Attributes:
        articles_written: Number of articles flushed to the sink
        total_content_lines: Sum of content lines over all articles
        titles_with_duplicates: Number of titles seen at least twice
        duplicate_file_count: Number of non-first occurrences of any title
    """

    articles_written: int = 0
    total_content_lines: int = 0
    titles_with_duplicates: int = 0
    duplicate_file_count: int = 0

    @property
    def average_lines(self) -> int:
        """Average content lines per article, truncated; 0 without articles."""
        if self.articles_written == 0:
            return 0
        return self.total_content_lines // self.articles_written

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["average_lines"] = self.average_lines
        return data
