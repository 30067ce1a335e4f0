"""
Core domain models and splitting logic.

This package contains the line parser, title extraction and the article
sink, independent of how input is read or how the run is configured.
"""

from .errors import (
    ArticleWriteError,
    ConfigError,
    InputReadError,
    OutputDirectoryError,
    SplitError,
    TitleNotFoundError,
    WriterStateError,
)
from .types import Article, LineKind, ParserState, RunStats
from .titles import available_title_modes, extract_plain_title, extract_wiki_title, get_title_extractor
from .parser import LineParser, is_delimiter_line, is_empty_line
from .sink import ArticleSink, TitleRegistry

__all__ = [
    "Article",
    "ArticleSink",
    "ArticleWriteError",
    "ConfigError",
    "InputReadError",
    "LineKind",
    "LineParser",
    "OutputDirectoryError",
    "ParserState",
    "RunStats",
    "SplitError",
    "TitleNotFoundError",
    "TitleRegistry",
    "WriterStateError",
    "available_title_modes",
    "extract_plain_title",
    "extract_wiki_title",
    "get_title_extractor",
    "is_delimiter_line",
    "is_empty_line",
]
