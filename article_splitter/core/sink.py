"""
Article sink: duplicate-title resolution, statistics and file emission.

The sink receives completed articles from the parser in order. For each one
it records the title occurrence, updates the run statistics, computes the
target file through the output layout and, when a writer is configured,
writes the article's content lines (without the trailing empty run).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from ..logging_utils import log_event
from .errors import ArticleWriteError
from .types import Article, RunStats

if TYPE_CHECKING:
    from ..output.layout import OutputLayout
    from ..output.writers import ArticleWriter


class TitleRegistry:
    """Occurrence count per title for one run."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def record(self, title: str) -> tuple[int, int]:
        """Count one more occurrence of `title`.

        Returns:
            Tuple of (previous count, new count); previous is 0 for a new title
        """
        previous = self._counts.get(title, 0)
        count = previous + 1
        self._counts[title] = count
        return previous, count

    def duplicated_titles(self) -> list[str]:
        return [title for title, count in self._counts.items() if count > 1]

    def __len__(self) -> int:
        return len(self._counts)


class ArticleSink:
    """Consumes articles from the parser.

    Bookkeeping always happens. File output only happens when a writer is
    given, and title reporting only when a reporter callback is given.
    """

    def __init__(
        self,
        layout: OutputLayout,
        writer: ArticleWriter | None = None,
        title_reporter: Callable[[str], None] | None = None,
        logger: logging.Logger | None = None,
    ):
        self.layout = layout
        self.writer = writer
        self.title_reporter = title_reporter
        self.logger = logger
        self.registry = TitleRegistry()
        self.stats = RunStats()

    def submit(self, article: Article) -> str:
        """Record and emit one article.

        Returns:
            The target identifier the article was (or would have been) written to

        Raises:
            ArticleWriteError: If the writer fails to open, write or close
        """
        self.stats.articles_written += 1

        previous, occurrence = self.registry.record(article.title)
        if previous > 0:
            self.stats.duplicate_file_count += 1
            if previous == 1:
                self.stats.titles_with_duplicates += 1

        content_lines = article.content_line_count
        self.stats.total_content_lines += content_lines

        target = self.layout.target_for(article.title, occurrence)
        log_event(
            self.logger,
            "Article flushed",
            level=logging.DEBUG,
            event="article_flushed",
            title=article.title,
            occurrence=occurrence,
            target=target,
            content_lines=content_lines,
        )

        if self.writer is not None:
            self._emit(target, article.content_lines)

        if self.title_reporter is not None:
            self.title_reporter(article.title)

        return target

    def _emit(self, target: str, lines: Iterable[str]) -> None:
        writer = self.writer
        try:
            writer.open(target)
        except (OSError, ValueError) as exc:
            raise ArticleWriteError(
                f"cannot open file {target} for writing: {exc}", target
            ) from exc
        try:
            for line in lines:
                writer.write_line(line)
        except (OSError, ValueError) as exc:
            raise ArticleWriteError(f"cannot write file {target}: {exc}", target) from exc
        finally:
            self._close(target)

    def _close(self, target: str) -> None:
        try:
            self.writer.close()
        except (OSError, ValueError) as exc:
            raise ArticleWriteError(f"cannot write file {target}: {exc}", target) from exc
