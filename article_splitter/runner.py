"""
Run orchestration for the Article Splitter.

This module wires one complete run:
1. Validate configuration and set up logging
2. Prepare the output directories (only when writing files)
3. Read input lines and feed them through the parser into the sink
4. Report statistics

Supports an optional progress spinner while reading.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import AppConfig, resolve_report_modes, validate_config
from .core.parser import LineParser
from .core.sink import ArticleSink
from .core.titles import get_title_extractor
from .core.types import RunStats
from .input.reader import describe_source, open_input, read_lines
from .logging_utils import log_event, setup_logging
from .output.layout import OutputLayout
from .output.writers import ArticleWriter, FileSystemWriter


def run_split(
    input_path: Path | None,
    cfg: AppConfig,
    show_progress: bool = False,
    console: Console | None = None,
    writer: ArticleWriter | None = None,
) -> RunStats:
    """Split the input into articles according to `cfg`.

    Args:
        input_path: Input file, or None to read standard input
        cfg: Application configuration
        show_progress: Whether to display a progress spinner
        console: Rich console for titles and statistics (creates default if None)
        writer: Writer to use when writing is enabled. Defaults to a
            FileSystemWriter, in which case the output directories are
            prepared first.

    Returns:
        Statistics for the run

    Raises:
        SplitError: On invalid configuration, unreadable input, a missing
            title or a failed write. Nothing is processed after the failure.
    """
    console = console or Console()
    validate_config(cfg)
    report = resolve_report_modes(cfg.report)
    source = describe_source(input_path)

    layout = OutputLayout(
        directory=cfg.output.directory,
        dupes_dirname=cfg.output.dupes_dirname,
        extension=cfg.output.extension,
    )
    # The log file may live in the output directory, so check emptiness first
    prepared = False
    if report.write and writer is None:
        layout.prepare()
        prepared = True
        writer = FileSystemWriter(encoding=cfg.output.encoding)
    elif not report.write:
        writer = None

    logger = setup_logging(cfg.logging)
    log_event(
        logger,
        "Split start",
        event="split_start",
        input=source,
        output=cfg.output.directory,
        delimiter=cfg.split.delimiter,
        min_length=cfg.split.min_length,
        title_mode=cfg.split.title_mode,
        write=report.write,
    )
    if prepared:
        log_event(
            logger,
            "Output prepared",
            event="output_prepared",
            output=layout.directory,
            dupes=layout.dupes_directory,
        )

    sink = ArticleSink(
        layout,
        writer=writer,
        title_reporter=_title_printer(console) if report.print_titles else None,
        logger=logger,
    )
    parser = LineParser(
        sink,
        delimiter=cfg.split.delimiter,
        min_length=cfg.split.min_length,
        extract_title=get_title_extractor(cfg.split.title_mode),
    )

    with open_input(input_path, cfg.input.encoding) as stream:
        lines = read_lines(stream, source)
        if show_progress:
            _parse_with_progress(parser, lines, source, console)
        else:
            parser.parse(lines)

    stats = sink.stats
    log_event(
        logger,
        "Split finished",
        event="split_finish",
        unique_titles=len(sink.registry),
        duplicated_titles=sink.registry.duplicated_titles(),
        **stats.as_dict(),
    )
    if report.stats:
        _render_stats(stats, console)
    return stats


def _title_printer(console: Console):
    def report(title: str) -> None:
        console.print(title, markup=False, highlight=False, soft_wrap=True)

    return report


def _parse_with_progress(
    parser: LineParser, lines: Iterable[str], source: str, console: Console
) -> None:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed} lines"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"Splitting {source}", total=None)
        for line in lines:
            parser.consume(line)
            progress.advance(task, 1)
        parser.finish()


def _render_stats(stats: RunStats, console: Console) -> None:
    """Display run statistics to the console.

    Args:
        stats: Statistics collected by the sink
        console: Rich console for output
    """
    console.print("[bold]Split summary[/bold]")
    console.print(f"Number of files: {stats.articles_written}")
    console.print(f"Number of lines: {stats.total_content_lines}")
    console.print(f"Average number of lines: {stats.average_lines}")
    console.print(
        f"Number of titles that appeared more than once: {stats.titles_with_duplicates}"
    )
    console.print(f"Number of duplicate files: {stats.duplicate_file_count}")
