"""
Command-line interface for the Article Splitter.

Uses Typer to provide a CLI with options for all major configuration
settings. Options given on the command line override the YAML config file.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .config import load_config
from .core.errors import SplitError
from .runner import run_split

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


@app.command()
def run(
    file: Path | None = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, readable=True,
        help="Input file (default: read stdin).",
    ),
    char: str | None = typer.Option(None, "--char", help="Delimiter character."),
    length: int | None = typer.Option(
        None, "--len", help="Minimum number of delimiter characters."
    ),
    wiki: bool | None = typer.Option(
        None, "--wiki/--no-wiki", help="Detect titles with MediaWiki markup."
    ),
    write: bool | None = typer.Option(
        None, "--write/--no-write", help="Actually write output files."
    ),
    print_titles: bool | None = typer.Option(
        None, "--print/--no-print", help="Print article titles."
    ),
    stats: bool | None = typer.Option(
        None, "--stats/--no-stats", help="Print statistics."
    ),
    outdir: Path | None = typer.Option(None, "--outdir", help="Output directory name."),
    outext: str | None = typer.Option(None, "--outext", help="Output files extension."),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False,
        envvar="ARTICLE_SPLITTER_CONFIG",
        help="YAML config file.",
    ),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Split a text file into articles separated by delimiter lines.

    Each article is named after its title: the first word of its first
    line, or the first MediaWiki-emphasised text with --wiki. Repeated
    titles are written to the duplicates directory as "title (N)".
    Without --write, --print or --stats, only statistics are printed.
    """
    try:
        cfg = load_config(str(config) if config else None)
    except SplitError as exc:
        _fail(exc)

    # Override with CLI options
    if char is not None:
        cfg.split.delimiter = char
    if length is not None:
        cfg.split.min_length = length
    if wiki is not None:
        cfg.split.title_mode = "wiki" if wiki else "plain"
    if write is not None:
        cfg.report.write = write
    if print_titles is not None:
        cfg.report.print_titles = print_titles
    if stats is not None:
        cfg.report.stats = stats
    if outdir is not None:
        cfg.output.directory = str(outdir)
    if outext is not None:
        cfg.output.extension = outext
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    try:
        run_split(file, cfg, show_progress=progress, console=console)
    except SplitError as exc:
        _fail(exc)


def _fail(exc: SplitError) -> None:
    err_console.print(
        f"Error: {exc}", style="bold red", markup=False, highlight=False, soft_wrap=True
    )
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
