"""
Article Splitter - split a text dump into one file per article.

This package reads lines from a file or stdin, splits them into articles
at delimiter lines (by default five or more "="), and writes each article
to a file named after its title. Repeated titles go to a duplicates
directory and run statistics are reported at the end.

Main entry point is the CLI via the `article-splitter` command.

Example:
    $ article-splitter --file dump.txt --write --outdir articles
"""

__all__ = [
    "__version__",
    "Article",
    "ArticleSink",
    "LineParser",
    "OutputLayout",
    "RunStats",
    "run_split",
]
__version__ = "0.1.0"

from .core.parser import LineParser
from .core.sink import ArticleSink
from .core.types import Article, RunStats
from .output.layout import OutputLayout
from .runner import run_split
