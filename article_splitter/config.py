"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SplitConfig: Delimiter detection and title extraction
- InputConfig: Input decoding
- OutputConfig: Output directory layout and file naming
- ReportConfig: Which outputs a run produces (files, titles, statistics)
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Example config.yaml:

    split:
      delimiter: "-"
      min_length: 3
      title_mode: wiki
    output:
      directory: articles
      extension: .md
    report:
      write: true
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import yaml

from .core.errors import ConfigError
from .core.titles import available_title_modes


@dataclass
class SplitConfig:
    """Configuration for splitting lines into articles.

    Attributes:
        delimiter: Single character that makes up delimiter lines
        min_length: Minimum number of delimiter characters on a delimiter line
        title_mode: "plain" for the first word, "wiki" for MediaWiki emphasis markup
    """

    delimiter: str = "="
    min_length: int = 5
    title_mode: str = "plain"


@dataclass
class InputConfig:
    """Configuration for reading input.

    Attributes:
        encoding: Text encoding of the input file or stdin
    """

    encoding: str = "utf-8"


@dataclass
class OutputConfig:
    """Configuration for output files.

    Attributes:
        directory: Output directory name
        dupes_dirname: Directory inside `directory` for duplicate titles
        extension: Output file extension, may be empty
        encoding: Text encoding of written files
    """

    directory: str = "output"
    dupes_dirname: str = "dupes"
    extension: str = ".txt"
    encoding: str = "utf-8"


@dataclass
class ReportConfig:
    """Configuration for what a run produces.

    When none of the three is enabled, statistics are printed.

    Attributes:
        write: Whether to actually write article files
        print_titles: Whether to print each article title
        stats: Whether to print run statistics at the end
    """

    write: bool = False
    print_titles: bool = False
    stats: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
        file: Whether to log to a file
        format: Log file format ("jsonl" or "plain")
        filename: Path of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "article_splitter.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    split: SplitConfig = field(default_factory=SplitConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS: dict[str, type] = {
    "split": SplitConfig,
    "input": InputConfig,
    "output": OutputConfig,
    "report": ReportConfig,
    "logging": LoggingConfig,
}


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig.

    Unknown sections and unknown keys inside a section are ignored.
    """
    data = asdict(base)
    for key, value in raw.items():
        if key not in data or not isinstance(value, dict):
            continue
        known = data[key]
        known.update({k: v for k, v in value.items() if k in known})
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(**{name: cls(**data[name]) for name, cls in _SECTIONS.items()})


def validate_config(cfg: AppConfig) -> None:
    """Check values that would otherwise fail deep inside a run.

    Raises:
        ConfigError: On an invalid delimiter, length or title mode
    """
    if not isinstance(cfg.split.min_length, int) or cfg.split.min_length <= 0:
        raise ConfigError("delimiter length must be 1 or greater")
    if not isinstance(cfg.split.delimiter, str) or len(cfg.split.delimiter) != 1:
        raise ConfigError("delimiter must be a single character")
    if cfg.split.title_mode.lower().strip() not in available_title_modes():
        supported = ", ".join(available_title_modes())
        raise ConfigError(
            f"Unsupported title mode: {cfg.split.title_mode}. Supported: {supported}"
        )


def resolve_report_modes(cfg: ReportConfig) -> ReportConfig:
    """Turn statistics on when no other output was requested."""
    if not cfg.write and not cfg.print_titles and not cfg.stats:
        cfg.stats = True
    return cfg
