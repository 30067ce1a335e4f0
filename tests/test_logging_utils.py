import json
import logging
from pathlib import Path

from article_splitter.config import LoggingConfig
from article_splitter.logging_utils import JsonlFormatter, log_event, setup_logging


def _close(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()
        handler.close()


def test_setup_logging_console_only():
    logger = setup_logging(LoggingConfig(level="INFO", console=True, file=False))

    assert logger.name == "article_splitter"
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    _close(logger)


def test_setup_logging_writes_jsonl(tmp_path: Path):
    cfg = LoggingConfig(level="INFO", console=False, file=True, filename="run.jsonl")
    logger = setup_logging(cfg, log_dir=tmp_path)

    log_event(logger, "Split start", event="split_start", input="stdin")
    log_event(logger, "Hidden", level=logging.DEBUG, event="article_flushed")
    _close(logger)

    lines = (tmp_path / "run.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["message"] == "Split start"
    assert entry["event"] == "split_start"
    assert entry["input"] == "stdin"
    assert entry["level"] == "INFO"
    assert "timestamp" in entry


def test_setup_logging_plain_format(tmp_path: Path):
    cfg = LoggingConfig(level="DEBUG", console=False, file=True, format="plain", filename="run.log")
    logger = setup_logging(cfg, log_dir=tmp_path)

    log_event(logger, "Article flushed", level=logging.DEBUG, title="foo")
    _close(logger)

    text = (tmp_path / "run.log").read_text(encoding="utf-8")
    assert "DEBUG Article flushed" in text


def test_log_event_ignores_missing_logger():
    log_event(None, "nothing", event="x")


def test_jsonl_formatter_keeps_unicode():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "Titel", None, None)
    record.title = "Überschrift"
    payload = json.loads(JsonlFormatter().format(record))
    assert payload["title"] == "Überschrift"
