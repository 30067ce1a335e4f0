"""
Title extraction for the line that starts a new article.

Two modes are registered:
- plain: the first whitespace-delimited word of the line
- wiki: the text inside the earliest MediaWiki emphasis span
  (''''bold italic'''', '''bold''' or ''italic'')
"""

from __future__ import annotations

import re
from typing import Callable

from .errors import ConfigError, TitleNotFoundError


TitleExtractor = Callable[[str], str]

# Listed in tie-break order: on equal start offsets the earlier entry wins.
WIKI_MARKUP_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("bold_italic", re.compile(r"''''(.+?)''''")),
    ("bold", re.compile(r"'''(.+?)'''")),
    ("italic", re.compile(r"''(.+?)''")),
)


def extract_plain_title(line: str) -> str:
    """Return the first word of the line.

    Raises:
        TitleNotFoundError: If the line contains only whitespace
    """
    words = line.split()
    if not words:
        raise TitleNotFoundError(f"no title found in line: {line}", line)
    return words[0]


def extract_wiki_title(line: str) -> str:
    """Return the text wrapped by the earliest MediaWiki emphasis markup.

    Each of the bold-italic, bold and italic patterns is searched
    independently. The match starting furthest left wins; if two start at
    the same offset, bold-italic beats bold and bold beats italic.

    Examples:
        >>> extract_wiki_title("123 ''foo'' '''bar''' ''''baz''''")
        'foo'
        >>> extract_wiki_title("''''baz'''' baz")
        'baz'

    Raises:
        TitleNotFoundError: If none of the patterns match
    """
    best: re.Match[str] | None = None
    for _, pattern in WIKI_MARKUP_PATTERNS:
        match = pattern.search(line)
        if match is None:
            continue
        if best is None or match.start() < best.start():
            best = match
    if best is None:
        raise TitleNotFoundError(
            f"no title with MediaWiki markup found in line: {line}", line
        )
    return best.group(1)


_EXTRACTOR_REGISTRY: dict[str, TitleExtractor] = {
    "plain": extract_plain_title,
    "wiki": extract_wiki_title,
}


def available_title_modes() -> list[str]:
    """Return the registered title mode names."""
    return sorted(_EXTRACTOR_REGISTRY.keys())


def get_title_extractor(mode: str) -> TitleExtractor:
    """Look up the extractor for a title mode."""
    name = mode.lower().strip()
    extractor = _EXTRACTOR_REGISTRY.get(name)
    if extractor is None:
        supported = ", ".join(available_title_modes())
        raise ConfigError(f"Unsupported title mode: {mode}. Supported: {supported}")
    return extractor
