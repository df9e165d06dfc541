"""Restricted front-matter extractor for catalog documents.

Only two keys are interpreted: ``summary`` (a scalar) and ``read_when``
(an inline ``[a, b]`` list or a bulleted block). Everything else in the
header block is ignored. The header is scanned line by line instead of
being handed to a YAML parser, so documents whose headers are not valid
YAML still catalog the same way.
"""

from __future__ import annotations

import logging
from pathlib import Path

from doclist.constants.parsing import (
    FRONTMATTER_DELIMITER,
    INLINE_LIST_CLOSE,
    INLINE_LIST_OPEN,
    INLINE_LIST_SEPARATOR,
    LINE_BREAK_PATTERN,
    LIST_BULLET,
    LIST_BULLET_PREFIX,
    QUOTE_CHARS,
    READ_WHEN_KEY_PREFIX,
    SUMMARY_KEY_PREFIX,
    WHITESPACE_RUN_PATTERN,
)
from doclist.io import read_document_text
from doclist.model import (
    EmptySummary,
    Extracted,
    FrontMatter,
    MissingDelimiter,
    MissingSummaryKey,
    UnterminatedBlock,
)
from doclist.types import ScannerState

logger = logging.getLogger(__name__)


def extract_front_matter(path: Path) -> FrontMatter:
    """Read *path* and classify its header block. Never raises."""
    try:
        text = read_document_text(path)
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return MissingDelimiter()
    return parse_front_matter(text)


def parse_front_matter(text: str) -> FrontMatter:
    """Classify the header block of an in-memory document."""
    lines = LINE_BREAK_PATTERN.split(text)
    if not lines or not _is_delimiter(lines[0]):
        return MissingDelimiter()

    closing = _find_closing_delimiter(lines)
    if closing is None:
        return UnterminatedBlock()

    scanner = _HeaderScanner()
    for line in lines[1:closing]:
        scanner.feed(line)

    hints = tuple(scanner.read_when)
    if scanner.raw_summary is None:
        return MissingSummaryKey(read_when=hints)

    summary = normalize_summary(scanner.raw_summary)
    if not summary:
        return EmptySummary(read_when=hints)
    return Extracted(summary=summary, read_when=hints)


def normalize_summary(raw: str) -> str:
    """Strip one pair of surrounding quotes and collapse internal whitespace."""
    return WHITESPACE_RUN_PATTERN.sub(" ", _strip_quotes(raw.strip())).strip()


def parse_inline_list(value: str) -> list[str] | None:
    """Parse ``[a, "b", 'c']`` into hints.

    Returns ``None`` when *value* is not a bracketed list at all, and an
    empty list when the bracket content is malformed.
    """
    if not (value.startswith(INLINE_LIST_OPEN) and value.endswith(INLINE_LIST_CLOSE)):
        return None

    raw_items = _split_inline_items(value[1:-1])
    if raw_items is None:
        return []

    hints: list[str] = []
    for raw_item in raw_items:
        item = raw_item.strip()
        unquoted = _strip_quotes(item)
        if unquoted == item:
            if item[:1] in QUOTE_CHARS or item[-1:] in QUOTE_CHARS:
                return []
            if INLINE_LIST_OPEN in item or INLINE_LIST_CLOSE in item:
                return []
        unquoted = unquoted.strip()
        if unquoted:
            hints.append(unquoted)
    return hints


class _HeaderScanner:
    """Two-state line scanner over the lines between the delimiters."""

    def __init__(self) -> None:
        self.state: ScannerState = "idle"
        self.raw_summary: str | None = None
        self.read_when: list[str] = []

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()
        if self.state == "capturing-list":
            if line == LIST_BULLET or line.startswith(LIST_BULLET_PREFIX):
                hint = line[len(LIST_BULLET) :].strip()
                if hint:
                    self.read_when.append(hint)
                return
            if not line:
                return
            self.state = "idle"
        self._dispatch_key(line)

    def _dispatch_key(self, line: str) -> None:
        if line.startswith(SUMMARY_KEY_PREFIX):
            # Later summary lines overwrite earlier ones.
            self.raw_summary = line[len(SUMMARY_KEY_PREFIX) :]
            return
        if line.startswith(READ_WHEN_KEY_PREFIX):
            self.state = "capturing-list"
            inline = parse_inline_list(line[len(READ_WHEN_KEY_PREFIX) :].strip())
            if inline is not None:
                self.read_when.extend(inline)
                self.state = "idle"


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_DELIMITER


def _find_closing_delimiter(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            return index
    return None


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def _split_inline_items(content: str) -> list[str] | None:
    """Split on commas outside quotes; ``None`` when a quote is left open.

    A quote only opens at the start of an item, so apostrophes inside bare
    words stay literal.
    """
    items: list[str] = []
    current: list[str] = []
    open_quote: str | None = None
    for char in content:
        if open_quote is not None:
            current.append(char)
            if char == open_quote:
                open_quote = None
            continue
        if char == INLINE_LIST_SEPARATOR:
            items.append("".join(current))
            current = []
            continue
        if char in QUOTE_CHARS and not "".join(current).strip():
            open_quote = char
        current.append(char)
    if open_quote is not None:
        return None
    items.append("".join(current))
    return items
