"""Constants for the front-matter header scanner."""

from __future__ import annotations

import re

FRONTMATTER_DELIMITER: str = "---"
BYTE_ORDER_MARK: str = "\ufeff"

SUMMARY_KEY_PREFIX: str = "summary:"
READ_WHEN_KEY_PREFIX: str = "read_when:"

LIST_BULLET: str = "-"
LIST_BULLET_PREFIX: str = "- "
INLINE_LIST_OPEN: str = "["
INLINE_LIST_CLOSE: str = "]"
INLINE_LIST_SEPARATOR: str = ","

QUOTE_CHARS: tuple[str, ...] = ('"', "'")
WHITESPACE_RUN_PATTERN: re.Pattern[str] = re.compile(r"\s+")
LINE_BREAK_PATTERN: re.Pattern[str] = re.compile(r"\r?\n")
