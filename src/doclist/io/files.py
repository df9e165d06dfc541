"""File-level helpers for reading documents."""

from __future__ import annotations

from pathlib import Path

from doclist.constants.parsing import BYTE_ORDER_MARK


def read_document_text(path: Path) -> str:
    """Return the full text of *path*, replacing undecodable bytes and dropping a leading BOM."""
    text = path.read_text(encoding="utf-8", errors="replace")
    return text.removeprefix(BYTE_ORDER_MARK)
